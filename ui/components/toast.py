# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from app.config import Config
from utils.helpers import truncate_text


class Toast(QLabel):
    """Toast notification popup."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    COLORS = {
        SUCCESS: "#16A34A",
        ERROR: "#DC2626",
        WARNING: "#F59E0B",
        INFO: "#0EA5E9",
    }

    MAX_LENGTH = 240

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast-notification")
        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self._fade_out)
        self._setup_ui()

    def _setup_ui(self):
        """Setup toast UI."""
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(520)

        # Opacity effect for fade animation
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self.hide()

    def show_message(self, message: str, toast_type: str = INFO, duration: int = None):
        """
        Show a toast message.

        Args:
            message: Message text
            toast_type: Type (success, error, warning, info)
            duration: Display duration in milliseconds
        """
        self.setText(truncate_text(message, self.MAX_LENGTH))
        self.setProperty("type", toast_type)

        color = self.COLORS.get(toast_type, "#333")
        text_color = "#1F2937" if toast_type == self.WARNING else "white"
        self.setStyleSheet(f"""
            QLabel#toast-notification {{
                background-color: {color};
                color: {text_color};
                padding: 12px 24px;
                border-radius: 8px;
                font-size: 13px;
            }}
        """)

        # Position at bottom center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            x = (parent_rect.width() - self.width()) // 2
            y = parent_rect.height() - self.height() - 40
            self.move(x, y)

        self.show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(self.opacity_effect.opacity())
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        # Restart so a newer message gets its full duration
        self._hide_timer.start(duration or Config.TOAST_DURATION_MS)

    def _fade_out(self):
        """Fade out and hide."""
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, message: str, toast_type: str = "info", duration: int = None):
        """
        Convenience method to show a toast on a widget.

        Args:
            parent: Parent widget
            message: Message text
            toast_type: Type (success, error, warning, info)
            duration: Display duration
        """
        toast = parent.findChild(Toast, "toast-notification")
        if not toast:
            toast = Toast(parent)

        toast.show_message(message, toast_type, duration)
        return toast
