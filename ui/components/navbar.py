# -*- coding: utf-8 -*-
"""
Navbar Component

Layout: [Brand] [Spacer] [Track Case ID search] [Theme switcher]

Signals:
    home_requested(): brand clicked, return to the start of the wizard
    search_requested(str): case ID submitted from the search box
    theme_selected(Theme): theme button clicked
"""

from PyQt5.QtWidgets import (
    QButtonGroup, QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget
)
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from models.wizard_state import Theme
from ..design_system import Spacing


class ClickableLabel(QLabel):
    """Label that emits clicked on left mouse release."""

    clicked = pyqtSignal()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
            event.accept()
        super().mouseReleaseEvent(event)


class Navbar(QWidget):
    """Top navigation bar."""

    home_requested = pyqtSignal()
    search_requested = pyqtSignal(str)
    theme_selected = pyqtSignal(object)

    THEME_LABELS = {
        Theme.LIGHT: ("☀", "Light theme"),
        Theme.DARK: ("☾", "Dark theme"),
        Theme.OLIVE: ("♣", "Olive theme"),
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Navbar")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.theme_buttons = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(Spacing.LG, Spacing.SM, Spacing.LG, Spacing.SM)
        layout.setSpacing(Spacing.MD)
        self.setFixedHeight(Config.NAVBAR_HEIGHT)

        # Brand
        self.brand_label = ClickableLabel("FINANCIAL")
        self.brand_label.setObjectName("BrandLabel")
        self.brand_label.setCursor(Qt.PointingHandCursor)
        self.brand_label.clicked.connect(self.home_requested.emit)
        layout.addWidget(self.brand_label)

        self.brand_accent = ClickableLabel("PROTECTION")
        self.brand_accent.setObjectName("BrandAccent")
        self.brand_accent.setCursor(Qt.PointingHandCursor)
        self.brand_accent.clicked.connect(self.home_requested.emit)
        layout.addWidget(self.brand_accent)

        layout.addStretch()

        # Search
        self.search_input = QLineEdit()
        self.search_input.setObjectName("SearchBox")
        self.search_input.setPlaceholderText("Track Case ID")
        self.search_input.setFixedWidth(180)
        self.search_input.setClearButtonEnabled(True)
        self.search_input.returnPressed.connect(self._on_search_submitted)
        layout.addWidget(self.search_input)

        # Theme switcher
        self.theme_group = QButtonGroup(self)
        self.theme_group.setExclusive(True)
        for theme in Theme:
            icon_text, tooltip = self.THEME_LABELS[theme]
            btn = QPushButton(icon_text)
            btn.setObjectName("ThemeButton")
            btn.setToolTip(tooltip)
            btn.setCheckable(True)
            btn.setCursor(Qt.PointingHandCursor)
            btn.clicked.connect(lambda _checked, t=theme: self.theme_selected.emit(t))
            self.theme_group.addButton(btn)
            self.theme_buttons[theme] = btn
            layout.addWidget(btn)

    def _on_search_submitted(self):
        self.search_requested.emit(self.search_input.text())

    def set_active_theme(self, theme: Theme):
        """Reflect the current theme on the switcher without emitting."""
        button = self.theme_buttons.get(theme)
        if button is not None and not button.isChecked():
            button.setChecked(True)
