# -*- coding: utf-8 -*-
"""
Main application window.

Hosts the navbar, one page per wizard stage in a stacked widget, and the
footer. The window owns no wizard state: it renders whatever stage the
WizardController reports and binds that page to the stage's contract.
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import (
    QLabel, QMainWindow, QScrollArea, QStackedWidget, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt

from .config import Config
from controllers.wizard_controller import WizardController
from models.wizard_state import Stage
from services.theme_store import widget_attribute_writer
from ui.components.navbar import Navbar
from ui.components.toast import Toast
from ui.design_system import Spacing
from ui.error_handler import ErrorHandler
from ui.pages.base_stage_page import BaseStagePage
from ui.pages.intake_page import IntakePage
from ui.pages.intro_page import IntroPage
from ui.pages.login_page import LoginPage
from ui.pages.success_page import SuccessPage
from ui.style_manager import StyleManager
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: Optional[WizardController] = None, parent=None):
        super().__init__(parent)
        self.controller = controller or WizardController(parent=self)
        self._current_page: Optional[BaseStagePage] = None

        self._setup_window()
        self._create_widgets()
        self._setup_layout()
        self._connect_signals()

        # Mirror the initial theme and render the initial stage
        self.controller.theme_store.attach(widget_attribute_writer(self.root))
        self.navbar.set_active_theme(self.controller.theme)
        self._show_stage(self.controller.stage)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _create_widgets(self):
        self.root = QWidget()
        self.root.setObjectName(StyleManager.ROOT_NAME)
        self.root.setAttribute(Qt.WA_StyledBackground, True)
        self.root.setStyleSheet(StyleManager.app_stylesheet())

        self.navbar = Navbar()

        self.pages: Dict[Stage, BaseStagePage] = {
            Stage.INTRO: IntroPage(),
            Stage.LOGIN: LoginPage(),
            Stage.FORM: IntakePage(),
            Stage.SUCCESS: SuccessPage(),
        }
        self.stack = QStackedWidget()
        for page in self.pages.values():
            self.stack.addWidget(page)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.stack)

        self.footer = self._create_footer()

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setObjectName("Footer")
        layout = QVBoxLayout(footer)
        layout.setContentsMargins(Spacing.MD, Spacing.MD, Spacing.MD, Spacing.MD)
        layout.setSpacing(Spacing.XS)

        secure = QLabel("🔒 256-bit SSL Secure • Official Reporting Portal")
        secure.setObjectName("MutedLabel")
        secure.setAlignment(Qt.AlignCenter)
        layout.addWidget(secure)

        disclaimer = QLabel(
            "Legal Disclaimer: This platform provides documentation and preliminary assessment. "
            "We strictly adhere to RBI/SEBI safety norms. We never charge recovery fees."
        )
        disclaimer.setObjectName("MutedLabel")
        disclaimer.setAlignment(Qt.AlignCenter)
        disclaimer.setWordWrap(True)
        layout.addWidget(disclaimer)
        return footer

    def _setup_layout(self):
        layout = QVBoxLayout(self.root)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.navbar)
        layout.addWidget(self.scroll_area, 1)
        layout.addWidget(self.footer)
        self.setCentralWidget(self.root)

    def _connect_signals(self):
        self.navbar.home_requested.connect(self.controller.reset)
        self.navbar.theme_selected.connect(self.controller.set_theme)
        self.navbar.search_requested.connect(self.controller.track_case)

        self.controller.stage_changed.connect(self._show_stage)
        self.controller.scroll_to_top_requested.connect(self._scroll_to_top)
        self.controller.notice_requested.connect(self._show_notice)
        self.controller.theme_store.theme_changed.connect(self.navbar.set_active_theme)

    # =========================================================================
    # Controller signal handlers
    # =========================================================================

    def _show_stage(self, stage: Stage):
        """Swap the visible page and bind it to the new stage's contract."""
        if self._current_page is not None:
            self._current_page.unbind()

        page = self.pages[stage]
        self._current_page = page
        self.stack.setCurrentWidget(page)
        self.setWindowTitle(f"{Config.APP_TITLE} - {stage.title}")
        try:
            page.bind(self.controller.contract_for_current_stage())
        except Exception as e:
            ErrorHandler.handle(e, self, f"opening the {stage.value} step")

    def _scroll_to_top(self):
        self.scroll_area.verticalScrollBar().setValue(0)

    def _show_notice(self, message: str, toast_type: str):
        Toast.notify(self, message, toast_type)

    @property
    def current_page(self) -> Optional[BaseStagePage]:
        return self._current_page

    def closeEvent(self, event):
        self.controller.engine.cancel()
        super().closeEvent(event)
