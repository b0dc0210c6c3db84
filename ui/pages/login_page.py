# -*- coding: utf-8 -*-
"""
Login page: captures free-text contact details.

No authentication happens here; the text is only stored on the case.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QLineEdit, QPushButton

from app.config import Config
from controllers.stage_contracts import LoginContract
from services.intake_validator import IntakeValidator
from ui.error_handler import with_error_boundary
from .base_stage_page import BaseStagePage, StepValidationResult


class LoginPage(BaseStagePage):
    """Contact details stage."""

    def setup_ui(self):
        self.add_title(
            "How can we reach you?",
            "Enter a mobile number or email address. An officer will use it to contact you about your case."
        )

        label = QLabel("Phone or email")
        self.main_layout.addWidget(label)

        self.contact_input = QLineEdit()
        self.contact_input.setPlaceholderText("e.g. +91 98xxxxxx10 or name@example.com")
        self.contact_input.setMaxLength(Config.CONTACT_MAX_LENGTH)
        self.contact_input.returnPressed.connect(lambda: self._on_continue_clicked())
        self.main_layout.addWidget(self.contact_input)

        self.btn_continue = QPushButton("Continue")
        self.btn_continue.setObjectName("PrimaryButton")
        self.btn_continue.setCursor(Qt.PointingHandCursor)
        self.btn_continue.clicked.connect(lambda: self._on_continue_clicked())
        self.main_layout.addWidget(self.btn_continue, 0, Qt.AlignLeft)

    def populate(self, contract: LoginContract):
        self.contact_input.setFocus()

    def validate(self) -> StepValidationResult:
        result = StepValidationResult()
        is_valid, message = IntakeValidator.validate_contact(self.contact_input.text())
        if not is_valid:
            result.add_error(message)
        return result

    @with_error_boundary("saving contact details")
    def _on_continue_clicked(self):
        contract: LoginContract = self.contract
        if contract is None:
            return

        result = self.validate()
        if not result.is_valid:
            self.show_errors(result)
            return

        self.clear_errors()
        contract.on_continue(self.contact_input.text().strip())
