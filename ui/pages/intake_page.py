# -*- coding: utf-8 -*-
"""
Intake form page: collects the incident details of the scam report.

The collected payload is handed over wholesale through the intake
contract; the rest of the application treats it as opaque.
"""

from pathlib import Path
from typing import Any, Dict

from PyQt5.QtCore import QDate, Qt
from PyQt5.QtWidgets import (
    QComboBox, QDateEdit, QFileDialog, QFormLayout, QHBoxLayout,
    QLineEdit, QListWidget, QPushButton, QTextEdit
)

from app.config import Config, Vocabularies
from controllers.stage_contracts import IntakeContract
from services.intake_validator import IntakeValidator
from ui.error_handler import with_error_boundary
from .base_stage_page import BaseStagePage, StepValidationResult


class IntakePage(BaseStagePage):
    """Incident details stage."""

    def setup_ui(self):
        self.add_title(
            "What happened?",
            "Share as much as you can. Transaction references help banks trace the money."
        )

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignLeft)
        form.setVerticalSpacing(12)

        self.scam_type_combo = QComboBox()
        self.scam_type_combo.addItem("Select scam type", None)
        for code, name in Vocabularies.SCAM_TYPES:
            self.scam_type_combo.addItem(name, code)
        form.addRow("Type of scam", self.scam_type_combo)

        self.amount_input = QLineEdit()
        self.amount_input.setPlaceholderText(f"Amount lost ({Config.DEFAULT_CURRENCY})")
        form.addRow("Amount lost", self.amount_input)

        self.payment_method_combo = QComboBox()
        for code, name in Vocabularies.PAYMENT_METHODS:
            self.payment_method_combo.addItem(name, code)
        form.addRow("Paid via", self.payment_method_combo)

        self.incident_date = QDateEdit()
        self.incident_date.setCalendarPopup(True)
        self.incident_date.setDisplayFormat("dd/MM/yyyy")
        form.addRow("Date of incident", self.incident_date)

        self.scammer_contact_input = QLineEdit()
        self.scammer_contact_input.setPlaceholderText("Phone, UPI ID, website or account used by the scammer")
        form.addRow("Scammer details", self.scammer_contact_input)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Describe how you were contacted and what you were asked to do.")
        self.description_input.setMinimumHeight(120)
        form.addRow("Description", self.description_input)

        self.main_layout.addLayout(form)

        evidence_row = QHBoxLayout()
        self.evidence_list = QListWidget()
        self.evidence_list.setMaximumHeight(90)
        evidence_row.addWidget(self.evidence_list, 1)

        self.btn_add_evidence = QPushButton("Attach evidence")
        self.btn_add_evidence.setObjectName("SecondaryButton")
        self.btn_add_evidence.clicked.connect(lambda: self._on_add_evidence_clicked())
        evidence_row.addWidget(self.btn_add_evidence, 0, Qt.AlignTop)
        self.main_layout.addLayout(evidence_row)

        self.btn_submit = QPushButton("Submit Report")
        self.btn_submit.setObjectName("PrimaryButton")
        self.btn_submit.setCursor(Qt.PointingHandCursor)
        self.btn_submit.clicked.connect(lambda: self._on_submit_clicked())
        self.main_layout.addWidget(self.btn_submit, 0, Qt.AlignLeft)

    def populate(self, contract: IntakeContract):
        """Each visit starts with an empty form."""
        self.scam_type_combo.setCurrentIndex(0)
        self.amount_input.clear()
        self.payment_method_combo.setCurrentIndex(0)
        self.incident_date.setDate(QDate.currentDate())
        self.scammer_contact_input.clear()
        self.description_input.clear()
        self.evidence_list.clear()

    def collect_data(self) -> Dict[str, Any]:
        """Collect the report payload from the form widgets."""
        amount_text = self.amount_input.text().strip()
        try:
            amount = IntakeValidator.parse_amount(amount_text)
        except ValueError:
            amount = amount_text

        return {
            "scam_type": self.scam_type_combo.currentData(),
            "amount": amount,
            "currency": Config.DEFAULT_CURRENCY,
            "payment_method": self.payment_method_combo.currentData(),
            "incident_date": self.incident_date.date().toPyDate(),
            "scammer_contact": self.scammer_contact_input.text().strip(),
            "description": self.description_input.toPlainText().strip(),
            "evidence": tuple(
                self.evidence_list.item(i).text() for i in range(self.evidence_list.count())
            ),
        }

    def validate(self) -> StepValidationResult:
        result = StepValidationResult()
        _, errors = IntakeValidator.validate_report(self.collect_data())
        for error in errors:
            result.add_error(error)
        return result

    def add_evidence(self, path: str):
        name = Path(path).name
        existing = {self.evidence_list.item(i).text() for i in range(self.evidence_list.count())}
        if name and name not in existing:
            self.evidence_list.addItem(name)

    @with_error_boundary("attaching evidence")
    def _on_add_evidence_clicked(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self, "Attach evidence", "", "Images and documents (*.png *.jpg *.jpeg *.pdf);;All files (*)"
        )
        for path in paths:
            self.add_evidence(path)

    @with_error_boundary("submitting the report")
    def _on_submit_clicked(self):
        contract: IntakeContract = self.contract
        if contract is None:
            return

        result = self.validate()
        if not result.is_valid:
            self.show_errors(result)
            return

        self.clear_errors()
        contract.on_submit(self.collect_data())
