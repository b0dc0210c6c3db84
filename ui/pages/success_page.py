# -*- coding: utf-8 -*-
"""
Success page: confirms submission and shows the live tracking status.
"""

from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QFormLayout, QHBoxLayout, QLabel, QProgressBar, QPushButton

from app.config import Config, Vocabularies
from controllers.stage_contracts import SuccessContract
from models.scam_case import ScamCase
from ui.components.status_timeline import StatusTimeline
from ui.error_handler import with_error_boundary
from utils.helpers import format_amount, format_date, format_datetime
from .base_stage_page import BaseStagePage


class SuccessPage(BaseStagePage):
    """Submitted case view."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._case: Optional[ScamCase] = None

    @property
    def case(self) -> Optional[ScamCase]:
        return self._case

    def setup_ui(self):
        self.add_title(
            "Report submitted",
            "Keep your case ID. You can track the case from the search box at the top."
        )

        header = QHBoxLayout()
        self.case_id_label = QLabel("")
        self.case_id_label.setObjectName("SubtitleLabel")
        self.case_id_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        header.addWidget(self.case_id_label, 1)

        self.status_badge = QLabel("")
        self.status_badge.setObjectName("StatusBadge")
        header.addWidget(self.status_badge, 0, Qt.AlignRight)
        self.main_layout.addLayout(header)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.main_layout.addWidget(self.progress_bar)

        self.timeline = StatusTimeline()
        self.main_layout.addWidget(self.timeline)

        self.resolution_label = QLabel(
            "Tracking complete. Keep your phone reachable; the officer will quote your case ID."
        )
        self.resolution_label.setObjectName("MutedLabel")
        self.resolution_label.setWordWrap(True)
        self.resolution_label.hide()
        self.main_layout.addWidget(self.resolution_label)

        summary = QFormLayout()
        self.contact_value = QLabel("")
        self.scam_type_value = QLabel("")
        self.amount_value = QLabel("")
        self.incident_date_value = QLabel("")
        self.submitted_value = QLabel("")
        summary.addRow("Contact", self.contact_value)
        summary.addRow("Type of scam", self.scam_type_value)
        summary.addRow("Amount lost", self.amount_value)
        summary.addRow("Date of incident", self.incident_date_value)
        summary.addRow("Submitted", self.submitted_value)
        self.main_layout.addLayout(summary)

        self.btn_reset = QPushButton("Report another scam")
        self.btn_reset.setObjectName("SecondaryButton")
        self.btn_reset.setCursor(Qt.PointingHandCursor)
        self.btn_reset.clicked.connect(lambda: self._on_reset_clicked())
        self.main_layout.addWidget(self.btn_reset, 0, Qt.AlignLeft)

    def populate(self, contract: SuccessContract):
        contract.case_updated.connect(self._on_case_updated)
        self._show_case(contract.case_data)

    def on_hide(self):
        contract: SuccessContract = self.contract
        if contract is not None:
            contract.case_updated.disconnect(self._on_case_updated)
        self._case = None

    def _on_case_updated(self, case: Optional[ScamCase]):
        # Only later statuses of the case this page was opened with
        if case is None or self._case is None or case.case_id != self._case.case_id:
            return
        self._show_case(case)

    def _show_case(self, case: ScamCase):
        self._case = case
        report = case.report
        status = case.tracking_status

        self.case_id_label.setText(f"Case ID: {case.case_id}")
        self.status_badge.setText(status.value)
        self.status_badge.setProperty("resolved", case.is_resolved)
        self.status_badge.style().unpolish(self.status_badge)
        self.status_badge.style().polish(self.status_badge)
        self.progress_bar.setValue(int(case.progress_percentage))
        self.timeline.set_status(status)
        self.resolution_label.setVisible(case.is_resolved)

        self.contact_value.setText(case.contact_info)
        self.scam_type_value.setText(
            Vocabularies.get_display_name(Vocabularies.SCAM_TYPES, report.get("scam_type", "")) or "-"
        )
        self.amount_value.setText(
            format_amount(report.get("amount"), report.get("currency", Config.DEFAULT_CURRENCY))
        )
        self.incident_date_value.setText(format_date(report.get("incident_date")) or "-")
        self.submitted_value.setText(format_datetime(case.submitted_at))

    @with_error_boundary("starting a new report")
    def _on_reset_clicked(self):
        contract: SuccessContract = self.contract
        if contract is not None:
            contract.on_reset()
