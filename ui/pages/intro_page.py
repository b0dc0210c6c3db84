# -*- coding: utf-8 -*-
"""
Intro page: explains the reporting process and starts the wizard.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QPushButton

from controllers.stage_contracts import IntroContract
from ui.error_handler import with_error_boundary
from .base_stage_page import BaseStagePage


class IntroPage(BaseStagePage):
    """First stage of the wizard."""

    STEPS = [
        ("1", "Share how we can reach you", "A phone number or email; no account needed."),
        ("2", "Describe what happened", "Amount, payment method, and any evidence you have."),
        ("3", "Track your case", "Follow your report as it moves through review."),
    ]

    def setup_ui(self):
        self.add_title(
            "Lost money to a scam?",
            "Report it in a few minutes. Early reports give banks the best chance "
            "to freeze fraudulent transfers."
        )

        for number, heading, detail in self.STEPS:
            row = QHBoxLayout()
            badge = QLabel(number)
            badge.setObjectName("StatusBadge")
            badge.setFixedWidth(28)
            badge.setAlignment(Qt.AlignCenter)
            row.addWidget(badge, 0, Qt.AlignTop)

            text = QLabel(f"<b>{heading}</b><br>{detail}")
            text.setWordWrap(True)
            row.addWidget(text, 1)
            self.main_layout.addLayout(row)

        notice = QLabel("We never charge recovery fees and will never ask for your OTP or PIN.")
        notice.setObjectName("MutedLabel")
        notice.setWordWrap(True)
        self.main_layout.addWidget(notice)

        self.btn_proceed = QPushButton("Start Report")
        self.btn_proceed.setObjectName("PrimaryButton")
        self.btn_proceed.setCursor(Qt.PointingHandCursor)
        self.btn_proceed.clicked.connect(lambda: self._on_proceed_clicked())
        self.main_layout.addWidget(self.btn_proceed, 0, Qt.AlignLeft)

    @with_error_boundary("starting the report")
    def _on_proceed_clicked(self):
        contract: IntroContract = self.contract
        if contract is not None:
            contract.on_proceed()
