# -*- coding: utf-8 -*-
"""
Status timeline component: one row per tracking status, marking the
completed, current and upcoming steps.
"""

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from models.scam_case import TrackingStatus


class StatusTimeline(QWidget):
    """Vertical list of TrackingStatus steps."""

    DONE = "done"
    CURRENT = "current"
    UPCOMING = "upcoming"

    MARKERS = {
        DONE: "✔",
        CURRENT: "●",
        UPCOMING: "○",
    }

    OBJECT_NAMES = {
        DONE: "TimelineDone",
        CURRENT: "TimelineCurrent",
        UPCOMING: "MutedLabel",
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.rows = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        for status in TrackingStatus.ordered():
            row = QLabel()
            row.setWordWrap(True)
            layout.addWidget(row)
            self.rows[status] = row

        self.set_status(TrackingStatus.first())

    def set_status(self, current: TrackingStatus):
        for status, row in self.rows.items():
            if status.index < current.index:
                state = self.DONE
            elif status is current:
                state = self.CURRENT
            else:
                state = self.UPCOMING

            row.setObjectName(self.OBJECT_NAMES[state])
            text = f"{self.MARKERS[state]}  {status.value}"
            if state == self.CURRENT:
                text = f"<b>{text}</b><br><span>{status.description}</span>"
            row.setText(text)
            row.style().unpolish(row)
            row.style().polish(row)
