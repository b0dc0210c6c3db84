# -*- coding: utf-8 -*-
"""
Scam case entity model.

A ScamCase is composed of two parts:
- CaseReport: the fields supplied by the intake form (opaque to the core)
- Tracking metadata owned by the application (contact info, case ID, status)

Both parts are immutable. Status progression produces a new ScamCase that
shares the same CaseReport object.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any, Iterator, Optional
import uuid

from app.config import Config


class TrackingStatus(Enum):
    """
    Pipeline stages of case handling.

    Declaration order is the progression order; the last member is terminal.
    """
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    EVIDENCE_VERIFIED = "Evidence Verified"
    ESCALATED_TO_AUTHORITIES = "Escalated to Authorities"
    CALLBACK_SCHEDULED = "Callback Scheduled"

    @classmethod
    def ordered(cls) -> tuple:
        return tuple(cls)

    @classmethod
    def first(cls) -> "TrackingStatus":
        return cls.ordered()[0]

    @property
    def index(self) -> int:
        return self.ordered().index(self)

    @property
    def is_terminal(self) -> bool:
        return self.index == len(self.ordered()) - 1

    def next_status(self) -> Optional["TrackingStatus"]:
        """Status one step further along, or None at the terminal status."""
        statuses = self.ordered()
        next_index = self.index + 1
        if next_index < len(statuses):
            return statuses[next_index]
        return None

    @property
    def description(self) -> str:
        descriptions = {
            TrackingStatus.SUBMITTED: "Your report has been received and logged.",
            TrackingStatus.UNDER_REVIEW: "A case officer is reviewing the details you provided.",
            TrackingStatus.EVIDENCE_VERIFIED: "Transaction references and evidence have been checked.",
            TrackingStatus.ESCALATED_TO_AUTHORITIES: "The case has been forwarded to your bank and the cyber cell.",
            TrackingStatus.CALLBACK_SCHEDULED: "An officer will call you on the contact details you shared.",
        }
        return descriptions[self]


class CaseReport(Mapping):
    """
    Read-only report payload as supplied by the intake form.

    The application never inspects these fields; views read them by key.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, Any]] = None):
        self._fields = MappingProxyType(dict(fields or {}))

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"CaseReport({dict(self._fields)!r})"


def generate_case_id(now: Optional[datetime] = None) -> str:
    """
    Generate a human-readable case reference.

    Format: FP-YYYY-NNNNNN
    """
    year = (now or datetime.now()).year
    seq = str(uuid.uuid4().int)[:6].zfill(6)
    return f"{Config.CASE_ID_PREFIX}-{year}-{seq}"


@dataclass(frozen=True)
class ScamCase:
    """
    A submitted scam report plus its tracking metadata.

    Created only when the intake form is submitted; never mutated afterwards.
    """

    report: CaseReport
    contact_info: str
    tracking_status: TrackingStatus = field(default_factory=TrackingStatus.first)
    case_id: str = field(default_factory=generate_case_id)
    submitted_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(cls, payload: Mapping[str, Any], contact_info: str) -> "ScamCase":
        """Merge an intake payload with the captured contact info at the first status."""
        report = payload if isinstance(payload, CaseReport) else CaseReport(payload)
        return cls(
            report=report,
            contact_info=contact_info,
            tracking_status=TrackingStatus.first(),
        )

    def with_status(self, status: TrackingStatus) -> "ScamCase":
        """Copy of this case at a different status; every other field is shared."""
        return replace(self, tracking_status=status)

    def is_successor_of(self, other: Optional["ScamCase"]) -> bool:
        """True when this record is the next status of the same case."""
        if other is None or other.case_id != self.case_id:
            return False
        return other.tracking_status.next_status() is self.tracking_status

    @property
    def is_resolved(self) -> bool:
        return self.tracking_status.is_terminal

    @property
    def progress_percentage(self) -> float:
        """Position in the tracking pipeline as a percentage (0.0 to 100.0)."""
        last = len(TrackingStatus.ordered()) - 1
        return (self.tracking_status.index / last) * 100.0
