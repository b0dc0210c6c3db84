# -*- coding: utf-8 -*-
"""
Case lookup for the navbar search box.

There is no case registry: the only case the application knows about is the
active one. Lookups produce an informational notice and never fail.
"""

from dataclasses import dataclass
from typing import Optional

from models.scam_case import ScamCase


@dataclass
class LookupResult:
    """Outcome of a case lookup, shown to the user as a notice."""
    found: bool
    message: str
    case: Optional[ScamCase] = None

    @property
    def toast_type(self) -> str:
        return "success" if self.found else "info"


class CaseLookup:
    """Resolves a typed case reference against the active case."""

    @staticmethod
    def normalize(case_id: str) -> str:
        return (case_id or "").strip().upper()

    @classmethod
    def lookup(cls, case_id: str, active_case: Optional[ScamCase]) -> LookupResult:
        query = cls.normalize(case_id)
        if not query:
            return LookupResult(False, "Enter a case ID to track its status.")

        if active_case is None:
            return LookupResult(False, "Case search: please submit a case first.")

        if cls.normalize(active_case.case_id) != query:
            return LookupResult(False, f"No case found with ID {query}.")

        status = active_case.tracking_status
        return LookupResult(
            True,
            f"Case {active_case.case_id}: {status.value}. {status.description}",
            active_case,
        )
