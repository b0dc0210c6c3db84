# -*- coding: utf-8 -*-
"""
Tests for the navbar case lookup.
"""

from models.scam_case import TrackingStatus
from services.case_lookup import CaseLookup


class TestCaseLookup:

    def test_blank_query(self, scam_case):
        result = CaseLookup.lookup("   ", scam_case)

        assert not result.found
        assert result.message == "Enter a case ID to track its status."
        assert result.toast_type == "info"

    def test_no_active_case(self):
        result = CaseLookup.lookup("FP-2024-000001", None)

        assert not result.found
        assert result.message == "Case search: please submit a case first."

    def test_unknown_case_id(self, scam_case):
        result = CaseLookup.lookup("fp-0000-000000", scam_case)

        assert not result.found
        assert result.message == "No case found with ID FP-0000-000000."

    def test_matches_active_case_case_insensitively(self, scam_case):
        case = scam_case.with_status(TrackingStatus.ESCALATED_TO_AUTHORITIES)
        result = CaseLookup.lookup(f"  {case.case_id.lower()} ", case)

        assert result.found
        assert result.case is case
        assert result.toast_type == "success"
        assert "Escalated to Authorities" in result.message
        assert case.case_id in result.message
