# -*- coding: utf-8 -*-
"""
Tests for IntakeValidator.
"""

from decimal import Decimal

import pytest

from app.config import Config
from services.intake_validator import IntakeValidator


class TestValidateContact:

    @pytest.mark.parametrize("value", ["a@b.com", "+91 98765 43210", "  someone@example.org  "])
    def test_accepts_contact(self, value):
        assert IntakeValidator.validate_contact(value) == (True, "")

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_rejects_empty(self, value):
        is_valid, message = IntakeValidator.validate_contact(value)
        assert not is_valid
        assert message

    def test_rejects_too_long(self):
        is_valid, _ = IntakeValidator.validate_contact("x" * (Config.CONTACT_MAX_LENGTH + 1))
        assert not is_valid


class TestParseAmount:

    def test_strips_thousands_separators(self):
        assert IntakeValidator.parse_amount("12,500.50") == Decimal("12500.50")

    def test_accepts_numbers(self):
        assert IntakeValidator.parse_amount(500) == Decimal("500")

    @pytest.mark.parametrize("value", ["", "abc", None])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            IntakeValidator.parse_amount(value)


class TestValidateReport:

    def test_valid_report(self, report_payload):
        assert IntakeValidator.validate_report(report_payload) == (True, [])

    def test_payment_method_is_optional(self, report_payload):
        report_payload["payment_method"] = None
        is_valid, _ = IntakeValidator.validate_report(report_payload)
        assert is_valid

    def test_collects_every_error(self):
        is_valid, errors = IntakeValidator.validate_report({
            "scam_type": None,
            "amount": "0",
            "payment_method": "barter",
            "description": "short",
        })

        assert not is_valid
        assert len(errors) == 4

    @pytest.mark.parametrize("amount", ["-5", "0", "NaN", "Infinity", "ten"])
    def test_rejects_bad_amounts(self, report_payload, amount):
        report_payload["amount"] = amount
        is_valid, errors = IntakeValidator.validate_report(report_payload)

        assert not is_valid
        assert len(errors) == 1
