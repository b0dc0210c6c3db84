# -*- coding: utf-8 -*-
"""
Intake validation service.

Validates the contact and report data collected by the intake pages
without UI coupling. Pages only raise their completion callback once
validation passes.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Tuple

from app.config import Config, Vocabularies


class IntakeValidator:
    """Validates wizard stage input."""

    @staticmethod
    def validate_contact(contact_info: str) -> Tuple[bool, str]:
        """
        Validate the free-text contact captured on the login stage.

        Returns:
            Tuple of (is_valid, error_message)
        """
        text = (contact_info or "").strip()
        if not text:
            return False, "Please enter a phone number or email address."
        if len(text) > Config.CONTACT_MAX_LENGTH:
            return False, f"Contact details must be at most {Config.CONTACT_MAX_LENGTH} characters."
        return True, ""

    @staticmethod
    def parse_amount(value: Any) -> Decimal:
        """Parse an amount typed by the user ("12,500.50" -> Decimal)."""
        text = str(value if value is not None else "").replace(",", "").strip()
        try:
            return Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")

    @classmethod
    def validate_report(cls, data: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate report fields collected by the intake form.

        Returns:
            Tuple of (is_valid, errors)
        """
        errors = []

        scam_type = data.get("scam_type")
        if scam_type not in Vocabularies.codes(Vocabularies.SCAM_TYPES):
            errors.append("Please choose the type of scam.")

        try:
            amount = cls.parse_amount(data.get("amount"))
            if not amount.is_finite() or amount <= 0:
                errors.append("Amount lost must be greater than zero.")
        except ValueError:
            errors.append("Amount lost must be a number.")

        payment_method = data.get("payment_method")
        if payment_method and payment_method not in Vocabularies.codes(Vocabularies.PAYMENT_METHODS):
            errors.append("Unknown payment method.")

        description = (data.get("description") or "").strip()
        if len(description) < Config.DESCRIPTION_MIN_LENGTH:
            errors.append(
                f"Please describe what happened (at least {Config.DESCRIPTION_MIN_LENGTH} characters)."
            )

        return len(errors) == 0, errors
