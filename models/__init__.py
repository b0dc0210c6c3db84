# -*- coding: utf-8 -*-
"""
Financial Protection data models
"""

from .scam_case import CaseReport, ScamCase, TrackingStatus
from .wizard_state import Stage, Theme, WizardState

__all__ = [
    "CaseReport",
    "ScamCase",
    "TrackingStatus",
    "Stage",
    "Theme",
    "WizardState",
]
