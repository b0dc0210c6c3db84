# -*- coding: utf-8 -*-
"""
Wizard state model: stage and theme enumerations plus the state bundle
owned by the wizard controller.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .scam_case import ScamCase


class Stage(Enum):
    """Wizard screen identity."""
    INTRO = "intro"
    LOGIN = "login"
    FORM = "form"
    SUCCESS = "success"

    @property
    def title(self) -> str:
        titles = {
            Stage.INTRO: "Report a Financial Scam",
            Stage.LOGIN: "Your Contact Details",
            Stage.FORM: "Incident Details",
            Stage.SUCCESS: "Case Submitted",
        }
        return titles[self]


class Theme(Enum):
    """UI colour preference for the session."""
    LIGHT = "light"
    DARK = "dark"
    OLIVE = "olive"

    @classmethod
    def from_value(cls, value: str, default: "Theme" = None) -> "Theme":
        """Parse a config/env string, falling back to `default` (LIGHT)."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default or cls.LIGHT


@dataclass(frozen=True)
class WizardState:
    """
    Snapshot of the wizard controller state.

    Invariant: active_case is set if and only if stage is SUCCESS.
    """
    stage: Stage = Stage.INTRO
    theme: Theme = Theme.LIGHT
    active_case: Optional[ScamCase] = None
    contact_info: str = ""

    def evolve(self, **changes) -> "WizardState":
        return replace(self, **changes)

    @property
    def is_consistent(self) -> bool:
        return (self.active_case is not None) == (self.stage is Stage.SUCCESS)
