# -*- coding: utf-8 -*-
"""
Financial Protection Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "CaseLookup",
    "IntakeValidator",
    "StatusProgressionEngine",
    "ThemeStore",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "CaseLookup":
        from .case_lookup import CaseLookup
        return CaseLookup
    elif name == "IntakeValidator":
        from .intake_validator import IntakeValidator
        return IntakeValidator
    elif name == "StatusProgressionEngine":
        from .status_progression import StatusProgressionEngine
        return StatusProgressionEngine
    elif name == "ThemeStore":
        from .theme_store import ThemeStore
        return ThemeStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
