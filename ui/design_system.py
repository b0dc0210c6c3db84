"""
Financial Protection Design System

Design tokens shared by all pages: per-theme colour palettes, typography,
spacing and radii. Palettes are keyed by Theme so the stylesheet can emit
one rule set per theme.
"""

from dataclasses import dataclass

from PyQt5.QtGui import QFont

from models.wizard_state import Theme


@dataclass(frozen=True)
class Palette:
    """Colour palette for one theme."""
    BG_MAIN: str
    BG_CARD: str
    BORDER: str
    TEXT_MAIN: str
    TEXT_MUTED: str
    ACCENT: str
    ACCENT_HOVER: str
    ACCENT_TEXT: str
    INPUT_BG: str
    SUCCESS: str
    WARNING: str
    ERROR: str


class Colors:
    """
    Theme palettes.

    LIGHT: slate on white with an indigo accent
    DARK: near-black surfaces, same accent lifted for contrast
    OLIVE: warm paper background with an olive-green accent
    """

    LIGHT = Palette(
        BG_MAIN="#F8FAFC",
        BG_CARD="#FFFFFF",
        BORDER="#E2E8F0",
        TEXT_MAIN="#0F172A",
        TEXT_MUTED="#64748B",
        ACCENT="#4F46E5",
        ACCENT_HOVER="#4338CA",
        ACCENT_TEXT="#FFFFFF",
        INPUT_BG="#FFFFFF",
        SUCCESS="#16A34A",
        WARNING="#D97706",
        ERROR="#DC2626",
    )

    DARK = Palette(
        BG_MAIN="#0B1120",
        BG_CARD="#111827",
        BORDER="#1F2937",
        TEXT_MAIN="#F1F5F9",
        TEXT_MUTED="#94A3B8",
        ACCENT="#6366F1",
        ACCENT_HOVER="#818CF8",
        ACCENT_TEXT="#FFFFFF",
        INPUT_BG="#0F172A",
        SUCCESS="#22C55E",
        WARNING="#F59E0B",
        ERROR="#F87171",
    )

    OLIVE = Palette(
        BG_MAIN="#F5F5EB",
        BG_CARD="#FBFBF5",
        BORDER="#D6D3C0",
        TEXT_MAIN="#2F3320",
        TEXT_MUTED="#6B6F55",
        ACCENT="#556B2F",
        ACCENT_HOVER="#45591F",
        ACCENT_TEXT="#FFFFFF",
        INPUT_BG="#FFFFFF",
        SUCCESS="#4D7C0F",
        WARNING="#B45309",
        ERROR="#B91C1C",
    )

    @classmethod
    def for_theme(cls, theme: Theme) -> Palette:
        return {
            Theme.LIGHT: cls.LIGHT,
            Theme.DARK: cls.DARK,
            Theme.OLIVE: cls.OLIVE,
        }[theme]


class Typography:
    """Typography tokens (sizes in pixels)."""

    FONT_FAMILY_PRIMARY = "Inter"
    FONT_FAMILY_FALLBACK = "Segoe UI"

    SIZE_CAPTION = 11
    SIZE_BODY = 14
    SIZE_SUBHEADING = 16
    SIZE_H2 = 22
    SIZE_H1 = 30

    @staticmethod
    def get_font(size=14, bold=False):
        font = QFont(Typography.FONT_FAMILY_PRIMARY)
        font.setStyleHint(QFont.SansSerif)
        font.setPixelSize(size)
        if bold:
            font.setWeight(QFont.Bold)
        return font


class Spacing:
    """
    Spacing system for consistent layout
    Based on 8px grid system
    """
    XS = 4
    SM = 8
    MD = 16
    LG = 24
    XL = 32
    XXL = 48


class BorderRadius:
    SM = 6
    MD = 10
    LG = 16
    PILL = 18
