# -*- coding: utf-8 -*-
"""
Centralized Style Manager.
Single source of truth for application styles.

The whole stylesheet is installed once on the root widget. Every rule is
scoped by the root's `theme` dynamic property, so switching themes only
changes that property and never rebuilds the stylesheet.

Usage:
    from ui.style_manager import StyleManager

    root.setObjectName(StyleManager.ROOT_NAME)
    root.setStyleSheet(StyleManager.app_stylesheet())
"""

from models.wizard_state import Theme
from .design_system import BorderRadius, Colors, Palette, Spacing, Typography


class StyleManager:
    """
    Centralized stylesheet generator.

    Components only set object names; all QSS lives here.
    """

    ROOT_NAME = "AppRoot"

    @classmethod
    def scope(cls, theme: Theme) -> str:
        return f'QWidget#{cls.ROOT_NAME}[theme="{theme.value}"]'

    @classmethod
    def app_stylesheet(cls) -> str:
        """Stylesheet covering every theme."""
        return "\n".join(cls.theme_rules(theme) for theme in Theme)

    @classmethod
    def theme_rules(cls, theme: Theme) -> str:
        s = cls.scope(theme)
        p: Palette = Colors.for_theme(theme)
        return f"""
            {s} {{
                background-color: {p.BG_MAIN};
                color: {p.TEXT_MAIN};
                font-family: "{Typography.FONT_FAMILY_PRIMARY}", "{Typography.FONT_FAMILY_FALLBACK}";
                font-size: {Typography.SIZE_BODY}px;
            }}
            {s} QLabel {{
                color: {p.TEXT_MAIN};
                background: transparent;
            }}
            {s} QLabel#TitleLabel {{
                font-size: {Typography.SIZE_H1}px;
                font-weight: 700;
            }}
            {s} QLabel#SubtitleLabel {{
                font-size: {Typography.SIZE_H2}px;
                font-weight: 600;
            }}
            {s} QLabel#MutedLabel {{
                color: {p.TEXT_MUTED};
            }}
            {s} QLabel#ErrorLabel {{
                color: {p.ERROR};
            }}
            {s} QLabel#StatusBadge {{
                color: {p.ACCENT_TEXT};
                background-color: {p.ACCENT};
                border-radius: {BorderRadius.SM}px;
                padding: {Spacing.XS}px {Spacing.SM}px;
                font-weight: 600;
            }}
            {s} QLabel#StatusBadge[resolved="true"] {{
                background-color: {p.SUCCESS};
            }}
            {s} QLabel#TimelineDone {{
                color: {p.SUCCESS};
            }}
            {s} QLabel#TimelineCurrent {{
                color: {p.ACCENT};
            }}
            {s} QFrame#Card {{
                background-color: {p.BG_CARD};
                border: 1px solid {p.BORDER};
                border-radius: {BorderRadius.LG}px;
            }}
            {s} QWidget#Navbar, {s} QWidget#Footer {{
                background-color: {p.BG_MAIN};
                border-bottom: 1px solid {p.BORDER};
            }}
            {s} QLabel#BrandLabel {{
                font-weight: 700;
                letter-spacing: 1px;
            }}
            {s} QLabel#BrandAccent {{
                color: {p.ACCENT};
                font-weight: 700;
            }}
            {s} QLineEdit, {s} QTextEdit, {s} QComboBox, {s} QDateEdit {{
                background-color: {p.INPUT_BG};
                color: {p.TEXT_MAIN};
                border: 1px solid {p.BORDER};
                border-radius: {BorderRadius.SM}px;
                padding: {Spacing.SM}px;
            }}
            {s} QLineEdit:focus, {s} QTextEdit:focus, {s} QComboBox:focus {{
                border: 1px solid {p.ACCENT};
            }}
            {s} QLineEdit#SearchBox {{
                background-color: {p.BG_CARD};
                border-radius: {BorderRadius.MD}px;
                padding: {Spacing.XS}px {Spacing.SM}px;
                font-size: {Typography.SIZE_CAPTION}px;
            }}
            {s} QPushButton#PrimaryButton {{
                background-color: {p.ACCENT};
                color: {p.ACCENT_TEXT};
                border: none;
                border-radius: {BorderRadius.MD}px;
                padding: {Spacing.SM + 4}px {Spacing.LG}px;
                font-weight: 600;
            }}
            {s} QPushButton#PrimaryButton:hover {{
                background-color: {p.ACCENT_HOVER};
            }}
            {s} QPushButton#SecondaryButton {{
                background-color: transparent;
                color: {p.TEXT_MAIN};
                border: 1px solid {p.BORDER};
                border-radius: {BorderRadius.MD}px;
                padding: {Spacing.SM}px {Spacing.MD}px;
            }}
            {s} QPushButton#ThemeButton {{
                background-color: transparent;
                color: {p.TEXT_MUTED};
                border: none;
                border-radius: {BorderRadius.PILL}px;
                padding: {Spacing.XS + 2}px {Spacing.SM + 2}px;
            }}
            {s} QPushButton#ThemeButton:checked {{
                background-color: {p.ACCENT};
                color: {p.ACCENT_TEXT};
            }}
            {s} QProgressBar {{
                border: none;
                background-color: {p.BORDER};
                border-radius: 3px;
                max-height: 6px;
            }}
            {s} QProgressBar::chunk {{
                background-color: {p.SUCCESS};
                border-radius: 3px;
            }}
            {s} QScrollArea {{
                border: none;
                background: transparent;
            }}
        """
