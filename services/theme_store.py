# -*- coding: utf-8 -*-
"""
Theme Store - session-wide colour preference.

The current theme is mirrored to exactly one presentation attribute through
an injected writer. The default writer sets the `theme` dynamic property on
the root widget, which the stylesheet selects on.
"""

from typing import Callable, Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QWidget

from models.wizard_state import Theme
from utils.logger import get_logger

logger = get_logger(__name__)

THEME_PROPERTY = "theme"

AttributeWriter = Callable[[str], None]


def widget_attribute_writer(widget: QWidget) -> AttributeWriter:
    """Build a writer that mirrors the theme onto `widget` and re-polishes it."""

    def write(value: str):
        widget.setProperty(THEME_PROPERTY, value)
        # Re-applying the same sheet re-evaluates property selectors for all children
        widget.setStyleSheet(widget.styleSheet())
        widget.update()

    return write


class ThemeStore(QObject):
    """Holds the current Theme and mirrors every change to the presentation layer."""

    theme_changed = pyqtSignal(object)  # Theme

    def __init__(self, initial: Theme = Theme.LIGHT, parent=None):
        super().__init__(parent)
        self._theme = Theme(initial)
        self._writer: Optional[AttributeWriter] = None

    @property
    def theme(self) -> Theme:
        return self._theme

    def attach(self, writer: AttributeWriter):
        """Connect the presentation attribute and mirror the current value once."""
        self._writer = writer
        self._mirror()

    def set_theme(self, theme: Union[Theme, str]):
        """Select a theme. Re-selecting the current theme writes nothing."""
        theme = Theme(theme)
        if theme is self._theme:
            return

        logger.info(f"Theme changed: {self._theme.value} -> {theme.value}")
        self._theme = theme
        self._mirror()
        self.theme_changed.emit(theme)

    def _mirror(self):
        if self._writer is not None:
            self._writer(self._theme.value)
