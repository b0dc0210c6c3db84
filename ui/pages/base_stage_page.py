# -*- coding: utf-8 -*-
"""
Base Stage Page - Abstract base class for wizard stage pages.

A page renders one wizard stage. The main window binds the stage contract
when the stage becomes current and unbinds it when the stage is left; the
page only talks to the controller through that contract.

Subclasses implement:
- setup_ui(): Create the page's widgets (called once)
- populate(contract): Refresh widgets for a new visit
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from ui.design_system import Spacing


@dataclass
class StepValidationResult:
    """Result of page validation."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def has_errors(self) -> bool:
        return len(self.errors) > 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStagePage(QWidget, metaclass=ABCQWidgetMeta):
    """Abstract base class for stage pages."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._contract: Any = None
        self._is_initialized = False

        outer = QVBoxLayout(self)
        outer.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        outer.setAlignment(Qt.AlignTop | Qt.AlignHCenter)

        # Every page renders inside one card
        self.card = QFrame()
        self.card.setObjectName("Card")
        self.card.setMaximumWidth(820)
        outer.addWidget(self.card)

        self.main_layout = QVBoxLayout(self.card)
        self.main_layout.setContentsMargins(Spacing.XL, Spacing.XL, Spacing.XL, Spacing.XL)
        self.main_layout.setSpacing(Spacing.MD)

        self.error_label = QLabel("")
        self.error_label.setObjectName("ErrorLabel")
        self.error_label.setWordWrap(True)
        self.error_label.hide()

    @property
    def contract(self) -> Any:
        return self._contract

    def initialize(self):
        """Build the UI on first use."""
        if not self._is_initialized:
            self.setup_ui()
            self.main_layout.addWidget(self.error_label)
            self._is_initialized = True

    def bind(self, contract: Any):
        """Called when this page's stage becomes current."""
        self.initialize()
        self._contract = contract
        self.clear_errors()
        self.populate(contract)

    def unbind(self):
        """Called when the wizard leaves this page's stage."""
        self.on_hide()
        self._contract = None

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate(self, contract: Any):
        """Refresh the page for a new visit."""
        pass

    def on_hide(self):
        pass

    def validate(self) -> StepValidationResult:
        return StepValidationResult()

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def show_errors(self, result: StepValidationResult):
        self.error_label.setText("\n".join(f"• {error}" for error in result.errors))
        self.error_label.setVisible(result.has_errors())

    def clear_errors(self):
        self.error_label.clear()
        self.error_label.hide()

    def add_title(self, text: str, subtitle: str = "") -> QLabel:
        title = QLabel(text)
        title.setObjectName("TitleLabel")
        title.setWordWrap(True)
        self.main_layout.addWidget(title)
        if subtitle:
            sub = QLabel(subtitle)
            sub.setObjectName("MutedLabel")
            sub.setWordWrap(True)
            self.main_layout.addWidget(sub)
        return title
