# -*- coding: utf-8 -*-
"""
Stage contracts handed by the wizard controller to stage pages.

A page only ever receives the contract of the stage it renders, so it can
only raise that stage's trigger. Callbacks are bound to one visit of the
stage; once the wizard leaves it they do nothing.
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Mapping

from PyQt5.QtCore import pyqtBoundSignal

from models.scam_case import ScamCase
from models.wizard_state import Stage


@dataclass(frozen=True)
class IntroContract:
    stage: ClassVar[Stage] = Stage.INTRO
    on_proceed: Callable[[], None]


@dataclass(frozen=True)
class LoginContract:
    stage: ClassVar[Stage] = Stage.LOGIN
    on_continue: Callable[[str], None]


@dataclass(frozen=True)
class IntakeContract:
    stage: ClassVar[Stage] = Stage.FORM
    on_submit: Callable[[Mapping[str, Any]], None]


@dataclass(frozen=True)
class SuccessContract:
    """
    case_data is the snapshot at the time the stage was entered;
    case_updated delivers each later status of the same case.
    """
    stage: ClassVar[Stage] = Stage.SUCCESS
    case_data: ScamCase
    case_updated: pyqtBoundSignal
    on_reset: Callable[[], None]
