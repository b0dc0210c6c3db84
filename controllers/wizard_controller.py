# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
Top-level state machine for the scam reporting wizard.

Stages: intro -> login -> form -> success, with reset back to intro from
anywhere. The controller owns the single WizardState bundle, creates the
active ScamCase on form submission and hands it to the status progression
engine. Theme selection is independent of the stage.
"""

from typing import Any, Callable, Mapping, Optional, Union

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from models.scam_case import ScamCase
from models.wizard_state import Stage, Theme, WizardState
from services.case_lookup import CaseLookup, LookupResult
from services.status_progression import StatusProgressionEngine
from services.theme_store import ThemeStore
from utils.logger import get_logger

from .base_controller import BaseController
from .stage_contracts import IntakeContract, IntroContract, LoginContract, SuccessContract

logger = get_logger(__name__)


class WizardController(BaseController):
    """
    Controller for the reporting wizard.

    Triggers reach the controller only through the contract of the current
    stage (see contract_for_current_stage), except reset and set_theme which
    are available from every stage.
    """

    # Signals
    stage_changed = pyqtSignal(object)  # Stage
    active_case_changed = pyqtSignal(object)  # Optional[ScamCase]
    contact_info_changed = pyqtSignal(str)
    scroll_to_top_requested = pyqtSignal()
    notice_requested = pyqtSignal(str, str)  # message, toast type

    OPERATION_FAILURE_NOTICES = {
        "submit_report": "Could not submit report",
    }

    def __init__(
        self,
        engine: Optional[StatusProgressionEngine] = None,
        theme_store: Optional[ThemeStore] = None,
        parent=None
    ):
        super().__init__(parent)
        self.theme_store = theme_store or ThemeStore(Theme.from_value(Config.DEFAULT_THEME), parent=self)
        self.engine = engine or StatusProgressionEngine(parent=self)

        self._state = WizardState(theme=self.theme_store.theme)
        # Incremented on every stage entry; contracts from older visits go inert
        self._visit = 0

        self.operation_error.connect(self._on_operation_error)
        self.engine.status_advanced.connect(self._on_status_advanced)
        self.theme_store.theme_changed.connect(self._on_theme_changed)

    # =========================================================================
    # State access
    # =========================================================================

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def stage(self) -> Stage:
        return self._state.stage

    @property
    def theme(self) -> Theme:
        return self._state.theme

    @property
    def active_case(self) -> Optional[ScamCase]:
        return self._state.active_case

    @property
    def contact_info(self) -> str:
        return self._state.contact_info

    # =========================================================================
    # Stage contracts
    # =========================================================================

    def contract_for_current_stage(self):
        """Build the contract for the page that renders the current stage."""
        stage = self._state.stage
        if stage is Stage.INTRO:
            return IntroContract(on_proceed=self._bind(Stage.INTRO, self._handle_proceed))
        if stage is Stage.LOGIN:
            return LoginContract(on_continue=self._bind(Stage.LOGIN, self._handle_contact))
        if stage is Stage.FORM:
            return IntakeContract(on_submit=self._bind(Stage.FORM, self._handle_report))
        return SuccessContract(
            case_data=self._state.active_case,
            case_updated=self.active_case_changed,
            on_reset=self._bind(Stage.SUCCESS, self.reset),
        )

    def _bind(self, stage: Stage, handler: Callable) -> Callable:
        visit = self._visit

        def callback(*args):
            if self._visit != visit or self._state.stage is not stage:
                logger.debug(f"Ignoring stale '{stage.value}' callback (current: '{self._state.stage.value}')")
                return
            handler(*args)

        return callback

    # =========================================================================
    # Transitions
    # =========================================================================

    def _handle_proceed(self):
        self._transition(Stage.LOGIN)

    def _handle_contact(self, contact_info: str):
        self._state = self._state.evolve(contact_info=contact_info)
        self.contact_info_changed.emit(contact_info)
        self._transition(Stage.FORM)

    def _handle_report(self, payload: Mapping[str, Any]):
        result = self.execute_with_error_handling(
            "submit_report", ScamCase.create, payload, self._state.contact_info
        )
        if not result.success:
            return

        case = result.data
        self._log_operation("submit_report", case_id=case.case_id)
        self._transition(Stage.SUCCESS, active_case=case)
        self.engine.track(case)
        self.active_case_changed.emit(case)
        self.scroll_to_top_requested.emit()

    def _on_operation_error(self, operation: str, error: str):
        prefix = self.OPERATION_FAILURE_NOTICES.get(operation, "Something went wrong")
        self.notice_requested.emit(f"{prefix}: {error}", "error")

    def reset(self):
        """Discard the active case and return to the intro stage."""
        had_case = self._state.active_case is not None
        self.engine.cancel()
        self._transition(Stage.INTRO, active_case=None)
        if had_case:
            self.active_case_changed.emit(None)

    def _transition(self, stage: Stage, **changes):
        old_stage = self._state.stage
        self._visit += 1
        self._state = self._state.evolve(stage=stage, **changes)
        logger.info(f"Stage: {old_stage.value} -> {stage.value}")
        self.stage_changed.emit(stage)

    # =========================================================================
    # Theme
    # =========================================================================

    def set_theme(self, theme: Union[Theme, str]):
        """Select a theme; the stage is unaffected."""
        self.theme_store.set_theme(theme)

    def _on_theme_changed(self, theme: Theme):
        self._state = self._state.evolve(theme=theme)

    # =========================================================================
    # Case tracking
    # =========================================================================

    def _on_status_advanced(self, case: ScamCase):
        if not case.is_successor_of(self._state.active_case):
            logger.debug(f"Ignoring status update for inactive case {case.case_id}")
            return

        self._state = self._state.evolve(active_case=case)
        self.active_case_changed.emit(case)

    def track_case(self, case_id: str) -> LookupResult:
        """Handle a search-box submission with an informational notice."""
        result = CaseLookup.lookup(case_id, self._state.active_case)
        logger.info(f"Case lookup '{case_id}': found={result.found}")
        self.notice_requested.emit(result.message, result.toast_type)
        return result
