# -*- coding: utf-8 -*-
"""
Tests for WizardController.

Drives the wizard only through the stage contracts, the way pages do.
"""

import itertools
import random

import pytest

from controllers.stage_contracts import (
    IntakeContract, IntroContract, LoginContract, SuccessContract
)
from controllers.wizard_controller import WizardController
from models.scam_case import TrackingStatus
from models.wizard_state import Stage, Theme
from services.status_progression import StatusProgressionEngine
from services.theme_store import ThemeStore


@pytest.fixture
def engine(qtbot, interval_ms):
    engine = StatusProgressionEngine(interval_ms=interval_ms)
    yield engine
    engine.cancel()


@pytest.fixture
def theme_writes():
    return []


@pytest.fixture
def controller(qtbot, engine, theme_writes):
    store = ThemeStore(Theme.LIGHT)
    store.attach(theme_writes.append)
    return WizardController(engine=engine, theme_store=store)


def advance_to_form(controller, contact="a@b.com"):
    controller.contract_for_current_stage().on_proceed()
    controller.contract_for_current_stage().on_continue(contact)


def submit(controller, payload):
    advance_to_form(controller)
    controller.contract_for_current_stage().on_submit(payload)


class TestStageFlow:
    """intro -> login -> form -> success, reset from anywhere."""

    def test_initial_state(self, controller):
        assert controller.stage is Stage.INTRO
        assert controller.active_case is None
        assert controller.contact_info == ""
        assert controller.theme is Theme.LIGHT

    def test_contract_matches_stage(self, controller, report_payload):
        assert isinstance(controller.contract_for_current_stage(), IntroContract)
        controller.contract_for_current_stage().on_proceed()
        assert isinstance(controller.contract_for_current_stage(), LoginContract)
        controller.contract_for_current_stage().on_continue("a@b.com")
        assert isinstance(controller.contract_for_current_stage(), IntakeContract)
        controller.contract_for_current_stage().on_submit(report_payload)

        contract = controller.contract_for_current_stage()
        assert isinstance(contract, SuccessContract)
        assert contract.case_data is controller.active_case
        assert contract.stage is Stage.SUCCESS

    def test_stage_changed_emitted_per_transition(self, qtbot, controller):
        with qtbot.waitSignal(controller.stage_changed) as blocker:
            controller.contract_for_current_stage().on_proceed()

        assert blocker.args == [Stage.LOGIN]

    def test_contact_captured_on_login(self, qtbot, controller):
        controller.contract_for_current_stage().on_proceed()
        with qtbot.waitSignal(controller.contact_info_changed) as blocker:
            controller.contract_for_current_stage().on_continue("+91 98765 43210")

        assert blocker.args == ["+91 98765 43210"]
        assert controller.contact_info == "+91 98765 43210"
        assert controller.stage is Stage.FORM

    def test_submit_creates_case_from_contact_and_payload(self, controller):
        submit(controller, {"amount": 500})

        case = controller.active_case
        assert controller.stage is Stage.SUCCESS
        assert case.contact_info == "a@b.com"
        assert case.report["amount"] == 500
        assert case.tracking_status is TrackingStatus.SUBMITTED

    def test_submit_starts_tracking_and_scrolls(self, qtbot, controller, engine, report_payload):
        advance_to_form(controller)
        with qtbot.waitSignals(
            [controller.active_case_changed, controller.scroll_to_top_requested]
        ):
            controller.contract_for_current_stage().on_submit(report_payload)

        assert engine.current_case is controller.active_case
        assert engine.is_pending

    def test_failed_submit_stays_on_form(self, qtbot, controller):
        advance_to_form(controller)
        failures, notices = [], []
        controller.operation_error.connect(lambda *args: failures.append(args))
        controller.notice_requested.connect(lambda *args: notices.append(args))

        controller.contract_for_current_stage().on_submit(42)

        assert [operation for operation, _ in failures] == ["submit_report"]
        assert len(notices) == 1
        message, toast_type = notices[0]
        assert message.startswith("Could not submit report: ")
        assert toast_type == "error"
        assert controller.stage is Stage.FORM
        assert controller.active_case is None

    def test_reset_from_success_clears_case(self, qtbot, controller, engine, report_payload):
        submit(controller, report_payload)

        with qtbot.waitSignal(controller.active_case_changed) as blocker:
            controller.contract_for_current_stage().on_reset()

        assert blocker.args == [None]
        assert controller.stage is Stage.INTRO
        assert controller.active_case is None
        assert engine.current_case is None

    @pytest.mark.parametrize("steps", [0, 1, 2])
    def test_reset_from_any_stage(self, qtbot, controller, steps):
        if steps >= 1:
            controller.contract_for_current_stage().on_proceed()
        if steps >= 2:
            controller.contract_for_current_stage().on_continue("a@b.com")

        with qtbot.assertNotEmitted(controller.active_case_changed):
            controller.reset()

        assert controller.stage is Stage.INTRO

    def test_contact_kept_across_reset(self, controller, report_payload):
        submit(controller, report_payload)
        controller.reset()

        assert controller.contact_info == "a@b.com"


class TestStaleContracts:
    """Callbacks from an earlier stage visit do nothing."""

    def test_intro_callback_inert_after_leaving(self, controller):
        contract = controller.contract_for_current_stage()
        contract.on_proceed()
        contract.on_proceed()

        assert controller.stage is Stage.LOGIN

    def test_double_submit_creates_one_case(self, qtbot, controller, report_payload):
        advance_to_form(controller)
        contract = controller.contract_for_current_stage()

        contract.on_submit(report_payload)
        first_case = controller.active_case
        with qtbot.assertNotEmitted(controller.stage_changed):
            contract.on_submit(report_payload)

        assert controller.active_case is first_case

    def test_callback_from_previous_visit_of_same_stage(self, controller):
        old = controller.contract_for_current_stage()
        controller.contract_for_current_stage().on_proceed()
        controller.reset()

        old.on_proceed()
        assert controller.stage is Stage.INTRO

    def test_stale_reset_after_new_submission(self, controller, report_payload):
        submit(controller, report_payload)
        old_success = controller.contract_for_current_stage()
        controller.reset()
        submit(controller, report_payload)
        current_case = controller.active_case

        old_success.on_reset()
        assert controller.stage is Stage.SUCCESS
        assert controller.active_case is current_case


class TestStatusTracking:

    def test_active_case_advances(self, qtbot, controller, report_payload):
        submit(controller, report_payload)
        submitted = controller.active_case

        with qtbot.waitSignal(controller.active_case_changed, timeout=2000) as blocker:
            pass

        advanced = blocker.args[0]
        assert advanced is controller.active_case
        assert advanced.case_id == submitted.case_id
        assert advanced.tracking_status is TrackingStatus.UNDER_REVIEW

    def test_full_progression_never_skips(self, qtbot, controller, engine, report_payload):
        seen = []
        controller.active_case_changed.connect(
            lambda case: seen.append(case.tracking_status if case else None)
        )
        submit(controller, report_payload)

        with qtbot.waitSignal(engine.progression_finished, timeout=5000):
            pass

        assert seen == list(TrackingStatus.ordered())
        assert controller.active_case.tracking_status is TrackingStatus.CALLBACK_SCHEDULED
        assert controller.stage is Stage.SUCCESS

    def test_reset_during_pending_advancement(self, qtbot, controller, report_payload, interval_ms):
        submit(controller, report_payload)
        controller.reset()

        with qtbot.assertNotEmitted(controller.active_case_changed, wait=interval_ms * 3):
            pass

        assert controller.active_case is None
        assert controller.stage is Stage.INTRO

    def test_new_submission_is_not_overwritten_by_old_case(
        self, qtbot, controller, report_payload, interval_ms
    ):
        submit(controller, report_payload)
        old_case = controller.active_case
        controller.reset()
        submit(controller, report_payload)
        new_case = controller.active_case

        qtbot.wait(interval_ms * 3)

        assert controller.active_case.case_id == new_case.case_id
        assert controller.active_case.case_id != old_case.case_id

    def test_foreign_update_ignored(self, controller, report_payload, scam_case):
        submit(controller, report_payload)
        active = controller.active_case

        controller._on_status_advanced(scam_case.with_status(TrackingStatus.UNDER_REVIEW))
        assert controller.active_case is active


class TestTheme:

    def test_set_theme_keeps_stage(self, controller, theme_writes):
        controller.contract_for_current_stage().on_proceed()
        controller.set_theme(Theme.OLIVE)

        assert controller.stage is Stage.LOGIN
        assert controller.theme is Theme.OLIVE
        assert theme_writes == ["light", "olive"]

    def test_set_theme_keeps_active_case(self, controller, report_payload):
        submit(controller, report_payload)
        case = controller.active_case
        controller.set_theme("dark")

        assert controller.stage is Stage.SUCCESS
        assert controller.active_case is case
        assert controller.state.theme is Theme.DARK


class TestTrackCase:

    def test_without_case_shows_info_notice(self, qtbot, controller):
        with qtbot.waitSignal(controller.notice_requested) as blocker:
            result = controller.track_case("FP-2024-000001")

        assert not result.found
        assert blocker.args == [result.message, "info"]

    def test_active_case_found(self, controller, report_payload):
        submit(controller, report_payload)

        result = controller.track_case(controller.active_case.case_id)
        assert result.found
        assert result.case is controller.active_case

    def test_lookup_does_not_change_state(self, controller, report_payload):
        submit(controller, report_payload)
        before = controller.state

        controller.track_case("unknown")
        assert controller.state is before


class TestInvariantsUnderArbitraryTriggers:
    """Random trigger sequences keep stage and active case consistent."""

    TRIGGERS = ("current", "stale", "reset", "theme")

    @pytest.mark.parametrize("seed", range(5))
    def test_random_walk(self, controller, report_payload, seed):
        rng = random.Random(seed)
        themes = itertools.cycle(Theme)
        contracts = []

        for _ in range(60):
            trigger = rng.choice(self.TRIGGERS)
            if trigger == "current":
                contract = controller.contract_for_current_stage()
                contracts.append(contract)
                fire(contract, report_payload)
            elif trigger == "stale" and contracts:
                fire(rng.choice(contracts), report_payload)
            elif trigger == "reset":
                controller.reset()
            else:
                controller.set_theme(next(themes))

            assert controller.state.is_consistent
            if controller.stage is Stage.SUCCESS:
                assert controller.active_case.contact_info == controller.contact_info


def fire(contract, payload):
    if isinstance(contract, IntroContract):
        contract.on_proceed()
    elif isinstance(contract, LoginContract):
        contract.on_continue("a@b.com")
    elif isinstance(contract, IntakeContract):
        contract.on_submit(payload)
    else:
        contract.on_reset()
