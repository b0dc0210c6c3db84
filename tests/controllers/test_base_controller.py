# -*- coding: utf-8 -*-
"""
Tests for BaseController operation handling.
"""

import pytest

from controllers.base_controller import BaseController, OperationResult


@pytest.fixture
def controller(qtbot):
    return BaseController()


class TestExecuteWithErrorHandling:

    def test_success_wraps_return_value(self, qtbot, controller):
        with qtbot.assertNotEmitted(controller.operation_error):
            result = controller.execute_with_error_handling("add", lambda a, b: a + b, 2, b=3)

        assert result.success
        assert result.data == 5
        assert result.message == ""

    def test_exception_becomes_failed_result_and_signal(self, qtbot, controller):
        def explode():
            raise ValueError("bad payload")

        with qtbot.waitSignal(controller.operation_error) as blocker:
            result = controller.execute_with_error_handling("submit_report", explode)

        assert not result.success
        assert result.message == "bad payload"
        assert blocker.args == ["submit_report", "bad payload"]

    def test_message_falls_back_to_exception_name(self, qtbot, controller):
        def explode():
            raise KeyError()

        with qtbot.waitSignal(controller.operation_error) as blocker:
            result = controller.execute_with_error_handling("lookup", explode)

        assert result.message == "KeyError"
        assert blocker.args == ["lookup", "KeyError"]


def test_operation_result_constructors():
    assert OperationResult.ok(1) == OperationResult(success=True, data=1)
    assert OperationResult.fail("nope") == OperationResult(success=False, message="nope")
