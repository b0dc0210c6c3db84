# -*- coding: utf-8 -*-
"""
Tests for environment-driven configuration.
"""

import logging

import pytest

from app.config import read_positive_int_env

SETTING = "FINPROTECT_TEST_INTERVAL_MS"


def test_unset_uses_default(monkeypatch):
    monkeypatch.delenv(SETTING, raising=False)
    assert read_positive_int_env(SETTING, 8000) == 8000


def test_blank_uses_default(monkeypatch):
    monkeypatch.setenv(SETTING, "  ")
    assert read_positive_int_env(SETTING, 8000) == 8000


def test_numeric_value_is_used(monkeypatch):
    monkeypatch.setenv(SETTING, "250")
    assert read_positive_int_env(SETTING, 8000) == 250


@pytest.mark.parametrize("raw", ["eight", "1.5", "0", "-100"])
def test_invalid_value_falls_back_with_warning(monkeypatch, caplog, raw):
    monkeypatch.setenv(SETTING, raw)

    with caplog.at_level(logging.WARNING, logger="finprotect.config"):
        assert read_positive_int_env(SETTING, 8000) == 8000

    assert SETTING in caplog.text
    assert "using 8000" in caplog.text
