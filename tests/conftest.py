# -*- coding: utf-8 -*-
"""
Shared test setup.

Qt runs headless and logs go to a throwaway directory; both must be set
before any application module is imported.
"""

import os
import sys
import tempfile
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("FINPROTECT_LOGS_DIR", tempfile.mkdtemp(prefix="finprotect-logs-"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest  # noqa: E402

from models.scam_case import ScamCase  # noqa: E402


@pytest.fixture
def report_payload():
    return {
        "scam_type": "upi_fraud",
        "amount": 500,
        "currency": "INR",
        "payment_method": "upi",
        "description": "Caller posing as bank staff asked me to approve a collect request.",
        "evidence": ("screenshot.png",),
    }


@pytest.fixture
def scam_case(report_payload):
    return ScamCase.create(report_payload, "a@b.com")


@pytest.fixture
def interval_ms():
    """Short enough to keep timer tests fast, long enough to act inside the window."""
    return 40
