# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# utils.logger reads Config, so config logs through the plain logger hierarchy
logger = logging.getLogger("finprotect.config")


def read_positive_int_env(name: str, default: int) -> int:
    """Read a positive integer setting, falling back to `default` when unset or invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning(f"Ignoring invalid {name}={raw!r}; using {default}")
        return default
    return value


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Status progression: one advancement per interval (milliseconds)
_STATUS_ADVANCE_INTERVAL_MS = read_positive_int_env("STATUS_ADVANCE_INTERVAL_MS", 8000)

# Theme applied at startup (light, dark, olive)
_DEFAULT_THEME = os.getenv("DEFAULT_THEME", "light").lower()

# Logs location (tests redirect this to a temp dir)
_LOGS_DIR = os.getenv("FINPROTECT_LOGS_DIR", None)

_DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "INR")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Financial Protection"
    APP_TITLE: str = "Financial Protection - Scam Reporting Portal"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Financial Protection Desk"

    # Case tracking simulation
    # 8 seconds between automatic status advancements
    STATUS_ADVANCE_INTERVAL_MS: int = _STATUS_ADVANCE_INTERVAL_MS
    CASE_ID_PREFIX: str = "FP"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720
    NAVBAR_HEIGHT: int = 64
    DEFAULT_THEME: str = _DEFAULT_THEME
    TOAST_DURATION_MS: int = 3000

    # Intake
    DEFAULT_CURRENCY: str = _DEFAULT_CURRENCY
    DESCRIPTION_MIN_LENGTH: int = 10
    CONTACT_MAX_LENGTH: int = 120


# Controlled vocabularies
class Vocabularies:
    # Value (code), Name (English)
    SCAM_TYPES = [
        ("upi_fraud", "UPI / Payment App Fraud"),
        ("investment", "Investment or Trading Scam"),
        ("phishing", "Phishing / Fake Bank Call"),
        ("loan_app", "Instant Loan App Harassment"),
        ("job_offer", "Fake Job Offer"),
        ("online_shopping", "Online Shopping Fraud"),
        ("other", "Other"),
    ]

    PAYMENT_METHODS = [
        ("upi", "UPI"),
        ("net_banking", "Net Banking"),
        ("card", "Debit / Credit Card"),
        ("wallet", "Mobile Wallet"),
        ("cash", "Cash Deposit"),
        ("crypto", "Cryptocurrency"),
        ("other", "Other"),
    ]

    @classmethod
    def codes(cls, vocabulary) -> tuple:
        return tuple(code for code, _ in vocabulary)

    @classmethod
    def get_display_name(cls, vocabulary, code: str) -> str:
        for value, name in vocabulary:
            if value == code:
                return name
        return code
