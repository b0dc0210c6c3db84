# -*- coding: utf-8 -*-
"""
Financial Protection Controllers
================================
Controller layer between the UI pages and the case services.

Usage:
    from controllers import WizardController

    controller = WizardController()
    contract = controller.contract_for_current_stage()
    contract.on_proceed()
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.stage_contracts import (
    IntakeContract,
    IntroContract,
    LoginContract,
    SuccessContract,
)

from controllers.wizard_controller import WizardController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Contracts
    "IntroContract",
    "LoginContract",
    "IntakeContract",
    "SuccessContract",

    # Wizard
    "WizardController",
]
