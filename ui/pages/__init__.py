# -*- coding: utf-8 -*-
"""
Financial Protection UI Pages (one per wizard stage)
"""

from .intro_page import IntroPage
from .login_page import LoginPage
from .intake_page import IntakePage
from .success_page import SuccessPage

__all__ = [
    "IntroPage",
    "LoginPage",
    "IntakePage",
    "SuccessPage",
]
