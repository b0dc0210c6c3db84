# -*- coding: utf-8 -*-
"""
Financial Protection UI Components
"""

from .toast import Toast
from .navbar import Navbar
from .status_timeline import StatusTimeline

__all__ = [
    "Toast",
    "Navbar",
    "StatusTimeline",
]
