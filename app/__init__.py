# -*- coding: utf-8 -*-
"""
Financial Protection Application Core Module

MainWindow lives in app.main_window; it is not re-exported here because
models and services read app.config during their own import.
"""

from .config import Config, Vocabularies

__all__ = ["Config", "Vocabularies"]
