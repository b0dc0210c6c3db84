# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from functools import wraps
from typing import Callable

from PyQt5.QtWidgets import QMessageBox, QWidget

from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Logs exceptions and shows them to the user as message boxes."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_dialog: bool = True) -> str:
        """
        Handle any exception: log it, optionally show dialog.

        Args:
            error: The exception to handle
            parent: Parent widget for dialog
            context: What was being done (e.g., "submitting report")
            show_dialog: Whether to show dialog to user

        Returns:
            User-facing error message
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message = f"Something went wrong while {context or 'processing your request'}.\n\n{error}"

        if show_dialog and parent:
            ErrorHandler.show_error(parent, message)

        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = "Error"):
        QMessageBox.critical(parent, title, message)


def with_error_boundary(operation_name: str):
    """
    Decorator for widget slots: log and report exceptions instead of
    letting them escape into the Qt event loop.

    Usage:
        @with_error_boundary("submitting report")
        def _on_submit_clicked(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except (MemoryError, KeyboardInterrupt):
                raise
            except Exception as e:
                parent = self.window() if isinstance(self, QWidget) else None
                ErrorHandler.handle(e, parent, operation_name)
                return None

        return wrapper
    return decorator
