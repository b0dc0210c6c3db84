# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for controllers in the Financial Protection app.

Controllers run user-triggered operations through execute_with_error_handling:
a failure never escapes into the Qt slot that triggered it, it comes back as
a failed OperationResult and is announced on operation_error.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""

    @classmethod
    def ok(cls, data: T = None) -> 'OperationResult[T]':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> 'OperationResult[T]':
        return cls(success=False, message=message)


class BaseController(QObject):
    """Runs operations and reports their failures as signals."""

    operation_error = pyqtSignal(str, str)  # operation name, error message

    def _log_operation(self, operation: str, **kwargs):
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable,
        *args,
        **kwargs
    ) -> OperationResult:
        """Call func; an exception becomes a failed result plus operation_error."""
        try:
            return OperationResult.ok(data=func(*args, **kwargs))
        except Exception as e:
            error_msg = str(e) or e.__class__.__name__
            logger.error(f"{self.__class__.__name__}.{operation} failed: {error_msg}", exc_info=True)
            self.operation_error.emit(operation, error_msg)
            return OperationResult.fail(message=error_msg)
