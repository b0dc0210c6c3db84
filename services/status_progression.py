# -*- coding: utf-8 -*-
"""
Status Progression Engine - simulates external handling of a submitted case.

While a case is tracked and not yet at the terminal status, a single-shot
timer advances it one status per interval. Every scheduled advancement is
keyed to a generation number; cancelling or tracking another case bumps the
generation, so an advancement queued for an older case can never land.
"""

from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from app.config import Config
from models.scam_case import ScamCase
from utils.logger import get_logger

logger = get_logger(__name__)


class StatusProgressionEngine(QObject):
    """
    Advances the tracked case through TrackingStatus on a fixed interval.

    Signals:
        status_advanced: emitted with the new ScamCase after each advancement
        progression_finished: emitted with the case once it reaches the terminal status
    """

    status_advanced = pyqtSignal(object)
    progression_finished = pyqtSignal(object)

    def __init__(self, interval_ms: Optional[int] = None, parent=None):
        super().__init__(parent)
        self.interval_ms = Config.STATUS_ADVANCE_INTERVAL_MS if interval_ms is None else interval_ms
        self._case: Optional[ScamCase] = None
        self._generation = 0
        self._timer: Optional[QTimer] = None

    @property
    def current_case(self) -> Optional[ScamCase]:
        """Case the engine is currently advancing, if any."""
        return self._case

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_pending(self) -> bool:
        """Check if an advancement is scheduled."""
        return self._timer is not None and self._timer.isActive()

    def track(self, case: Optional[ScamCase]):
        """
        Start advancing `case`, replacing whatever was tracked before.

        Passing None is the same as cancel().
        """
        self.cancel()
        if case is None:
            return

        self._case = case
        logger.debug(f"Tracking case {case.case_id} at '{case.tracking_status.value}'")
        self._schedule()

    def cancel(self):
        """Drop the tracked case and invalidate any pending advancement."""
        self._generation += 1
        had_pending = self.is_pending
        self._stop_timer()
        if self._case is not None:
            logger.debug(
                f"Stopped tracking case {self._case.case_id}"
                f"{' (pending advancement cancelled)' if had_pending else ''}"
            )
        self._case = None

    def _schedule(self):
        if self._case is None or self._case.tracking_status.is_terminal:
            return

        generation = self._generation
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._on_timeout(generation))
        self._timer = timer
        timer.start(self.interval_ms)

    def _stop_timer(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None

    def _on_timeout(self, generation: int):
        if generation != self._generation:
            logger.debug(f"Discarding stale advancement (generation {generation} != {self._generation})")
            return

        self._stop_timer()

        case = self._case
        if case is None:
            return

        next_status = case.tracking_status.next_status()
        if next_status is None:
            return

        advanced = case.with_status(next_status)
        self._case = advanced
        logger.info(
            f"Case {case.case_id}: '{case.tracking_status.value}' -> '{next_status.value}'"
        )
        self.status_advanced.emit(advanced)

        if advanced.tracking_status.is_terminal:
            self.progression_finished.emit(advanced)
            return

        # A listener may have reset or replaced the case while handling the signal
        if generation == self._generation and self._case is advanced:
            self._schedule()
