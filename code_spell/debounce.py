"""
Debounced Spell Checking
========================
Runs a check at most once per quiet period after the last edit.

Every submission bumps a version number. When the timer fires, the check
runs on the latest submitted text and its result is delivered only if no
newer submission arrived while it was running.
"""

import threading
from typing import Callable, Optional

from config_logging import get_logger
from . import config as spell_config
from .models import CheckResult
from .session import SpellCheckSession

logger = get_logger('code_spell')


class DebouncedChecker:
    """
    Throttles calls into a spell-check session.

    Args:
        session_provider: Returns the session to check with at fire time,
                          so a language switch between edits is honoured
        on_result: Called with each non-stale CheckResult
        delay_ms: Quiet period after the last submit (default from config)
    """

    def __init__(
        self,
        session_provider: Callable[[], SpellCheckSession],
        on_result: Callable[[CheckResult], None],
        delay_ms: Optional[int] = None
    ):
        self.session_provider = session_provider
        self.on_result = on_result
        if delay_ms is None:
            delay_ms = spell_config.get_config().debounce.delay_ms
        self.delay_ms = delay_ms

        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending_text: Optional[str] = None
        self._version = 0

    @property
    def version(self) -> int:
        """Version of the most recent submission."""
        return self._version

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def submit(self, text: str) -> int:
        """
        Schedule a check of text, replacing any pending one.

        Returns the version assigned to this submission.
        """
        with self._lock:
            self._version += 1
            self._pending_text = text
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay_ms / 1000.0, self._fire)
            self._timer.daemon = True
            self._timer.start()
            return self._version

    def flush(self) -> Optional[CheckResult]:
        """Run the pending check now instead of waiting for the timer."""
        with self._lock:
            if self._timer is None:
                return None
            self._timer.cancel()
            self._timer = None
        return self._run()

    def cancel(self):
        """Drop the pending check, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._pending_text = None

    def is_current(self, result: CheckResult) -> bool:
        """True if result was computed for the latest submitted text."""
        return result.version == self._version

    def _fire(self):
        with self._lock:
            # A submit that raced this timer has already scheduled a newer one
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        self._run()

    def _run(self) -> Optional[CheckResult]:
        with self._lock:
            text = self._pending_text
            version = self._version
            self._pending_text = None
        if text is None:
            return None

        result = self.session_provider().check(text, version=version)

        if not self.is_current(result):
            logger.debug("Discarding stale spell check result",
                         version=version, current=self._version)
            return None

        self.on_result(result)
        return result
