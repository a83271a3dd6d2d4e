"""
Tests for Debounced Spell Checking
==================================
"""

import threading

import pytest

from code_spell.debounce import DebouncedChecker

# Long enough that the timer never fires on its own during a test
NEVER_MS = 60_000


@pytest.fixture
def results():
    return []


class TestDebouncedChecker:

    def test_flush_runs_latest_text_only(self, c_session, results):
        checker = DebouncedChecker(lambda: c_session, results.append, delay_ms=NEVER_MS)
        checker.submit("xy")
        version = checker.submit("retrun 0;")
        result = checker.flush()

        assert result is not None
        assert result.version == version == 2
        assert [e.word for e in result.errors] == ['retrun']
        assert results == [result]
        assert not checker.pending

    def test_flush_without_submit(self, c_session, results):
        checker = DebouncedChecker(lambda: c_session, results.append, delay_ms=NEVER_MS)
        assert checker.flush() is None
        assert results == []

    def test_cancel(self, c_session, results):
        checker = DebouncedChecker(lambda: c_session, results.append, delay_ms=NEVER_MS)
        checker.submit("xy")
        checker.cancel()
        assert not checker.pending
        assert checker.flush() is None
        assert results == []

    def test_timer_fires(self, c_session):
        done = threading.Event()
        received = []

        def on_result(result):
            received.append(result)
            done.set()

        checker = DebouncedChecker(lambda: c_session, on_result, delay_ms=10)
        checker.submit("xy")
        assert done.wait(timeout=5)
        assert [e.word for e in received[0].errors] == ['xy']

    def test_stale_result_is_discarded(self, c_session, results):
        checker = None

        def provider():
            # Simulate an edit arriving while the check is running
            if checker.version == 1:
                checker.submit("newer text")
            return c_session

        checker = DebouncedChecker(provider, results.append, delay_ms=NEVER_MS)
        checker.submit("xy")
        assert checker.flush() is None
        assert results == []
        assert checker.pending
        checker.cancel()

    def test_session_provider_is_called_at_fire_time(self, c_session, python_session, results):
        sessions = {'current': c_session}
        checker = DebouncedChecker(lambda: sessions['current'], results.append, delay_ms=NEVER_MS)
        checker.submit("elif")
        sessions['current'] = python_session
        result = checker.flush()
        assert result.language == 'python'

    def test_delay_from_config(self, default_config, c_session):
        default_config.debounce.delay_ms = 250
        checker = DebouncedChecker(lambda: c_session, lambda r: None)
        assert checker.delay_ms == 250

    def test_is_current(self, c_session, results):
        checker = DebouncedChecker(lambda: c_session, results.append, delay_ms=NEVER_MS)
        checker.submit("xy")
        result = checker.flush()
        assert checker.is_current(result)
        checker.submit("zz")
        assert not checker.is_current(result)
        checker.cancel()
