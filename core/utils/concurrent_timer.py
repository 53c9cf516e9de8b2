"""
Timer environment for code running outside the UI thread.

Worker threads schedule delayed callbacks with call_later(); when the
delay elapses the callback is handed to the MainQueueProcessor so it
runs on the UI thread.
"""

import threading
import logging

from core.ui.main_queue_processor import MainQueueProcessor

logger = logging.getLogger(__name__)


class ConcurrentTimerEnvironment:
    def __init__(self, processor=None):
        self._processor = processor or MainQueueProcessor.instance()
        if self._processor is None:
            raise RuntimeError("ConcurrentTimerEnvironment needs a MainQueueProcessor")
        self._timers = set()
        self._lock = threading.Lock()
        self._closed = False

    def call_later(self, delay_ms, callback):
        """Schedules `callback` on the UI thread after `delay_ms` milliseconds."""
        with self._lock:
            if self._closed:
                return None
            timer = threading.Timer(delay_ms / 1000.0, self._fire, args=(callback,))
            timer.daemon = True
            self._timers.add(timer)
        timer.start()
        return timer

    def _fire(self, callback):
        with self._lock:
            if self._closed:
                return
            self._timers.discard(threading.current_thread())
        self._processor.post(callback)

    def pending(self):
        with self._lock:
            return len(self._timers)

    def close(self):
        with self._lock:
            self._closed = True
            timers, self._timers = self._timers, set()
        for timer in timers:
            timer.cancel()
        logger.debug("[Timers] Cancelled %d pending timers", len(timers))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
