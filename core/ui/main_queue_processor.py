import queue
import logging
import threading

from PyQt6.QtCore import QTimer

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 30


class MainQueueProcessor:
    """
    Runs callables posted from any thread on the UI thread.

    Posted callables wait in a thread-safe queue which a QTimer drains
    without blocking the UI loop. Only one processor exists at a time.
    """

    _instance = None
    _lock = threading.Lock()

    def __init__(self, interval=POLL_INTERVAL_MS):
        self._queue = queue.Queue()
        self._timer = QTimer()
        self._timer.timeout.connect(self.drain)
        with MainQueueProcessor._lock:
            if MainQueueProcessor._instance is not None:
                raise RuntimeError("MainQueueProcessor already exists")
            MainQueueProcessor._instance = self
        self._timer.start(interval)

    @classmethod
    def instance(cls):
        return cls._instance

    def post(self, callback):
        self._queue.put(callback)

    def drain(self):
        """Runs everything queued so far. Returns the number of callables run."""
        count = 0
        while True:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                return count
            count += 1
            try:
                callback()
            except Exception:
                logger.exception("[UI] Main queue callback failed")

    def close(self):
        self._timer.stop()
        with MainQueueProcessor._lock:
            if MainQueueProcessor._instance is self:
                MainQueueProcessor._instance = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
