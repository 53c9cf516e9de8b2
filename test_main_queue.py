import time
import unittest
from unittest.mock import MagicMock, patch

from PyQt6.QtCore import QCoreApplication

from core.ui.main_queue_processor import MainQueueProcessor
from core.utils.concurrent_timer import ConcurrentTimerEnvironment


class TestMainQueueProcessor(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self):
        self.processor = MainQueueProcessor()

    def tearDown(self):
        self.processor.close()

    def test_drain_runs_in_order(self):
        calls = []
        self.processor.post(lambda: calls.append(1))
        self.processor.post(lambda: calls.append(2))
        self.assertEqual(self.processor.drain(), 2)
        self.assertEqual(calls, [1, 2])
        self.assertEqual(self.processor.drain(), 0)

    def test_failing_callback_does_not_stop_drain(self):
        after = MagicMock()
        self.processor.post(MagicMock(side_effect=ValueError("boom")))
        self.processor.post(after)
        self.assertEqual(self.processor.drain(), 2)
        after.assert_called_once()

    def test_single_instance(self):
        self.assertIs(MainQueueProcessor.instance(), self.processor)
        with self.assertRaises(RuntimeError):
            MainQueueProcessor()

    def test_failed_timer_setup_leaves_no_instance(self):
        self.processor.close()
        with patch('core.ui.main_queue_processor.QTimer', side_effect=RuntimeError("no timer")):
            with self.assertRaises(RuntimeError):
                MainQueueProcessor()
        self.assertIsNone(MainQueueProcessor.instance())
        with MainQueueProcessor() as other:
            self.assertIs(MainQueueProcessor.instance(), other)

    def test_close_releases_instance(self):
        self.processor.close()
        self.assertIsNone(MainQueueProcessor.instance())
        with MainQueueProcessor() as other:
            self.assertIs(MainQueueProcessor.instance(), other)
        self.assertIsNone(MainQueueProcessor.instance())


class TestConcurrentTimerEnvironment(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self):
        self.processor = MainQueueProcessor()

    def tearDown(self):
        self.processor.close()

    def test_callback_runs_through_main_queue(self):
        callback = MagicMock()
        with ConcurrentTimerEnvironment(self.processor) as environment:
            environment.call_later(10, callback)
            deadline = time.monotonic() + 5
            while not callback.called and time.monotonic() < deadline:
                self.processor.drain()
                time.sleep(0.01)
        callback.assert_called_once()

    def test_close_cancels_pending(self):
        callback = MagicMock()
        environment = ConcurrentTimerEnvironment(self.processor)
        environment.call_later(60000, callback)
        self.assertEqual(environment.pending(), 1)
        environment.close()
        self.assertEqual(environment.pending(), 0)
        self.assertIsNone(environment.call_later(1, callback))
        self.processor.drain()
        callback.assert_not_called()

    def test_uses_current_processor(self):
        environment = ConcurrentTimerEnvironment()
        environment.close()

    def test_requires_processor(self):
        self.processor.close()
        with self.assertRaises(RuntimeError):
            ConcurrentTimerEnvironment()


if __name__ == '__main__':
    unittest.main()
