"""
Precondition checks for the bootstrap stage.

A failed check is recorded on a diagnostic sink together with the source
location and then raised as AssertionFailure. The default sink writes
to the log; tests pass a CollectingSink to inspect what was recorded.
"""

import inspect
import logging
import os

logger = logging.getLogger(__name__)


class AssertionFailure(Exception):
    def __init__(self, message, file="", line=0):
        super().__init__(f"{message} {file}:{line}")
        self.message = message
        self.file = file
        self.line = line


class DiagnosticSink:
    """Receives failed preconditions. Subclasses override record()."""

    def record(self, message, file, line):
        raise NotImplementedError


class LogSink(DiagnosticSink):
    def record(self, message, file, line):
        logger.critical("Assertion Failed! %s %s:%d", message, file, line)


class CollectingSink(DiagnosticSink):
    def __init__(self):
        self.records = []

    def record(self, message, file, line):
        self.records.append((message, file, line))


_default_sink = LogSink()


def expects(condition, message, sink=None):
    """Records and raises AssertionFailure if `condition` is false."""
    if condition:
        return
    caller = inspect.currentframe().f_back
    file = os.path.basename(caller.f_code.co_filename)
    line = caller.f_lineno
    (sink or _default_sink).record(message, file, line)
    raise AssertionFailure(message, file, line)
