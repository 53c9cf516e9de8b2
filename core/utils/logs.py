"""
Logging setup, done once the working path is known.

Until then nothing is configured and bootstrap modules only emit DEBUG
records, which go nowhere.
"""

import os
import sys
import logging

LOG_FILE = "log.txt"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handlers = []


def configure_logging(working_path, level=logging.INFO):
    """
    Attaches a stderr handler and a file handler on <working_path>log.txt.

    Calling it again replaces the handlers installed by the previous call.
    A log file that cannot be opened leaves only the stderr handler.

    Returns:
        The log file path, or None if only stderr logging is active.
    """
    root = logging.getLogger()
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    _handlers.append(stream)

    log_path = None
    try:
        os.makedirs(working_path, exist_ok=True)
        file_handler = logging.FileHandler(working_path + LOG_FILE, encoding='utf-8')
    except OSError as e:
        print(f"[Warn] Could not open log file in {working_path}: {e}", file=sys.stderr)
    else:
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)
        log_path = working_path + LOG_FILE

    for handler in _handlers:
        root.addHandler(handler)
    root.setLevel(level)
    return log_path
