"""
Writability probe for a candidate state directory.

Instead of asking the OS about permissions (which differs per platform)
the probe performs the write the application needs and looks at the
outcome. Runs before logging is configured, so it reports only through
its return value.
"""

import os
import logging

logger = logging.getLogger(__name__)

DATA_FOLDER = "data"
SALT_MARKER = "salt"
TEMP_PREFIX = "temp"
MAX_PROBE_ATTEMPTS = 64


def can_write(directory, max_attempts=MAX_PROBE_ATTEMPTS):
    """
    Checks whether `directory` can hold the application's state.

    Creates `<directory>data` if missing. An existing `salt` marker means
    an earlier run already initialised this location. Otherwise creates
    and removes `temp1`, `temp2`, ... until one succeeds; a name held by
    another process is skipped, any other failure means not writable.

    Args:
        directory: Slash-terminated candidate directory.
        max_attempts: Number of temp names tried before giving up.

    Returns:
        True if the directory is usable for writing, False otherwise.
    """
    data_path = directory + DATA_FOLDER
    try:
        os.makedirs(data_path, exist_ok=True)
    except OSError as e:
        logger.debug("[Probe] Cannot create %s: %s", data_path, e)
        return False

    if os.path.exists(os.path.join(data_path, SALT_MARKER)):
        return True

    for index in range(1, max_attempts + 1):
        temp = os.path.join(data_path, f"{TEMP_PREFIX}{index}")
        try:
            # 'x' refuses to open a file another run is still holding
            with open(temp, 'x'):
                pass
        except OSError as e:
            if not os.path.exists(temp):
                logger.debug("[Probe] Write denied in %s: %s", data_path, e)
                return False
            continue

        try:
            os.remove(temp)
        except OSError as e:
            logger.debug("[Probe] Could not remove %s: %s", temp, e)
        return True

    logger.debug("[Probe] Gave up after %d temp files in %s", max_attempts, data_path)
    return False
