"""
Gram Wallet Runtime Path Helper

Resolves where the running executable lives and where the OS keeps the
per-user application data, in both development mode (running via
python main.py) and packaged mode (a frozen executable).

Every directory returned here is absolute, uses '/' separators and ends
with '/', so callers can append file names directly. Failures never
raise: an unknown executable location is reported as empty strings.

Usage:
    from core.runtime_path import resolve_executable_path
    directory, name = resolve_executable_path(sys.argv)
"""

import os
import sys
import logging

import psutil
from PyQt6.QtCore import QDir, QStandardPaths

logger = logging.getLogger(__name__)


def slash_terminated(path):
    """Converts to '/' separators and appends a trailing '/' if missing."""
    path = QDir.fromNativeSeparators(path)
    return path if path.endswith('/') else path + '/'


def current_executable_path(argv):
    """Return the path of the running executable, or '' if unknown.

    - In a frozen bundle: the executable itself
    - In dev mode: the launched script (argv[0])
    - Otherwise: whatever the OS reports for this process
    """
    if getattr(sys, 'frozen', False):
        return sys.executable
    if argv and argv[0] and os.path.isfile(argv[0]):
        return os.path.abspath(argv[0])
    try:
        return psutil.Process().exe()
    except (psutil.Error, OSError) as e:
        logger.debug("[Paths] Executable query failed: %s", e)
        return ""


def resolve_executable_path(argv, query=current_executable_path):
    """
    Resolves the executable's directory and file name.

    One level of symbolic link is followed, so a symlinked executable
    resolves to the directory of its target.

    Args:
        argv: Raw process arguments.
        query: Callable returning the executable path for argv.

    Returns:
        (directory, name) with directory slash-terminated, or ("", "")
        when the location cannot be determined.
    """
    path = query(argv)
    if not path:
        return "", ""
    path = os.fsdecode(path)

    if os.path.islink(path):
        try:
            target = os.readlink(path)
        except OSError as e:
            logger.debug("[Paths] Could not read link %s: %s", path, e)
            return "", ""
        if not os.path.isabs(target):
            target = os.path.join(os.path.dirname(path), target)
        path = target

    if not os.path.exists(path):
        return "", ""

    absolute = os.path.abspath(path)
    return slash_terminated(os.path.dirname(absolute)), os.path.basename(absolute)


def resolve_app_data_path():
    """Return the per-user application data directory.

    Falls back to the current working directory when the OS does not
    report one. Depends on the application name being set first.
    """
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppDataLocation)
    if not location:
        logger.debug("[Paths] No app data location, using current directory")
        location = os.getcwd()
    return slash_terminated(QDir(location).absolutePath())


def temp_location():
    """Return the OS temp directory without a trailing separator."""
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.TempLocation)
    return QDir.fromNativeSeparators(location or QDir.tempPath()).rstrip('/')
