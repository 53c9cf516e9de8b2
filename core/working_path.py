"""
Chooses the base directory the application keeps its state under.

The platform/build branching is a lookup table so each combination can
be checked without rebuilding anything.
"""

import os
import logging
from enum import Enum

from core.build_info import Platform, BuildVariant
from core.writability import can_write, DATA_FOLDER

logger = logging.getLogger(__name__)

PORTABLE_FOLDER = "WalletForcePortable"


class Base(Enum):
    EXECUTABLE = "executable"
    APP_DATA = "app_data"
    # Executable directory if it passes the writability probe
    PROBED_EXECUTABLE = "probed_executable"


DECISIONS = {
    (Platform.MAC, BuildVariant.DEBUG): Base.EXECUTABLE,
    (Platform.MAC, BuildVariant.RELEASE): Base.APP_DATA,
    (Platform.MAC, BuildVariant.STORE_DEBUG): Base.APP_DATA,
    (Platform.MAC, BuildVariant.STORE_RELEASE): Base.APP_DATA,
    (Platform.LINUX, BuildVariant.DEBUG): Base.EXECUTABLE,
    (Platform.LINUX, BuildVariant.RELEASE): Base.APP_DATA,
    (Platform.LINUX, BuildVariant.STORE_DEBUG): Base.APP_DATA,
    (Platform.LINUX, BuildVariant.STORE_RELEASE): Base.APP_DATA,
    (Platform.WINDOWS, BuildVariant.STORE_DEBUG): Base.EXECUTABLE,
    (Platform.WINDOWS, BuildVariant.STORE_RELEASE): Base.APP_DATA,
    (Platform.WINDOWS, BuildVariant.DEBUG): Base.PROBED_EXECUTABLE,
    (Platform.WINDOWS, BuildVariant.RELEASE): Base.PROBED_EXECUTABLE,
}


def check_portable_path(executable_dir):
    """Returns '<executable_dir>WalletForcePortable/' if it exists, else ''."""
    if not executable_dir:
        return ""
    portable = executable_dir + PORTABLE_FOLDER
    return portable + '/' if os.path.isdir(portable) else ""


def select_base(executable_dir, app_data_dir, build_info, probe=can_write):
    """
    Picks the working-path base for this build.

    The portable folder wins over every platform rule. An unknown
    (empty) executable directory always resolves to app data.

    Args:
        executable_dir: Slash-terminated executable directory or ''.
        app_data_dir: Slash-terminated per-user app data directory.
        build_info: BuildInfo of the running build.
        probe: Writability check used for plain Windows builds.

    Returns:
        The slash-terminated base directory.
    """
    portable = check_portable_path(executable_dir)
    if portable:
        return portable

    decision = DECISIONS[(build_info.platform, build_info.variant)]
    if not executable_dir:
        return app_data_dir
    if decision is Base.EXECUTABLE:
        return executable_dir
    if decision is Base.PROBED_EXECUTABLE and probe(executable_dir):
        return executable_dir
    return app_data_dir


def compute_working_path(base):
    return base + DATA_FOLDER + '/'
