"""
Platform hooks that run around the Qt application's lifetime.

start() runs before the QApplication exists, finish() after it has been
destroyed. apply_display_scaling() only touches environment variables,
which Qt reads when the application is constructed.
"""

import os
import shutil
import logging

from core.build_info import Platform

logger = logging.getLogger(__name__)

FONT_CONFIG_SRC = "custom_font_config_src"
FONT_CONFIG_DST = "custom_font_config_dst"

BUNDLED_FONT_CONFIG = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "resources", "fc-custom.conf")

_CUSTOM_SCALING_VARIABLES = ("QT_SCALE_FACTOR", "QT_SCREEN_SCALE_FACTORS")

_staged_font_config = None


def startup_options(temp_dir):
    """Builds the options mapping passed to start()."""
    return {
        FONT_CONFIG_SRC: BUNDLED_FONT_CONFIG,
        FONT_CONFIG_DST: temp_dir + "/fc-custom-1.conf",
    }


def apply_display_scaling(platform, environ=None):
    """macOS Retina scaling works fine, other platforms get it disabled."""
    if environ is None:
        environ = os.environ
    if platform is Platform.MAC:
        environ.pop("QT_ENABLE_HIGHDPI_SCALING", None)
    else:
        environ["QT_ENABLE_HIGHDPI_SCALING"] = "0"
    for name in _CUSTOM_SCALING_VARIABLES:
        environ.pop(name, None)


def start(options, platform, environ=None):
    """Stages the bundled font configuration on Linux."""
    global _staged_font_config
    if platform is not Platform.LINUX:
        return
    if environ is None:
        environ = os.environ

    src = options.get(FONT_CONFIG_SRC)
    dst = options.get(FONT_CONFIG_DST)
    if not src or not dst:
        logger.warning("[Platform] Font config options missing, skipping")
        return
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        logger.warning("[Platform] Could not stage font config %s: %s", dst, e)
        return

    environ["FONTCONFIG_FILE"] = dst
    _staged_font_config = dst
    logger.info("[Platform] Font config staged at %s", dst)


def finish(platform):
    global _staged_font_config
    if _staged_font_config is None:
        return
    try:
        os.remove(_staged_font_config)
    except OSError as e:
        logger.debug("[Platform] Could not remove %s: %s", _staged_font_config, e)
    _staged_font_config = None
