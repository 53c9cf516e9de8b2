import logging

from PyQt6.QtWidgets import QApplication

from core.arguments import read_arguments

logger = logging.getLogger(__name__)


class Sandbox(QApplication):
    """
    The Qt application the wallet runs inside.

    Built from the filtered argument list only, so Qt's own argument
    parser never sees the rest of the command line.
    """

    def __init__(self, launcher, argv):
        super().__init__(read_arguments(argv))
        self._launcher = launcher
        self.setQuitOnLastWindowClosed(True)

    def launcher(self):
        return self._launcher

    def exec(self):
        logger.info("[Sandbox] Starting event loop")
        result = super().exec()
        logger.info("[Sandbox] Event loop finished with %d", result)
        return result
