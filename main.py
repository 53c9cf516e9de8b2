import sys
import logging

from core.launcher import Launcher
from core.assertion import AssertionFailure


def main(argv=None):
    """Runs the wallet and returns the process exit status."""
    if argv is None:
        argv = sys.argv
    try:
        launcher = Launcher.create(argv)
        return launcher.exec()
    except AssertionFailure as e:
        logging.getLogger("main").critical("[System] Bootstrap aborted: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
