"""Simple module which define logging module style and returns it."""

import logging
import sys

# Configure the formatting of the logger
logging.basicConfig(format="%(message)s", stream=sys.stdout)
# logging.basicConfig(format='[%(levelname)s] %(message)s')

# Capture warning messages and redirect them through the logger
logging.captureWarnings(True)

# Initialize logger
logger = logging.getLogger("recokit")


def raise_verbosity(verbosity):
    """Lowers the package logger level so that diagnostics requested by a
    component with a positive verbosity are shown.

    The level is only ever lowered to INFO, never raised, so a host which
    already asked for DEBUG output keeps it.

    Parameters
    ----------
    verbosity : int
        Verbosity level of the component
    """
    if verbosity > 0 and logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
