#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Globals.
"""
import logging

PACKAGE = "fnkit"

LOGGING_FORMAT = "%(asctime)s %(name)s: [%(levelname)s] %(message)s"

LOGLEVELS = [logging.WARN, logging.INFO, logging.DEBUG]

# Priority passed to the scheduler with deferred calls; all calls are equal.
DEFER_PRIORITY = 1


def get_logger(name=PACKAGE, fmt=LOGGING_FORMAT, level=logging.WARN):
    """
    Initialize custom logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        hdlr = logging.StreamHandler()
        hdlr.setLevel(level)
        hdlr.setFormatter(logging.Formatter(fmt))
        logger.addHandler(hdlr)

    return logger


LOGGER = get_logger()


def set_loglevel(verbosity=0):
    """
    :param verbosity: Verbosity level = 0 | 1 | 2
    """
    if verbosity in (0, 1, 2):
        llvl = LOGLEVELS[verbosity]
    else:
        LOGGER.warning("Wrong verbosity: %r", verbosity)
        llvl = logging.WARN

    LOGGER.setLevel(llvl)
    for hdlr in LOGGER.handlers:
        hdlr.setLevel(llvl)

# vim:sw=4:ts=4:et:
