#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Diagnostics of the check go to stderr, stdout carries only the result line"""

import logging
import sys

# Between INFO and DEBUG: what the check is doing, without the per result details
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("check_docker")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s [%(levelno)s] [%(name)s] %(message)s"


def setup_logging(verbosity: int) -> None:
    """Values for "verbosity":

      0: log nothing
      1: VERBOSE and above
      2: DEBUG and above (ALL messages of the check)
      3: also the HTTP connection handling of urllib3
    """
    if verbosity < 0:
        raise ValueError(verbosity)

    del logger.handlers[:]
    if verbosity == 0:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.INFO)
        return

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(VERBOSE if verbosity == 1 else logging.DEBUG)

    urllib3_logger = logging.getLogger("urllib3")
    if verbosity < 3:
        urllib3_logger.setLevel(logging.WARNING)
        return
    urllib3_logger.setLevel(logging.DEBUG)
    urllib3_logger.handlers[:] = logger.handlers
