#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Record and replay the HTTP traffic of the check

If the trace file does not exist yet, it is created and both requests to the
Docker daemon and their answers are recorded in it. If it already exists, no
requests are sent and the answers are replayed from the file.
"""

from __future__ import annotations

import contextlib
import logging
from typing import Any, ContextManager

LOGGER = logging.getLogger(__name__)

TRACEFILE_HELP = (
    "Record the HTTP traffic to TRACEFILE, or replay it from there if the file exists"
)

# Keep credentials out of the trace file
_FILTERED_HEADERS = [("authorization", "****")]


def recording(tracefile: str | None, **vcr_init_kwargs: Any) -> ContextManager[Any]:
    """Context for the requests to the Docker daemon

    Provided keyword arguments will be passed to the call of vcr.VCR.
    Without a trace file this is a null context.
    """
    if not tracefile:
        return contextlib.nullcontext()

    import vcr  # type: ignore[import-untyped]

    LOGGER.debug("Tracing HTTP traffic in %s", tracefile)
    vcr_init_kwargs.setdefault("filter_headers", _FILTERED_HEADERS)
    return vcr.VCR(**vcr_init_kwargs).use_cassette(tracefile)
