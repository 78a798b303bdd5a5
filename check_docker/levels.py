#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Threshold evaluation of space usage

Thresholds are compared against the exact percentage. Only the display is
rounded, to a whole percent with halves rounded up (2.5 gives "3%"). This
deliberately differs from "%.0f" formatting, which rounds halves to even and
would render 2.5 as "2%".
"""

from __future__ import annotations

import math

from check_docker.exceptions import ZeroTotalError
from check_docker.state import State

# Levels of 100% are never reached in practice, so the checks are off by default
DEFAULT_LEVEL = 100.0


def percent_used(used: float, total: float, resource: str = "Capacity") -> float:
    if total == 0:
        raise ZeroTotalError(resource)
    return used * 100 / total


def state_for_levels(value: float, warn: float, crit: float) -> State:
    """Levels are lower bounds: reaching a level triggers it

    >>> state_for_levels(6, 5, 6).name
    'CRIT'
    >>> state_for_levels(5, 5, 6).name
    'WARN'
    >>> state_for_levels(4.9, 5, 6).name
    'OK'
    """
    if value >= crit:
        return State.CRIT
    if value >= warn:
        return State.WARN
    return State.OK


def evaluate(
    used: float,
    total: float,
    warn: float = DEFAULT_LEVEL,
    crit: float = DEFAULT_LEVEL,
    resource: str = "Capacity",
) -> tuple[float, State]:
    percent = percent_used(used, total, resource)
    return percent, state_for_levels(percent, warn, crit)


def render_percent(value: float) -> str:
    """Render a percentage as whole number, halves are rounded up

    >>> render_percent(7.5)
    '8%'
    >>> render_percent(2.5)
    '3%'
    >>> render_percent(2.0)
    '2%'
    >>> render_percent(1.2)
    '1%'
    """
    return f"{math.floor(value + 0.5)}%"
