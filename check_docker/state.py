#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

import enum


class State(enum.IntEnum):
    """Monitoring states. The value is the exit code of the plugin."""

    OK = 0
    WARN = 1
    CRIT = 2
    UNKNOWN = 3

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    State.OK: "OK",
    State.WARN: "WARNING",
    State.CRIT: "CRITICAL",
    State.UNKNOWN: "UNKNOWN",
}

# UNKNOWN means we could not read the daemon at all, which outranks a known CRIT
_SEVERITY = {
    State.OK: 0,
    State.WARN: 1,
    State.CRIT: 2,
    State.UNKNOWN: 3,
}


def worst_state(*states: State, default: State) -> State:
    """Return the 'worst' aggregation of all states

    The order of badness is

        OK -> WARN -> CRIT -> UNKNOWN

    Examples:

    >>> worst_state(State.OK, State.OK, default=State.OK).name
    'OK'
    >>> worst_state(State.OK, State.WARN, default=State.OK).name
    'WARN'
    >>> worst_state(State.CRIT, State.UNKNOWN, State.WARN, default=State.OK).name
    'UNKNOWN'
    >>> worst_state(default=State.CRIT).name
    'CRIT'

    """
    return max(states, key=_SEVERITY.__getitem__, default=default)
