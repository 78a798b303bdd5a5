#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Extract measurements from the "DriverStatus" pairs of /info

The storage driver reports its state as a list of key/value strings, e.g.

    [["Data Space Used", "20.0 mb"], ["Metadata Space Total", "2.147 GB"], ...]

Which keys are present depends on the driver. A measurement keeps the number
and unit as reported. The daemon picks the unit of every value on its own, so
capacities are compared in bytes (see `in_bytes`).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import NamedTuple

from check_docker.exceptions import MissingKeyError, ParseError


class Measurement(NamedTuple):
    key: str
    value: float
    unit: str


class CapacityPair(NamedTuple):
    resource: str
    used: Measurement
    total: Measurement


def find_driver_status(entries: Iterable[tuple[str, str]], key: str) -> str:
    """Return the value of the first entry with the given key

    >>> find_driver_status([("Key", "Value"), ("Key", "Other")], "Key")
    'Value'
    """
    for entry_key, value in entries:
        if entry_key == key:
            return value
    raise MissingKeyError(key)


def parse_measurement(key: str, raw: str) -> Measurement:
    """Parse values of the form "<number> <unit>"

    >>> parse_measurement("Data Space Used", "1024.05 Mb")
    Measurement(key='Data Space Used', value=1024.05, unit='mb')
    >>> parse_measurement("Dirs", "42")
    Measurement(key='Dirs', value=42.0, unit='')
    """
    tokens = raw.split()
    if not tokens:
        raise ParseError(f'Empty value for "{key}"')

    try:
        value = float(tokens[0])
    except ValueError as e:
        raise ParseError(f'Invalid value for "{key}": {e}') from e

    if not math.isfinite(value):
        raise ParseError(f'Invalid value for "{key}": {raw!r}')

    return Measurement(key, value, tokens[1].lower() if len(tokens) > 1 else "")


def extract_measurement(entries: Iterable[tuple[str, str]], key: str) -> Measurement:
    return parse_measurement(key, find_driver_status(entries, key))


def extract_capacity(entries: Iterable[tuple[str, str]], resource: str) -> CapacityPair:
    entries = list(entries)
    return CapacityPair(
        resource,
        used=extract_measurement(entries, f"{resource} Space Used"),
        total=extract_measurement(entries, f"{resource} Space Total"),
    )


# The daemon renders sizes with decimal prefixes ("2.147 GB"), some versions
# and the devicemapper tools use binary ones ("2 GiB").
_UNIT_FACTORS = {
    "": 1,
    "b": 1,
    "k": 1000,
    "kb": 1000,
    "m": 1000**2,
    "mb": 1000**2,
    "g": 1000**3,
    "gb": 1000**3,
    "t": 1000**4,
    "tb": 1000**4,
    "p": 1000**5,
    "pb": 1000**5,
    "kib": 1024,
    "mib": 1024**2,
    "gib": 1024**3,
    "tib": 1024**4,
    "pib": 1024**5,
}


def in_bytes(measurement: Measurement) -> float:
    """Convert a size measurement to bytes

    >>> in_bytes(Measurement("Metadata Space Used", 2.5, "mb"))
    2500000.0
    >>> in_bytes(Measurement("Data Space Total", 2.0, "gib"))
    2147483648.0
    """
    try:
        return measurement.value * _UNIT_FACTORS[measurement.unit]
    except KeyError as e:
        raise ParseError(
            f'Unknown unit for "{measurement.key}": {measurement.unit!r}'
        ) from e
