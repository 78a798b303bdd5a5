#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""User-defined exceptions of the docker check."""

__all__ = [
    "DataError",
    "FetcherError",
    "MissingKeyError",
    "MKCheckDockerError",
    "ParseError",
    "ZeroTotalError",
]


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class MKCheckDockerError(Exception):
    pass


class FetcherError(MKCheckDockerError):
    """The daemon could not be queried (connection, timeout, HTTP or TLS failure)."""


class DataError(MKCheckDockerError):
    """The daemon answered, but the data can not be used."""


class ParseError(DataError):
    pass


class MissingKeyError(DataError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f'DriverStatus does not contain "{key}"')


class ZeroTotalError(DataError):
    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"{resource} Total is zero, usage can not be computed")
