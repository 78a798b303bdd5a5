#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable, Mapping

import pytest

from check_docker.exceptions import FetcherError

DEVICEMAPPER_INFO = b"""{
    "Driver": "devicemapper",
    "DriverStatus": [
        ["Data Space Used", "20.0 mb"],
        ["Data Space Total", "1000.0 mb"],
        ["Metadata Space Used", "15.0 mb"],
        ["Metadata Space Total", "200.0 mb"]
    ]
}"""

AUFS_INFO = b"""{
    "Containers": 0,
    "Debug": 0,
    "Driver": "aufs",
    "DriverStatus": [
        ["Root Dir", "/usr/local/lib/docker/aufs"],
        ["Dirs", "0"]
    ],
    "ExecutionDriver": "native-0.2",
    "KernelVersion": "3.8.0-35-generic",
    "Sockets": ["tcp://0.0.0.0:2375", "unix:///var/run/docker.sock"]
}"""

CONTAINERS = b"""[
  {
    "Command": "script/run ",
    "Created": 1399681210,
    "Id": "ded464bf7dfb978b6b101c289a06b59a1c64435b3b7e70c97e6876ceb2a9a159",
    "Image": "testing:b969c9317cc60c389162cbdb2999806ef9b9666b",
    "Names": ["/insane_franklin"],
    "Ports": [{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8485, "Type": "tcp"}],
    "Status": "Up 3 days"
  },
  {
    "Command": "script/run ",
    "Created": 1399681124,
    "Id": "a64bba6cd0dbfb9b1bc1880f38d138a1c69a929853dcfca72314d1242e00017c",
    "Image": "real:b969c9317cc60c389162cbdb2999806ef9b9666b",
    "Names": ["/sad_ptolemy"],
    "Ports": [{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 80, "Type": "tcp"}],
    "Status": "Exit 0"
  },
  {
    "Command": "script/run ",
    "Created": 1399681124,
    "Id": "2938378cd0dbfb9b1bc1880f38d138a1c69a929853dcfca72314d1242e00017c",
    "Image": "busted:b969c9317cc60c389162cbdb2999806ef9b9666b",
    "Names": ["/happy_galileo"],
    "Ports": [{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8999, "Type": "tcp"}],
    "Status": "Ghost"
  }
]"""


class StubFetcher:
    """Serves canned documents by the end of the requested URL"""

    def __init__(
        self,
        documents: Mapping[str, bytes],
        errors: Mapping[str, Exception] | None = None,
    ) -> None:
        self.documents = documents
        self.errors = errors or {}
        self.requested: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        for path, exc in self.errors.items():
            if url.endswith(path):
                raise exc
        for path, document in self.documents.items():
            if url.endswith(path):
                return document
        raise FetcherError(f"Don't recognize URL: {url}")


FetcherFactory = Callable[..., StubFetcher]


@pytest.fixture(name="devicemapper_info")
def fixture_devicemapper_info() -> bytes:
    return DEVICEMAPPER_INFO


@pytest.fixture(name="aufs_info")
def fixture_aufs_info() -> bytes:
    return AUFS_INFO


@pytest.fixture(name="containers_json")
def fixture_containers_json() -> bytes:
    return CONTAINERS


@pytest.fixture(name="make_fetcher")
def fixture_make_fetcher() -> FetcherFactory:
    def _make(
        info: bytes = DEVICEMAPPER_INFO,
        containers: bytes = CONTAINERS,
        errors: Mapping[str, Exception] | None = None,
    ) -> StubFetcher:
        return StubFetcher({"/info": info, "/containers/json": containers}, errors)

    return _make
