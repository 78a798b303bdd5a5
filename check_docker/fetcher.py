#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Protocol

import requests

from check_docker.exceptions import FetcherError

LOGGER = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str) -> bytes: ...


class DockerEndpoints(NamedTuple):
    base_url: str

    def _join(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path}"

    @property
    def info(self) -> str:
        return self._join("info")

    @property
    def containers(self) -> str:
        return self._join("containers/json")


class Documents(NamedTuple):
    info: bytes
    containers: bytes


class HTTPFetcher:
    def __init__(
        self,
        *,
        timeout: float,
        cert: str | None = None,
        key: str | None = None,
        ca: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout
        self._session = requests.Session() if session is None else session
        if cert is not None:
            self._session.cert = cert if key is None else (cert, key)
        if ca is not None:
            self._session.verify = ca

    def fetch(self, url: str) -> bytes:
        LOGGER.debug("GET %s (timeout %ss)", url, self._timeout)
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetcherError(f"Error fetching {url}: {e}") from e

        LOGGER.debug("%s: %s, %d bytes", url, response.status_code, len(response.content))
        return response.content


def fetch_documents(fetcher: Fetcher, endpoints: DockerEndpoints) -> Documents:
    """Fetch /info and the container list in parallel

    Both requests run to completion. If any failed, the error of the first
    one in the order (info, containers) is raised.
    """
    with ThreadPoolExecutor(max_workers=2) as pool_executor:
        info = pool_executor.submit(fetcher.fetch, endpoints.info)
        containers = pool_executor.submit(fetcher.fetch, endpoints.containers)

    return Documents(info=info.result(), containers=containers.result())
