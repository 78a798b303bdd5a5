#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""check_docker - Monitor a Docker daemon via its remote API

Reports the number of containers, the devicemapper space usage, whether
required images and named containers are running, and ghost containers.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

from check_docker import census
from check_docker.checkresults import aggregate, CheckResult
from check_docker.config import Args, parse_arguments
from check_docker.driver_status import extract_capacity, in_bytes
from check_docker.exceptions import MKCheckDockerError
from check_docker.fetcher import DockerEndpoints, Fetcher, fetch_documents, HTTPFetcher
from check_docker.levels import evaluate, render_percent
from check_docker.log import setup_logging, VERBOSE
from check_docker.models import ContainerRecord, DockerInfo, parse_containers, parse_info
from check_docker.state import State
from check_docker.vcrtrace import recording

LOGGER = logging.getLogger(__name__)

# Only this storage driver reports the space usage in its DriverStatus
CAPACITY_DRIVER = "devicemapper"


class DockerCheck:
    def __init__(
        self, args: Args, info: DockerInfo, containers: Sequence[ContainerRecord]
    ) -> None:
        self.args = args
        self.info = info
        self.containers = containers

    def base_result(self) -> CheckResult:
        return CheckResult(
            State.OK,
            f"Total Containers: {len(self.containers)}",
            (f"containers={len(self.containers)}",),
        )

    def capacity_results(self) -> list[CheckResult]:
        if self.info.driver != CAPACITY_DRIVER:
            LOGGER.log(VERBOSE, "Storage driver %r: skipping space checks", self.info.driver)
            return []

        return [
            self.capacity_result(
                "Metadata", "Meta", self.args.warn_meta_space, self.args.crit_meta_space
            ),
            self.capacity_result(
                "Data", "Data", self.args.warn_data_space, self.args.crit_data_space
            ),
        ]

    def capacity_result(self, resource: str, title: str, warn: float, crit: float) -> CheckResult:
        capacity = extract_capacity(self.info.driver_status, resource)
        percent, state = evaluate(
            in_bytes(capacity.used), in_bytes(capacity.total), warn, crit, resource=resource
        )
        return CheckResult(
            state,
            f"{title} Space Used: {render_percent(percent)}",
            (f"{title.lower()}_space_used={percent:.2f}%;{warn:g};{crit:g};0;100",),
        )

    def image_result(self, image_id: str) -> CheckResult:
        running, is_running = census.is_image_running(self.containers, image_id)
        ghost, is_ghost = census.is_ghost(self.containers, image_id)

        if not is_running:
            return CheckResult(State.CRIT, f"Container of image: {image_id} is not running.")
        if is_ghost:
            assert ghost is not None
            return CheckResult(
                State.CRIT,
                f"Container(ID: {ghost.short_id}) of image: {image_id} is in ghost state.",
            )
        assert running is not None
        return CheckResult(
            State.OK, f"Container(ID: {running.short_id}) of image: {image_id} is in top shape."
        )

    def name_result(self, name: str) -> CheckResult:
        record, is_running = census.is_named_container_running(self.containers, name)

        if record is None or not is_running:
            return CheckResult(State.CRIT, f"Container named: {name} is not running.")
        if record.is_ghost:
            return CheckResult(
                State.CRIT, f"Container(ID: {record.short_id}) named: {name} is in ghost state."
            )
        return CheckResult(
            State.OK, f"Container(ID: {record.short_id}) named: {name} is in top shape."
        )

    def ghosts_result(self) -> CheckResult | None:
        if not (ghosts := census.ghosts(self.containers)):
            return None
        return CheckResult(self.args.ghosts_status, f"Ghost Containers: {len(ghosts)}")

    def sub_results(self) -> list[CheckResult]:
        results = self.capacity_results()
        results.extend(self.image_result(image_id) for image_id in self.args.image_ids)
        results.extend(self.name_result(name) for name in self.args.container_names)
        if (ghosts := self.ghosts_result()) is not None:
            results.append(ghosts)
        return results

    def result(self) -> CheckResult:
        sub_results = self.sub_results()
        for sub_result in sub_results:
            LOGGER.debug("%s: %s", sub_result.state.display_name, sub_result.summary)
        return aggregate(self.base_result(), sub_results)


def run_check(fetcher: Fetcher, args: Args) -> CheckResult:
    endpoints = DockerEndpoints(args.base_url)
    LOGGER.log(VERBOSE, "Querying %s and %s", endpoints.info, endpoints.containers)

    with recording(args.vcrtrace):
        documents = fetch_documents(fetcher, endpoints)
    info = parse_info(documents.info)
    containers = parse_containers(documents.containers)
    LOGGER.log(VERBOSE, "Driver: %s, %d containers", info.driver, len(containers))

    result = DockerCheck(args, info, containers).result()
    LOGGER.log(VERBOSE, "Result: %s", result.state.display_name)
    return result


def output_check_result(s: str) -> None:
    sys.stdout.write("%s\n" % s)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    setup_logging(args.verbose)

    fetcher = HTTPFetcher(
        timeout=args.timeout, cert=args.tls_cert, key=args.tls_key, ca=args.tls_ca
    )
    try:
        result = run_check(fetcher, args)
    except MKCheckDockerError as e:
        if args.debug:
            raise
        result = CheckResult(State.UNKNOWN, str(e))
    except Exception as e:
        if args.debug:
            raise
        result = CheckResult(State.UNKNOWN, f"Unhandled exception: {e}")

    output_check_result(result.as_text())
    return int(result.state)


def main_cli() -> NoReturn:
    sys.exit(main())
