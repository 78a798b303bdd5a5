#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from typing import NoReturn

from pydantic import BaseModel, field_validator

from check_docker.levels import DEFAULT_LEVEL
from check_docker.state import State
from check_docker.vcrtrace import TRACEFILE_HELP

DEFAULT_BASE_URL = "http://localhost:2375"


class Args(BaseModel, frozen=True):
    base_url: str = DEFAULT_BASE_URL
    warn_meta_space: float = DEFAULT_LEVEL
    crit_meta_space: float = DEFAULT_LEVEL
    warn_data_space: float = DEFAULT_LEVEL
    crit_data_space: float = DEFAULT_LEVEL
    image_ids: tuple[str, ...] = ()
    container_names: tuple[str, ...] = ()
    ghosts_status: State = State.WARN
    timeout: float = 10.0
    tls_cert: str | None = None
    tls_key: str | None = None
    tls_ca: str | None = None
    vcrtrace: str | None = None
    debug: bool = False
    verbose: int = 0

    @field_validator("image_ids", "container_names", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        # argparse leaves repeatable options at None if they never occur
        return () if value is None else value


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with 3 (UNKNOWN), as required by the monitoring plug-in API"""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(3, f"{self.prog}: error: {message}\n")


def _level(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid level: {raw!r}") from e
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"level must be a finite number: {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"level must not be negative: {raw!r}")
    return value


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid value: {raw!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"value must be positive: {raw!r}")
    return value


def create_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="check_docker",
        description="""Check the health of a Docker daemon""",
    )

    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"The Base URL for the Docker server (default: {DEFAULT_BASE_URL})",
    )
    for resource, title in (("meta", "Metadata"), ("data", "Data")):
        for level in ("warn", "crit"):
            parser.add_argument(
                f"--{level}-{resource}-space",
                type=_level,
                default=DEFAULT_LEVEL,
                metavar="PERCENT",
                help=f"{'Warning' if level == 'warn' else 'Critical'} threshold for {title} "
                "Space usage, only used with the devicemapper driver (default: 100)",
            )
    parser.add_argument(
        "--image-id",
        dest="image_ids",
        action="append",
        metavar="IMAGE",
        help="An image that must have a running container on the Docker server. "
        "Matched as a prefix of '<name>:<tag>', so 'web' also matches 'webapp:latest'. "
        "Can be given multiple times.",
    )
    parser.add_argument(
        "--container-name",
        dest="container_names",
        action="append",
        metavar="NAME",
        help="A container name that must be running on the Docker server. "
        "Can be given multiple times.",
    )
    parser.add_argument(
        "--ghosts-status",
        type=int,
        choices=[int(s) for s in State],
        default=int(State.WARN),
        help="State to report if any containers are in ghost state (default: 1)",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_float,
        default=10.0,
        help="Seconds before a request to the Docker server times out (default: 10)",
    )
    parser.add_argument("--tls-cert", metavar="FILE", help="Client certificate for TLS")
    parser.add_argument("--tls-key", metavar="FILE", help="Private key of the client certificate")
    parser.add_argument("--tls-ca", metavar="FILE", help="CA bundle to verify the Docker server")
    parser.add_argument("--vcrtrace", metavar="TRACEFILE", help=TRACEFILE_HELP)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Verbose mode (for even more output use -vvv)",
    )
    parser.add_argument("--debug", action="store_true", help="Raise python exceptions.")

    return parser


def parse_arguments(argv: Sequence[str]) -> Args:
    parser = create_parser()
    namespace = parser.parse_args(argv)

    if namespace.tls_key is not None and namespace.tls_cert is None:
        parser.error("--tls-key requires --tls-cert")

    return Args.model_validate(vars(namespace))
