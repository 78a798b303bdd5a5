#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Presence queries on the container list

Images are matched by a plain string prefix of "<name>:<tag>". An image id of
"test" therefore also matches "testing:latest".
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from check_docker.models import ContainerRecord


def is_image_running(
    records: Iterable[ContainerRecord], image_prefix: str
) -> tuple[ContainerRecord | None, bool]:
    for record in records:
        if record.image.startswith(image_prefix) and record.is_up:
            return record, True
    return None, False


def is_named_container_running(
    records: Iterable[ContainerRecord], name: str
) -> tuple[ContainerRecord | None, bool]:
    """The search stops at the first container carrying the name, up or not"""
    for record in records:
        if name in record.plain_names:
            return record, record.is_up
    return None, False


def is_ghost(
    records: Iterable[ContainerRecord], image_prefix: str
) -> tuple[ContainerRecord | None, bool]:
    for record in records:
        if record.image.startswith(image_prefix) and record.is_ghost:
            return record, True
    return None, False


def ghosts(records: Iterable[ContainerRecord]) -> Sequence[ContainerRecord]:
    return [r for r in records if r.is_ghost]
