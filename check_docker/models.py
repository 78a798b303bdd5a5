#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Models of the two documents we read from the Docker remote API

Only the fields needed by the check are modelled, everything else the
daemon sends is ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator, TypeAdapter, ValidationError

from check_docker.exceptions import ParseError

SHORT_ID_LENGTH = 12


class DockerInfo(BaseModel, frozen=True, populate_by_name=True):
    """The relevant part of GET /info"""

    driver: str = Field(alias="Driver")
    driver_status: Sequence[tuple[str, str]] = Field(default=(), alias="DriverStatus")

    @field_validator("driver_status", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return () if value is None else value


class ContainerRecord(BaseModel, frozen=True, populate_by_name=True):
    """One entry of GET /containers/json"""

    id: str = Field(alias="Id")
    image: str = Field(alias="Image")
    names: tuple[str, ...] = Field(default=(), alias="Names")
    status: str = Field(alias="Status")

    @field_validator("names", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return () if value is None else value

    @property
    def short_id(self) -> str:
        return self.id[:SHORT_ID_LENGTH]

    @property
    def plain_names(self) -> tuple[str, ...]:
        """The API reports names like "/insane_franklin", strip one leading slash"""
        return tuple(name[1:] if name.startswith("/") else name for name in self.names)

    @property
    def is_up(self) -> bool:
        return self.status.startswith("Up")

    @property
    def is_ghost(self) -> bool:
        return "Ghost" in self.status


_CONTAINER_LIST = TypeAdapter(list[ContainerRecord])


def _first_error(e: ValidationError) -> str:
    """Condense a validation error to one line, the check output is one line"""
    first = e.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    text = f"{location}: {first['msg']}" if location else first["msg"]
    if (more := e.error_count() - 1) > 0:
        text += f" (and {more} more)"
    return text


def parse_info(raw: bytes) -> DockerInfo:
    try:
        return DockerInfo.model_validate_json(raw)
    except ValidationError as e:
        raise ParseError(f"Unable to parse daemon info: {_first_error(e)}") from e


def parse_containers(raw: bytes) -> Sequence[ContainerRecord]:
    try:
        return _CONTAINER_LIST.validate_json(raw)
    except ValidationError as e:
        raise ParseError(f"Unable to parse container list: {_first_error(e)}") from e
