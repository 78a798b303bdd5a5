#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from check_docker.state import State, worst_state

__all__ = ["CheckResult", "aggregate"]


SUMMARY_SEPARATOR = " - "


@dataclasses.dataclass(frozen=True)
class CheckResult:
    state: State = State.OK
    summary: str = ""
    metrics: tuple[str, ...] = ()

    def as_text(self) -> str:
        line = f"{self.state.display_name}: {self._replace_pipe(self._one_line(self.summary))}"
        return " | ".join((line, " ".join(self.metrics))) if self.metrics else line

    @staticmethod
    def _one_line(txt: str) -> str:
        return " ".join(txt.splitlines())

    @staticmethod
    def _replace_pipe(txt: str) -> str:
        """The vertical bar indicates end of service output and start of metrics.
        Replace the ones in the output by a Unicode "Light vertical bar"
        """
        return txt.replace("|", "\u2758")


def aggregate(base: CheckResult, others: Iterable[CheckResult]) -> CheckResult:
    """Fold the sub results into the base result

    >>> aggregate(
    ...     CheckResult(State.OK, "Total Containers: 2"),
    ...     [CheckResult(State.CRIT, "down"), CheckResult(State.WARN, "meh")],
    ... )
    CheckResult(state=<State.CRIT: 2>, summary='Total Containers: 2 - down - meh', metrics=())
    """
    others = list(others)
    return CheckResult(
        state=worst_state(base.state, *(o.state for o in others), default=State.OK),
        summary=SUMMARY_SEPARATOR.join([base.summary, *(o.summary for o in others)]),
        metrics=tuple(m for r in (base, *others) for m in r.metrics),
    )
