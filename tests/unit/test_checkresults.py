#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from check_docker.checkresults import aggregate, CheckResult
from check_docker.state import State


def test_aggregate_without_sub_results() -> None:
    base = CheckResult(State.OK, "Total Containers: 0")
    assert aggregate(base, []) == base


def test_aggregate_joins_summaries_in_order() -> None:
    result = aggregate(
        CheckResult(State.UNKNOWN, "Chaucer"),
        [
            CheckResult(State.CRIT, "Meta Space Used: 8%"),
            CheckResult(State.CRIT, "Data Space Used: 2%"),
            CheckResult(State.WARN, "Meta Space Used: 8%"),
        ],
    )
    assert result == CheckResult(
        State.UNKNOWN,
        "Chaucer - Meta Space Used: 8% - Data Space Used: 2% - Meta Space Used: 8%",
    )


def test_aggregate_keeps_appending_after_crit() -> None:
    result = aggregate(
        CheckResult(State.OK, "base"),
        [CheckResult(State.CRIT, "first"), CheckResult(State.OK, "second")],
    )
    assert result.state is State.CRIT
    assert result.summary == "base - first - second"


def test_aggregate_does_not_touch_base() -> None:
    base = CheckResult(State.OK, "base")
    aggregate(base, [CheckResult(State.WARN, "other")])
    assert base == CheckResult(State.OK, "base")


def test_aggregate_collects_metrics() -> None:
    result = aggregate(
        CheckResult(State.OK, "base", ("containers=3",)),
        [CheckResult(State.OK, "meta", ("meta_space_used=7.50%;100;100;0;100",))],
    )
    assert result.metrics == ("containers=3", "meta_space_used=7.50%;100;100;0;100")


def test_as_text() -> None:
    assert CheckResult(State.WARN, "Ghost Containers: 1").as_text() == (
        "WARNING: Ghost Containers: 1"
    )


def test_as_text_with_metrics() -> None:
    assert CheckResult(State.OK, "Total Containers: 3", ("containers=3",)).as_text() == (
        "OK: Total Containers: 3 | containers=3"
    )


def test_as_text_replaces_pipe() -> None:
    assert CheckResult(State.CRIT, "a|b").as_text() == "CRITICAL: a❘b"


def test_as_text_is_one_line() -> None:
    assert CheckResult(State.UNKNOWN, "Unable to parse:\n  line 1\n  line 2").as_text() == (
        "UNKNOWN: Unable to parse:   line 1   line 2"
    )
