"""Tests for timing output and duration formatting"""

import re

import pytest

from litetask import Options, create_tasks, format_duration
from litetask.timing import time_task

STAMP = r"^\[\d\d:\d\d:\d\d\] "


def _lines(text):
    return [line for line in text.splitlines() if line.strip()]


@pytest.mark.asyncio
async def test_timing_lines_in_order(capsys):
    runner = create_tasks(Options(run=False))
    runner.add("build", lambda options, subtasks: "ok")

    assert await runner.run("build") == "ok"

    lines = _lines(capsys.readouterr().err)
    assert len(lines) == 2
    assert re.match(STAMP + r"Starting 'build' \.\.\.$", lines[0])
    assert re.match(STAMP + r"Finished 'build' \(\d+ms\)$", lines[1])


@pytest.mark.asyncio
async def test_quiet_suppresses_timing(capsys):
    runner = create_tasks(Options(quiet=True, run=False))
    runner.add("build", lambda options, subtasks: {"artifact": "app.whl"})

    assert await runner.run("build") == {"artifact": "app.whl"}
    assert capsys.readouterr().err == ""


@pytest.mark.asyncio
async def test_quiet_failure_is_silent(capsys):
    def deploy(options, subtasks):
        raise RuntimeError("boom")

    runner = create_tasks(Options(quiet=True, run=False))
    runner.add("deploy", deploy)

    with pytest.raises(RuntimeError):
        await runner.run("deploy")

    assert capsys.readouterr().err == ""


@pytest.mark.asyncio
async def test_failure_logs_only_start(capsys):
    def deploy(options, subtasks):
        raise RuntimeError("boom")

    runner = create_tasks(Options(run=False))
    runner.add("deploy", deploy)

    with pytest.raises(RuntimeError):
        await runner.run("deploy")

    lines = _lines(capsys.readouterr().err)
    assert len(lines) == 1
    assert "Starting 'deploy'" in lines[0]


def test_time_task_quiet_is_identity(capsys):
    done = time_task("build", Options(quiet=True))
    value = object()

    assert done(value) is value
    assert capsys.readouterr().err == ""


def test_time_task_passes_value_through(capsys):
    done = time_task("build", Options())
    value = object()

    assert done(value) is value
    assert "Finished 'build'" in capsys.readouterr().err


@pytest.mark.parametrize(
    "milliseconds, expected",
    [
        (0, "0ms"),
        (12.4, "12ms"),
        (999, "999ms"),
        (1000, "1s"),
        (1500, "2s"),
        (59_000, "59s"),
        (60_000, "1m"),
        (90_000, "2m"),
        (3_600_000, "1h"),
        (86_400_000, "1d"),
        (172_800_000, "2d"),
        (-1500, "-1s"),
    ],
)
def test_format_duration(milliseconds, expected):
    assert format_duration(milliseconds) == expected
