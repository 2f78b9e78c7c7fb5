"""Tests for command line parsing"""

import sys

import pytest

from litetask import Options, create_tasks, get_cli_options, parse_cli, set_cli_options


def test_defaults():
    options = parse_cli([])

    assert options.quiet is False
    assert options.run is True
    assert options.args == []


def test_positionals_and_flags():
    options = parse_cli(["build", "-q", "--env", "prod", "test"])

    assert options.args == ["build", "test"]
    assert options.quiet is True
    assert options.env == "prod"


def test_quiet_long_flag():
    assert parse_cli(["--quiet"]).quiet is True
    assert parse_cli(["--quiet=false"]).quiet is False


def test_boolean_flags_do_not_take_values():
    options = parse_cli(["--run", "build", "-q", "test"])

    assert options.run is True
    assert options.quiet is True
    assert options.args == ["build", "test"]


def test_no_prefix():
    options = parse_cli(["--no-run", "--no-minify"])

    assert options.run is False
    assert options.minify is False


def test_equals_and_numbers():
    options = parse_cli(["--jobs=4", "--ratio", "0.5", "--tag=v1"])

    assert options.jobs == 4
    assert options.ratio == 0.5
    assert options.tag == "v1"


def test_short_flag_groups():
    options = parse_cli(["-abc", "-n", "3"])

    assert options.a is True
    assert options.b is True
    assert options.c is True
    assert options.n == 3


def test_dashes_in_flag_names():
    options = parse_cli(["--dry-run"])

    assert options.dry_run is True


def test_double_dash_ends_flags():
    options = parse_cli(["build", "--", "--quiet", "x"])

    assert options.quiet is False
    assert options.args == ["build", "--quiet", "x"]


def test_extra_flags_pass_through():
    options = parse_cli(["--env", "prod"])

    assert options.model_extra == {"env": "prod"}


def test_cli_options_parsed_once_from_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["build.py", "test", "-q"])
    set_cli_options(None)

    options = get_cli_options()

    assert options.args == ["test"]
    assert options.quiet is True
    assert get_cli_options() is options


def test_set_cli_options():
    options = Options(args=["deploy"])
    set_cli_options(options)

    assert get_cli_options() is options


def test_boolean_flags_take_true_or_false():
    options = parse_cli(["--quiet", "false", "build"])

    assert options.quiet is False
    assert options.args == ["build"]

    options = parse_cli(["-q", "true", "build", "--run", "false"])

    assert options.quiet is True
    assert options.run is False
    assert options.args == ["build"]


@pytest.mark.asyncio
async def test_boolean_value_is_not_a_task_name():
    calls = []
    runner = create_tasks(parse_cli(["--quiet", "false", "build"]))
    runner.add("build", lambda options, subtasks: calls.append("build"))

    await runner.run()

    assert calls == ["build"]


def test_short_flag_with_attached_value():
    options = parse_cli(["-n3", "-abj2", "-x=dev"])

    assert options.n == 3
    assert options.a is True
    assert options.b is True
    assert options.j == 2
    assert options.x == "dev"
    assert "3" not in options.model_extra


def test_flag_shadowed_by_model_attribute():
    options = parse_cli(["--json"])

    assert callable(options.json)
    assert options.model_extra["json"] is True
