"""Greeting command stories: greet, echo, and ask over stdin and stdout."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from line_greeter.adapters.cli import ExitCode, cli
from line_greeter.domain.behaviors import READ_ERROR_MESSAGE
from line_greeter.domain.errors import InputReadError


def _invoke(runner: CliRunner, factory: Callable[[], Any], args: list[str], stdin: str | None = None) -> Result:
    return runner.invoke(cli, args, input=stdin, obj=factory)


# ---------------------------------------------------------------------------
# greet
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("stdin", "expected"),
    [
        ("a\nb\n", "Hello, a and b\n"),
        ("Alice\nBob\n", "Hello, Alice and Bob\n"),
        ("Alice\r\nBob\r\n", "Hello, Alice and Bob\n"),
        ("Alice\nBob", "Hello, Alice and Bob\n"),
        ("\n\n", "Hello,  and \n"),
    ],
)
def test_greet_prints_one_line_for_two_input_lines(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    stdin: str,
    expected: str,
) -> None:
    result = _invoke(cli_runner, production_factory, ["greet"], stdin)

    assert result.exit_code == 0
    assert result.stdout == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("stdin", ["", "Alice\n", "Alice"])
def test_greet_prints_nothing_when_input_ends_early(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    stdin: str,
) -> None:
    result = _invoke(cli_runner, production_factory, ["greet"], stdin)

    assert result.exit_code == 0
    assert result.stdout == ""


@pytest.mark.os_agnostic
def test_greet_ignores_lines_after_the_second(
    cli_runner: CliRunner,
    inject_streams: Callable[..., Any],
) -> None:
    streams = inject_streams(["Alice", "Bob", "Carol"])

    result = _invoke(cli_runner, streams.factory, ["greet"])

    assert result.exit_code == 0
    assert streams.sink.output == "Hello, Alice and Bob\n"
    assert streams.source.remaining == ("Carol",)
    assert streams.source.closed is True


@pytest.mark.os_agnostic
def test_greet_reports_read_failure_and_exits_zero(
    cli_runner: CliRunner,
    inject_streams: Callable[..., Any],
) -> None:
    streams = inject_streams(["Alice"], fail_with=InputReadError("stdin closed"))

    result = _invoke(cli_runner, streams.factory, ["greet"])

    assert result.exit_code == 0
    assert streams.sink.output == f"{READ_ERROR_MESSAGE}\n"


@pytest.mark.os_agnostic
def test_greet_is_repeatable(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    first = _invoke(cli_runner, production_factory, ["greet"], "x\ny\n")
    second = _invoke(cli_runner, production_factory, ["greet"], "x\ny\n")

    assert first.stdout == second.stdout == "Hello, x and y\n"


# ---------------------------------------------------------------------------
# echo
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_echo_repeats_the_line(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = _invoke(cli_runner, production_factory, ["echo"], "something\n")

    assert result.exit_code == 0
    assert result.stdout == "You entered: something\n"


@pytest.mark.os_agnostic
def test_echo_on_empty_input_echoes_nothing(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = _invoke(cli_runner, production_factory, ["echo"], "")

    assert result.exit_code == 0
    assert result.stdout == "You entered: \n"


@pytest.mark.os_agnostic
def test_echo_read_failure_prints_only_the_error_message(
    cli_runner: CliRunner,
    inject_streams: Callable[..., Any],
) -> None:
    streams = inject_streams([], fail_with=InputReadError("I/O operation on closed file"))

    result = _invoke(cli_runner, streams.factory, ["echo"])

    assert result.exit_code == 0
    assert streams.sink.output == "An error occurred while reading input.\n"
    assert streams.source.reads == 1


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_ask_prompts_and_greets(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = _invoke(cli_runner, production_factory, ["ask"], "Ada\n")

    assert result.exit_code == 0
    assert result.stdout == "What is your name? Hello, Ada!\n"


@pytest.mark.os_agnostic
def test_ask_without_answer_prints_only_the_prompt(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = _invoke(cli_runner, production_factory, ["ask"], "")

    assert result.exit_code == 0
    assert result.stdout == "What is your name? "


# ---------------------------------------------------------------------------
# configuration
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_configured_pair_prompt_precedes_each_read(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"greeter": {"pair_prompt": "> "}})

    result = _invoke(cli_runner, factory, ["greet"], "a\nb\n")

    assert result.exit_code == 0
    assert result.stdout == "> > Hello, a and b\n"


@pytest.mark.os_agnostic
def test_set_override_changes_the_echo_prompt(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = _invoke(cli_runner, production_factory, ["--set", "greeter.echo_prompt=Say: ", "echo"], "hi\n")

    assert result.exit_code == 0
    assert result.stdout == "Say: You entered: hi\n"


@pytest.mark.os_agnostic
def test_set_override_changes_the_ask_prompt(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = _invoke(cli_runner, production_factory, ["--set", "greeter.ask_prompt=Name? ", "ask"], "Ada\n")

    assert result.stdout == "Name? Hello, Ada!\n"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("command", ["greet", "echo", "ask"])
def test_invalid_greeter_section_exits_with_config_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    command: str,
) -> None:
    factory = config_cli_context({"greeter": {"pair_promt": "> "}})

    result = _invoke(cli_runner, factory, [command], "a\nb\n")

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert result.stdout == ""
    assert "Invalid [greeter] configuration" in result.stderr


@pytest.mark.os_agnostic
def test_malformed_set_override_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = _invoke(cli_runner, production_factory, ["--set", "no_equals_sign", "greet"], "a\nb\n")

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "must contain '='" in result.output
