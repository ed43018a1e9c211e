"""CLI context helpers and the entry wrapper's error translation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import rich_click as click
from lib_layered_config import Config

from line_greeter.adapters.cli.context import CLIContext, get_cli_context, store_cli_context
from line_greeter.adapters.cli.main import main
from line_greeter.composition import build_production, build_testing


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    ctx = click.Context(click.Command("greet"))
    ctx.obj = build_production

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_store_cli_context_replaces_the_services_factory() -> None:
    ctx = click.Context(click.Command("greet"))
    ctx.obj = build_testing
    config = Config({"greeter": {}}, {})
    services = build_testing()

    store_cli_context(
        ctx,
        traceback=True,
        config=config,
        services=services,
        profile="staging",
        set_overrides=("greeter.pair_prompt=> ",),
    )
    result = get_cli_context(ctx)

    assert isinstance(result, CLIContext)
    assert result.traceback is True
    assert result.config is config
    assert result.services is services
    assert result.profile == "staging"
    assert result.set_overrides == ("greeter.pair_prompt=> ",)


@pytest.mark.os_agnostic
def test_cli_context_defaults_to_no_profile_and_no_overrides() -> None:
    context = CLIContext(traceback=False, config=Config({}, {}), services=build_testing())

    assert context.profile is None
    assert context.set_overrides == ()


@pytest.mark.os_agnostic
def test_main_turns_usage_errors_into_exit_code_two(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = main(["--set", "invalid_no_dot=value", "greet"], services_factory=build_production)

    assert exit_code == 2
    assert "must contain at least one dot" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_returns_zero_for_help(managed_traceback_state: None) -> None:
    assert main(["--help"], services_factory=build_production) == 0


@pytest.mark.os_agnostic
def test_main_returns_the_code_of_a_system_exit(
    managed_traceback_state: None,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Commands that raise SystemExit keep their exit code and print no SystemExit line."""
    factory = config_cli_context({"greeter": {"ask_prompt": 7}})

    assert main(["ask"], services_factory=factory) == 78

    err = capsys.readouterr().err
    assert "Error: " in err
    assert "SystemExit" not in err


@pytest.mark.os_agnostic
def test_main_reports_config_section_errors_without_a_system_exit_line(
    managed_traceback_state: None,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    factory = config_cli_context({"greeter": {"pair_prompt": ""}})

    assert main(["config", "--section", "missing"], services_factory=factory) == 22

    err = capsys.readouterr().err
    assert "Error: " in err
    assert "SystemExit" not in err
