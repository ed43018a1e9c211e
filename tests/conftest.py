"""Shared pytest fixtures for greeting, CLI, and module-entry tests.

All shared fixtures live here; tests receive them through pytest's
conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from line_greeter.adapters.memory import RecordingLineSink, ScriptedLineSource

if TYPE_CHECKING:
    from line_greeter.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(**replacements: Any) -> Callable[[], AppServices]:
    """Return a factory for production services with some ports replaced."""
    from dataclasses import replace

    from line_greeter.composition import build_production

    services = replace(build_production(), **replacements)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` holds only what commands print; log records go to
    ``result.stderr``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from line_greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from line_greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only ``get_config`` is replaced; everything else stays production.

    Example:
        def test_prompt(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeter": {"pair_prompt": "> "}})
            result = cli_runner.invoke(cli, ["greet"], input="a\\nb\\n", obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return _services_with(get_config=_fake_get_config)

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was asked for."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        return _services_with(get_config=_capturing_get_config)

    return _inject


@dataclass
class StreamCliContext:
    """Services factory plus the in-memory streams it hands to commands."""

    factory: Callable[[], Any]
    source: ScriptedLineSource
    sink: RecordingLineSink


@pytest.fixture
def inject_streams() -> Callable[..., StreamCliContext]:
    """Return a function wiring scripted input and recorded output into the CLI.

    Configuration and logging stay production; only the line source and
    sink are in memory, so read failures can be forced.

    Example:
        def test_echo_failure(cli_runner, inject_streams) -> None:
            ctx = inject_streams([], fail_with=InputReadError("closed"))
            cli_runner.invoke(cli, ["echo"], obj=ctx.factory)
            assert ctx.sink.output == "An error occurred while reading input.\\n"
    """

    def _create(lines: list[str], **source_kwargs: Any) -> StreamCliContext:
        source = ScriptedLineSource(lines, **source_kwargs)
        sink = RecordingLineSink()
        factory = _services_with(open_line_source=lambda: source, open_line_sink=lambda: sink)
        return StreamCliContext(factory=factory, source=source, sink=sink)

    return _create
