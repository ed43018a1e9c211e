"""Layered configuration loading for the greeter, cached per profile."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from line_greeter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names that are unsafe to use as a path component.

    Raises:
        ValueError: Empty, overlong, reserved, or path-traversing names.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` that seeds every lookup.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One greeting run per process; caching keeps repeated lookups from rereading files.
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration: defaults → app → host → user → dotenv → env.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path. Validated before any file is touched.
        start_dir: Directory where ``.env`` discovery begins. Defaults to the
            working directory.

    Returns:
        Immutable configuration with provenance for each key.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("greeter.ask_prompt")
        'What is your name? '
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached configurations so the next call rereads every layer."""
    _read_layers.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "validate_profile",
    "get_config",
    "get_default_config_path",
]
