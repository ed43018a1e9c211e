"""``--set SECTION.KEY=VALUE`` parsing and merging into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Any value an override string can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` value addressed by section and nested key path."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The path ends at the first ``=``; everything after it is the value,
    coerced with :func:`coerce_value`.

    Raises:
        ValueError: No ``=``, no dot in the path, or an empty path component.

    Examples:
        >>> parse_override("greeter.pair_prompt=> ")
        ConfigOverride(section='greeter', key_path=('pair_prompt',), value='> ')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").key_path
        ('payload_limits', 'message_max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON when it parses, otherwise keep the string.

    Examples:
        >>> coerce_value("42"), coerce_value("true"), coerce_value("null")
        (42, True, None)
        >>> coerce_value('["a","b"]')
        ['a', 'b']
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place ``override.value`` at its nested position inside ``tree``.

    Raises:
        TypeError: An intermediate key already holds a non-dict value.
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged on top.

    Raises:
        ValueError: Any override string is malformed.

    Examples:
        >>> cfg = Config({"greeter": {"echo_prompt": ""}}, {})
        >>> apply_overrides(cfg, ("greeter.echo_prompt=? ",))["greeter"]["echo_prompt"]
        '? '
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "parse_override",
    "coerce_value",
    "apply_overrides",
]
