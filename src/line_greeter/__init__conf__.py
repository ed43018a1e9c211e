"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``pyproject.toml`` so the installed package can report
its own identity without importing packaging machinery at runtime.

Contents:
    * Metadata constants (name, title, version, homepage, author).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config to derive
      platform configuration paths.
    * :func:`print_info` - render the metadata block for ``info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name as published.
name: Final[str] = "line_greeter"
#: One-line summary used as CLI help text.
title: Final[str] = "Collect lines from standard input and print a templated greeting"
#: Current release version.
version: Final[str] = "1.0.0"
#: Project homepage.
homepage: Final[str] = "https://github.com/line-greeter/line_greeter"
#: Author name.
author: Final[str] = "line_greeter developers"
#: Author email.
author_email: Final[str] = "dev@line-greeter.invalid"
#: Console script name.
shell_command: Final[str] = "line-greeter"

#: Vendor, application, and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR: Final[str] = "line_greeter"
LAYEREDCONF_APP: Final[str] = "line_greeter"
LAYEREDCONF_SLUG: Final[str] = "line-greeter"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for line_greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
