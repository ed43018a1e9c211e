"""``line-greeter`` console script.

Lives at package level so it can import the composition root and hand
``build_production`` to the CLI adapter without the adapter importing
composition itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production stdin/stdout, configuration, and logging."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
