"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (CLI, configuration, standard streams, logging).

Contents:
    * :mod:`.config` - Configuration loading, display, and greeter settings
    * :mod:`.streams` - Standard input/output as line ports
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory port implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
