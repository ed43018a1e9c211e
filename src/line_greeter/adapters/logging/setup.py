"""lib_log_rich runtime initialisation shared by every entry point.

``python -m line_greeter``, the ``line-greeter`` console script, and the
test suite all reach logging through :func:`init_logging`, which builds a
``RuntimeConfig`` from the ``[lib_log_rich]`` section and starts the
runtime at most once per process.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from line_greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated view of the ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; every other
    key is kept as an extra and handed to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(console_level="WARNING").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'WARNING'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a ``RuntimeConfig``.

    The service name falls back to the distribution name when unset.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    On the first call ``.env`` files are loaded so ``LOG_*`` variables take
    effect, the runtime is initialised from ``config``, and standard
    ``logging`` records are routed into it. Later calls return immediately.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
