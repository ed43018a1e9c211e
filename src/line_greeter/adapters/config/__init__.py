"""Configuration adapter - loading, display, overrides, and greeter settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.greeter` - ``[greeter]`` section model
"""

from __future__ import annotations

from .display import display_config
from .greeter import GreeterConfig, load_greeter_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "GreeterConfig",
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "load_greeter_config",
]
