"""Greeter settings parsed from the ``[greeter]`` configuration section."""

from __future__ import annotations

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from line_greeter.domain.behaviors import DEFAULT_ASK_PROMPT
from line_greeter.domain.enums import GreetingMode
from line_greeter.domain.errors import ConfigurationError


class GreeterConfig(BaseModel):
    """Pydantic model for [greeter] config section validation.

    Prompts are written without a trailing newline before each read. An
    empty prompt writes nothing, so stdout carries only the greeting.

    Example:
        >>> cfg = GreeterConfig()
        >>> cfg.pair_prompt
        ''
        >>> cfg.prompt_for(GreetingMode.ASK)
        'What is your name? '
    """

    pair_prompt: str = ""
    echo_prompt: str = ""
    ask_prompt: str = DEFAULT_ASK_PROMPT

    model_config = ConfigDict(extra="forbid", frozen=True)

    def prompt_for(self, mode: GreetingMode) -> str:
        """Return the prompt configured for ``mode``."""
        if mode is GreetingMode.PAIR:
            return self.pair_prompt
        if mode is GreetingMode.ECHO:
            return self.echo_prompt
        return self.ask_prompt


def load_greeter_config(config: Config) -> GreeterConfig:
    """Parse the ``[greeter]`` section into a :class:`GreeterConfig`.

    A missing or empty section yields the defaults.

    Raises:
        ConfigurationError: If the section has unknown keys or non-string prompts.

    Example:
        >>> load_greeter_config(Config({"greeter": {"pair_prompt": "> "}}, {})).pair_prompt
        '> '
    """
    greeter_raw: object = config.get("greeter", default={})
    try:
        return GreeterConfig.model_validate(greeter_raw if greeter_raw else {})
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        raise ConfigurationError(f"Invalid [greeter] configuration: {fields}") from exc


__all__ = [
    "GreeterConfig",
    "load_greeter_config",
]
