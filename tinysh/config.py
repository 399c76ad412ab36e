"""Configuration and constants for tinysh.

Settings come from defaults, then from ``TINYSH_*`` environment variables,
then from command-line options (see :mod:`tinysh.cli`).
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError

SUCCESS = 0
ERROR = 1

# Status a forked child exits with when it cannot replace its image
EXIT_FAILURE = 1

MAX_ARG_LEN = 256
DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class ShellConfig:
    """Runtime settings for a shell instance.

    Attributes:
        max_arg_len: Capacity of one argument; tokens keep at most
            ``max_arg_len - 1`` characters
        prompt: Prompt written before each interactive read
        log_level: Name of the logging level for the CLI handler
    """

    max_arg_len: int = MAX_ARG_LEN
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.max_arg_len < 2:
            raise ConfigError(f"max_arg_len must be at least 2, got {self.max_arg_len}")

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "ShellConfig":
        """Build a config from ``TINYSH_*`` environment variables.

        Args:
            env: Environment mapping to read from

        Returns:
            ShellConfig with defaults for unset variables

        Raises:
            ConfigError: If TINYSH_MAX_ARG_LEN is not a valid integer
        """
        max_arg_len = _parse_int(env.get("TINYSH_MAX_ARG_LEN"), "TINYSH_MAX_ARG_LEN")
        return cls(
            max_arg_len=max_arg_len if max_arg_len is not None else MAX_ARG_LEN,
            prompt=env.get("TINYSH_PROMPT", DEFAULT_PROMPT),
            log_level=env.get("TINYSH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def _parse_int(value: Optional[str], name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name}: invalid integer '{value}'") from None
