"""tinysh - a minimal command shell."""

from .command import Command
from .config import ERROR, MAX_ARG_LEN, SUCCESS, ShellConfig
from .context import ShellContext
from .executor import Executor
from .parser import parse
from .path_resolver import PathResolver
from .shell import Shell

__version__ = "0.1.0"

__all__ = [
    "Command",
    "ERROR",
    "Executor",
    "MAX_ARG_LEN",
    "PathResolver",
    "SUCCESS",
    "Shell",
    "ShellConfig",
    "ShellContext",
    "parse",
]
