"""
Builtin commands: run inside the shell process, never spawned.

Builtins register themselves by name; ``run_builtin`` looks the name up,
runs it and turns errors into an ERROR status plus a diagnostic.
"""

import logging
import os
import sys
from typing import Callable, Dict, Optional

from .command import Command
from .config import ERROR, SUCCESS
from .context import ShellContext
from .exceptions import BuiltinUsageError, EnvironmentLookupError, ShellError

logger = logging.getLogger(__name__)

BuiltinFunc = Callable[[Command, ShellContext], int]

BUILTINS: Dict[str, BuiltinFunc] = {}


def register_builtin(name: str):
    """
    Decorator that adds a function to the builtin registry.

    Example:
        @register_builtin('cd')
        def builtin_cd(cmd, context):
            ...
    """
    def decorator(func: BuiltinFunc) -> BuiltinFunc:
        BUILTINS[name] = func
        return func
    return decorator


def get_builtin(name: str) -> Optional[BuiltinFunc]:
    return BUILTINS.get(name)


def is_builtin(cmd: Command) -> bool:
    """Check whether the command name is a builtin (case-sensitive)."""
    return cmd.name in BUILTINS


def run_builtin(cmd: Command, context: ShellContext) -> int:
    """
    Run a builtin command.

    Args:
        cmd: Command whose name is a registered builtin
        context: Shell context

    Returns:
        SUCCESS or ERROR. ``exit`` does not return.
    """
    func = get_builtin(cmd.name)
    if func is None:
        context.write_err(f"tinysh: {cmd.name}: not a builtin\n")
        return ERROR

    try:
        return func(cmd, context)
    except ShellError as e:
        context.write_err(f"{e}\n")
        return e.exit_code
    except OSError as e:
        context.write_err(f"{cmd.name}: {e.strerror or e}\n")
        return ERROR


@register_builtin('exit')
def builtin_exit(cmd: Command, context: ShellContext) -> int:
    """
    Terminate the shell with a success status.

    Usage: exit
    """
    logger.debug("exit builtin, terminating")
    context.flush()
    sys.exit(SUCCESS)


@register_builtin('cd')
def builtin_cd(cmd: Command, context: ShellContext) -> int:
    """
    Change the working directory of the shell process.

    Usage: cd [DIR]

    With no DIR, changes to $HOME.
    """
    if cmd.argument_count == 1:
        target = context.getenv("HOME")
        if target is None:
            raise BuiltinUsageError("cd", str(EnvironmentLookupError("HOME")))
    elif cmd.argument_count == 2:
        target = cmd.arguments[1]
    else:
        raise BuiltinUsageError("cd", "Too many arguments")

    try:
        os.chdir(target)
    except OSError as e:
        raise BuiltinUsageError("cd", f"{target}: {e.strerror}") from e
    except ValueError as e:
        # Paths with NUL bytes never reach the OS
        raise BuiltinUsageError("cd", f"{target}: {e}") from e

    logger.debug("cwd is now %s", target)
    return SUCCESS
