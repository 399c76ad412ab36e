"""
Exception hierarchy for tinysh.

Every failure the shell reports maps to one of these classes:
- ConfigError: bad configuration value
- EnvironmentLookupError: a required variable (PATH, HOME) is missing
- CommandNotFoundError: no PATH directory holds the command
- SpawnError: creating or waiting on a child process failed
- BuiltinUsageError: a builtin was called with bad arguments

Usage:
    from tinysh.exceptions import BuiltinUsageError

    try:
        run_cd(cmd, context)
    except BuiltinUsageError as e:
        context.write_err(f"{e}\\n")
        return e.exit_code
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit status (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class ConfigError(ShellError):
    """
    Raised when a configuration value is invalid.

    Example:
        raise ConfigError("TINYSH_MAX_ARG_LEN: invalid integer 'abc'")
    """

    def __init__(self, message: str):
        super().__init__(message, exit_code=2)


class EnvironmentLookupError(ShellError):
    """
    Raised when a required environment variable is not set.

    Example:
        raise EnvironmentLookupError("PATH")
    """

    def __init__(self, name: str, message: Optional[str] = None):
        if message is None:
            message = f"{name} environment variable is not set"
        super().__init__(message, exit_code=1)
        self.name = name


class CommandNotFoundError(ShellError):
    """
    Raised when a command cannot be resolved on PATH.

    Example:
        raise CommandNotFoundError("frobnicate")
    """

    def __init__(self, command: str):
        super().__init__(f"Command {command} not found!", exit_code=1)
        self.command = command


class SpawnError(ShellError):
    """
    Raised when creating or waiting on a child process fails.

    Example:
        raise SpawnError("fork", err)
    """

    def __init__(self, operation: str, cause: OSError):
        super().__init__(f"{operation} failed: {cause.strerror or cause}", exit_code=1)
        self.operation = operation
        self.cause = cause


class BuiltinUsageError(ShellError):
    """
    Raised when a builtin is invoked with invalid arguments.

    Example:
        raise BuiltinUsageError("cd", "Too many arguments")
    """

    def __init__(self, command: str, details: str):
        super().__init__(f"{command}: {details}", exit_code=1)
        self.command = command
        self.details = details
