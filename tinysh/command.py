"""Command model: the parsed form of one input line."""

from typing import List, Optional

from .config import MAX_ARG_LEN

# Sentinel that follows the last argument in Command.vector()
TERMINATOR = None


class Command:
    """One shell invocation: a command name followed by its arguments.

    ``arguments[0]`` is the command name until the resolver rewrites it to
    the full executable path. Each argument holds at most
    ``max_arg_len - 1`` characters.

    A Command is used for a single line and then released::

        with parse("echo hi") as cmd:
            executor.execute(cmd)
    """

    def __init__(self, arguments: Optional[List[str]] = None, max_arg_len: int = MAX_ARG_LEN):
        self.max_arg_len = max_arg_len
        self.arguments: List[str] = [self._fit(arg) for arg in (arguments or [])]

    def _fit(self, value: str) -> str:
        return value[:self.max_arg_len - 1]

    @property
    def argument_count(self) -> int:
        return len(self.arguments)

    @property
    def name(self) -> str:
        """The first argument, or an empty string for a blank command."""
        return self.arguments[0] if self.arguments else ""

    @property
    def argv(self) -> List[str]:
        """Copy of the argument list as handed to the spawned program."""
        return list(self.arguments)

    def vector(self) -> list:
        """Argument list followed by the terminator sentinel."""
        return self.arguments + [TERMINATOR]

    def set_executable(self, path: str) -> None:
        """Replace ``arguments[0]`` with a resolved executable path.

        The path is stored whole; resolved paths are not subject to the
        argument capacity.
        """
        if not self.arguments:
            raise IndexError("cannot set executable on an empty command")
        self.arguments[0] = path

    def release(self) -> None:
        """Drop every argument. The command is empty afterwards."""
        self.arguments.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return self.arguments == other.arguments

    def __repr__(self):
        return f"Command({' '.join(self.arguments)})"
