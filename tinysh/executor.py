"""Executor: runs a parsed Command as a builtin or a child process."""

import logging
import os
from typing import Optional

from .builtins import is_builtin, run_builtin
from .command import Command
from .config import ERROR, EXIT_FAILURE, SUCCESS
from .context import ShellContext
from .exceptions import CommandNotFoundError, SpawnError
from .path_resolver import PathResolver

logger = logging.getLogger(__name__)


class Executor:
    """Runs commands for one shell.

    Builtins run in-process. Anything else is resolved on PATH, forked and
    exec'd, and the shell blocks until that child terminates.

    Attributes:
        context: ShellContext for environment and streams
        resolver: PathResolver used for external commands
    """

    def __init__(self, context: ShellContext, resolver: Optional[PathResolver] = None):
        self.context = context
        self.resolver = resolver or PathResolver(context)

    def execute(self, cmd: Optional[Command]) -> int:
        """
        Execute a command.

        Args:
            cmd: Parsed command

        Returns:
            SUCCESS if the builtin succeeded or the child exited with 0,
            ERROR otherwise
        """
        if cmd is None or not cmd.name:
            return ERROR

        if is_builtin(cmd):
            return run_builtin(cmd, self.context)

        name = cmd.name
        if not self.resolver.resolve(cmd):
            self.context.write_out(f"{CommandNotFoundError(name)}\n")
            return ERROR

        try:
            return self.spawn(cmd)
        except SpawnError as e:
            self.context.write_err(f"tinysh: {e}\n")
            return ERROR

    def spawn(self, cmd: Command) -> int:
        """
        Fork, exec the resolved command in the child and wait for it.

        Raises:
            SpawnError: If fork or waitpid fails
        """
        # Unflushed buffers would otherwise be written twice
        self.context.flush()

        try:
            pid = os.fork()
        except OSError as e:
            raise SpawnError("fork", e) from e

        if pid == 0:
            self._exec_child(cmd)

        logger.debug("spawned pid %d for %r", pid, cmd)
        return self.wait(pid)

    def _exec_child(self, cmd: Command) -> None:
        """Replace the child image; never returns to shell code."""
        try:
            os.execv(cmd.name, cmd.argv)
        except OSError as e:
            os.write(2, f"tinysh: execv failed: {cmd.name}: {e.strerror or e}\n".encode())
        except ValueError as e:
            os.write(2, f"tinysh: execv failed: {cmd.name}: {e}\n".encode())
        finally:
            os._exit(EXIT_FAILURE)

    def wait(self, pid: int) -> int:
        """
        Block until child ``pid`` terminates and translate its status.

        Raises:
            SpawnError: If waitpid fails
        """
        try:
            _, status = os.waitpid(pid, 0)
        except OSError as e:
            raise SpawnError("waitpid", e) from e

        if os.WIFEXITED(status):
            code = os.WEXITSTATUS(status)
            logger.debug("pid %d exited with %d", pid, code)
            return SUCCESS if code == 0 else ERROR

        logger.debug("pid %d terminated abnormally (status %#x)", pid, status)
        return ERROR
