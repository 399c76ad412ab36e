"""PATH lookup for external commands.

This module provides the PathResolver class which handles:
- Splitting PATH into directories
- Finding the first directory that holds the command as a regular file
- Rewriting a Command's name to the resolved path
"""

import logging
import os
import stat
from typing import Iterator, Optional

from .command import Command
from .context import ShellContext
from .exceptions import EnvironmentLookupError

logger = logging.getLogger(__name__)


def is_regular_file(path: str) -> bool:
    """Check that ``path`` exists and is a regular file (symlinks followed)."""
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except (OSError, ValueError):
        # Unreadable entries and paths with NUL bytes count as misses
        return False


class PathResolver:
    """Resolves bare command names against the PATH variable.

    Directories are searched in PATH order and the first match wins.
    Empty PATH entries and directories that cannot be read are skipped.

    Attributes:
        context: ShellContext supplying PATH and the error stream
    """

    def __init__(self, context: ShellContext):
        self.context = context

    def search_dirs(self) -> Iterator[str]:
        """Yield the non-empty PATH entries in order.

        Raises:
            EnvironmentLookupError: If PATH is not set
        """
        path_env = self.context.getenv("PATH")
        if path_env is None:
            raise EnvironmentLookupError("PATH")
        for directory in path_env.split(":"):
            if directory:
                yield directory

    def find_executable(self, name: str) -> Optional[str]:
        """Find the full path for a command name without modifying anything.

        Names containing ``/`` are taken as paths and are not searched.

        Args:
            name: Command name

        Returns:
            Resolved path, or None if nothing matched

        Raises:
            EnvironmentLookupError: If PATH is needed but not set
        """
        if not name:
            return None
        if "/" in name:
            return name if is_regular_file(name) else None

        for directory in self.search_dirs():
            candidate = f"{directory}/{name}"
            if is_regular_file(candidate):
                logger.debug("resolved %s -> %s", name, candidate)
                return candidate

        logger.debug("%s not found on PATH", name)
        return None

    def resolve(self, cmd: Optional[Command]) -> bool:
        """Rewrite ``cmd.arguments[0]`` to its full path.

        Args:
            cmd: Command to resolve

        Returns:
            True if the command was found and rewritten, False otherwise
            (the command is left unchanged)
        """
        if cmd is None or cmd.argument_count == 0 or not cmd.name:
            return False

        try:
            full_path = self.find_executable(cmd.name)
        except EnvironmentLookupError as e:
            self.context.write_err(f"tinysh: {e}\n")
            return False

        if full_path is None:
            return False
        cmd.set_executable(full_path)
        return True
