"""
ShellContext - the environment and streams a command runs against.

Resolver, builtins and executor read variables through the context instead
of touching ``os.environ`` directly, so tests can inject a plain dict.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional, TextIO

from .config import ShellConfig


@dataclass
class ShellContext:
    """
    Encapsulates what the pipeline needs from the outside world.

    Attributes:
        env: Variable lookup (defaults to the live process environment)
        config: Shell settings
        stdout: Output stream, or None for the current ``sys.stdout``
        stderr: Error stream, or None for the current ``sys.stderr``

    Example:
        >>> ctx = ShellContext(env={'PATH': '/bin', 'HOME': '/root'})
        >>> ctx.getenv('HOME')
        '/root'
        >>> ctx.getenv('MISSING') is None
        True
    """

    env: Mapping[str, str] = field(default_factory=lambda: os.environ)
    config: ShellConfig = field(default_factory=ShellConfig)
    stdout: Optional[TextIO] = None
    stderr: Optional[TextIO] = None

    def getenv(self, name: str) -> Optional[str]:
        return self.env.get(name)

    @property
    def out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    def write_out(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def write_err(self, text: str) -> None:
        self.err.write(text)
        self.err.flush()

    def flush(self) -> None:
        """Flush both streams, e.g. before forking."""
        self.out.flush()
        self.err.flush()
