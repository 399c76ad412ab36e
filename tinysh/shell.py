"""Interactive and scripted read-eval loop."""

import logging
from typing import Iterable, Optional

from .config import SUCCESS
from .context import ShellContext
from .executor import Executor
from .parser import parse

logger = logging.getLogger(__name__)


class Shell:
    """Reads lines, runs each one to completion, and tracks the last status.

    Attributes:
        context: ShellContext shared by every command
        executor: Executor that runs parsed commands
        last_status: Status of the most recent non-blank line
    """

    def __init__(self, context: Optional[ShellContext] = None):
        self.context = context or ShellContext()
        self.executor = Executor(self.context)
        self.last_status = SUCCESS

    def run_line(self, line: str) -> int:
        """Parse and execute one line.

        Blank lines are not executed and do not change ``last_status``.

        Returns:
            Status of the command (SUCCESS for a blank line)
        """
        cmd = parse(line, max_arg_len=self.context.config.max_arg_len)
        if cmd is None or cmd.argument_count == 0:
            return SUCCESS

        with cmd:
            status = self.executor.execute(cmd)

        logger.debug("line %r finished with status %d", line, status)
        self.last_status = status
        return status

    def run(self, lines: Iterable[str], interactive: bool = False) -> int:
        """Run every line from ``lines`` until it is exhausted.

        Args:
            lines: Line source (file object, list of strings)
            interactive: Write the prompt before each line

        Returns:
            Status of the last command run
        """
        iterator = iter(lines)
        while True:
            if interactive:
                self.context.write_out(self.context.config.prompt)
            try:
                line = next(iterator)
            except StopIteration:
                if interactive:
                    self.context.write_out("\n")
                break
            self.run_line(line)
        return self.last_status
