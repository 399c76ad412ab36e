"""Line parser: splits one line of input into a Command."""

import re
from typing import List, Optional

from .command import Command
from .config import MAX_ARG_LEN

# Only space, tab and newline separate tokens
SEPARATORS = re.compile(r"[ \t\n]+")


def tokenize(line: str) -> List[str]:
    """Split ``line`` on runs of spaces, tabs and newlines.

    Examples:
        >>> tokenize("  ls\\t-l  /tmp\\n")
        ['ls', '-l', '/tmp']
        >>> tokenize(" \\t\\n")
        []
    """
    return [token for token in SEPARATORS.split(line) if token]


def parse(line: Optional[str], max_arg_len: int = MAX_ARG_LEN) -> Optional[Command]:
    """Parse a line of input into a Command.

    Tokens longer than ``max_arg_len - 1`` characters are truncated.
    A blank line yields a Command with no arguments.

    Args:
        line: Raw input line; None means there is no input
        max_arg_len: Argument capacity

    Returns:
        The parsed Command, or None when ``line`` is None
    """
    if line is None:
        return None
    return Command(tokenize(line), max_arg_len=max_arg_len)
