"""Terminal helpers shared by the command line and the API launcher."""

import sys
from enum import Enum
from typing import (
    Any,
    Dict,
    TextIO,
)


class AnsiColors(Enum):
    """
    ANSI color codes for terminal output.
    """

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[33m"
    BLUE = "\033[94m"


OUTCOME_COLORS: Dict[str, AnsiColors] = {
    "final_answer": AnsiColors.GREEN,
    "action_request": AnsiColors.YELLOW,
    "malformed": AnsiColors.RED,
}
"""Headline color for each turn outcome kind."""


def colored_print(
    text: str, color: AnsiColors, *args: Any, file: TextIO | None = None, **kwargs: Any
) -> None:
    """
    Print text in color, or plain when *file* is not a terminal.

    Args:
        text: The text to print
        color: The color to use (AnsiColors enum)
        args: Additional positional arguments for print
        file: Target stream (default: sys.stdout)
        kwargs: Additional keyword arguments for print
    """
    stream = file if file is not None else sys.stdout
    if stream.isatty():
        text = f"{color.value}{text}\033[0m"  # ANSI reset at the end
    print(text, *args, file=stream, **kwargs)
