"""Terminal output for the push command.

Progress goes to stdout. Warnings and errors go to stderr so a failed push
can be told apart from its report when the output is piped.
"""

import sys
from typing import TextIO

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
RESET = "\033[0m"

# Line markers: (symbol, color)
SUCCESS = ("\u2713", GREEN)  # ✓
INFO = ("\u2022", BLUE)  # •
WARNING = ("!", YELLOW)
ERROR = ("\u2717", RED)  # ✗


def _paint(text: str, color: str, stream: TextIO) -> str:
    if hasattr(stream, "isatty") and stream.isatty():
        return f"{color}{text}{RESET}"
    return text


def _emit(marker: tuple[str, str], message: str, stream: TextIO) -> None:
    symbol, color = marker
    print(f"{_paint(symbol, color, stream)} {message}", file=stream)


def success(message: str) -> None:
    """Report a completed step."""
    _emit(SUCCESS, message, sys.stdout)


def info(message: str) -> None:
    _emit(INFO, message, sys.stdout)


def header(message: str) -> None:
    """Print a colored line announcing what is about to happen."""
    print(_paint(message, BLUE, sys.stdout))


def warning(message: str) -> None:
    """Report a problem that did not stop the push."""
    _emit(WARNING, message, sys.stderr)


def error(message: str) -> None:
    """Report why the push failed."""
    _emit(ERROR, message, sys.stderr)
