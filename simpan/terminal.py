"""Terminal colours, the application banner and screen clearing."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BOLD = "\033[1m"

CLEAR_SEQUENCE = "\033[2J\033[H\033[1;1H"
TITLE = "SIMpan BArang ONLINE"

_BANNER_LINES = [
    "  ",
    r"  _________.___   _   _ __________    _____   ",
    r" /   _____/|   | / \ / \\______   \. /  _  \.  ",
    r" \_____  \.|   |/   Y   \|    |  _/ /  /_\  \. ",
    r" /        \|   /    |    \    |   \/    |    \.",
    r"/_______  /|___\___/ \__ /______  /\____|__  /",
    r"        \/.             \/.     \/.        \/.          ",
    "          ",
]


def header_text() -> str:
    """Return the coloured banner shown at the top of every screen."""
    banner = "\n".join(_BANNER_LINES)
    return f"{CYAN}{BOLD}{banner}{GREEN}{BOLD}{TITLE}\n{RESET}"


def show_header(stream: TextIO | None = None) -> None:
    """Write the banner to ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(header_text())
    out.flush()


def _clear_native_console() -> None:
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal and redraw the banner."""
    out = stream if stream is not None else sys.stdout
    isatty = getattr(out, "isatty", None)
    if out is sys.stdout and callable(isatty) and isatty():
        _clear_native_console()
    out.write(CLEAR_SEQUENCE)
    show_header(out)