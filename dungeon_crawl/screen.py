"""Terminal helpers: colours, screen clearing, countdowns and centred text."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from typing import Callable, Iterator

COLOR_RESET = "\033[0m"

# Rarity colours
COLOR_BLUE = "\033[34m"
COLOR_PURPLE = "\033[35m"
COLOR_YELLOW = "\033[33m"

# Monster colours
COLOR_GOBLIN = "\033[32m"
COLOR_SKELETON = "\033[96m"
COLOR_ORK = "\033[31m"
COLOR_WRAITH = "\033[36m"
COLOR_DEMON = "\033[35m"
COLOR_SUCCUBUS = "\033[95m"

# UI colours
COLOR_TITLE = "\033[95m"
COLOR_SUBTITLE = "\033[94m"
COLOR_DIVIDER = "\033[90m"
COLOR_IMPORTANT = "\033[93m"
COLOR_SUCCESS = "\033[92m"
COLOR_WARNING = "\033[91m"
COLOR_INFO = "\033[92m"

DEFAULT_WIDTH = 80

SPLASH_ART = r"""

 ____  _     _      _____ _____ ____  _      ____    ____  _  ____  _____
/  _ \/ \ /\/ \  /|/  __//  __//  _ \/ \  /|/ ___\  /  _ \/ \/   _\/  __/
| | \|| | ||| |\ ||| |  _|  \  | / \|| |\ |||    \  | | \|| ||  /  |  \  
| |_/|| \_/|| | \||| |_//|  /_ | \_/|| | \||\___ |  | |_/|| ||  \_ |  /_ 
\____/\____/\_/  \|\____\\____\\____/\_/  \|\____/  \____/\_/\____/\____\
                                                                        
 
"""

SPLASH_PROMPT = (
    "Press ENTER to start your adeventure and explore the depths of this eerie dungeon..."
)


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command; failures are ignored."""
    if sys.platform.startswith("win"):
        command = ["cmd", "/c", "cls"]
    else:
        command = ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def countdown(seconds: int, sleep: Callable[[float], object] = time.sleep) -> None:
    """Show a one-line countdown, waiting one second per step."""
    for remaining in range(seconds, 0, -1):
        print(f"\rNext action in: {remaining} seconds", end="", flush=True)
        sleep(1)
    print("\n\r\r", end="", flush=True)


def _centered_lines(text: str, width: int) -> Iterator[str]:
    for line in text.split("\n"):
        padding = (width - len(line)) // 2
        yield " " * padding + line


def center_text(text: str, width: int) -> None:
    """Print every line of ``text`` centred within ``width`` columns."""
    for line in _centered_lines(text, width):
        print(line)


def _terminal_width() -> int:
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return DEFAULT_WIDTH


def center_text_smart(text: str) -> None:
    """Print ``text`` centred to the terminal width, or 80 columns if unknown."""
    center_text(text, _terminal_width())


def show_splash_screen(ask: Callable[[str], str] = input) -> None:
    """Show the title art and wait for the player to press Enter."""
    clear_screen()
    center_text_smart(SPLASH_ART)
    print()
    print(SPLASH_PROMPT)
    ask("")