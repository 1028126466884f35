"""Output helpers for the qmd-history uninstaller."""

import os
import sys
from typing import List, Sequence


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    _enabled = True

    @classmethod
    def disable(cls):
        cls.RESET = cls.RED = cls.GREEN = ""
        cls.YELLOW = cls.CYAN = cls.BOLD = ""
        cls._enabled = False

    @classmethod
    def is_enabled(cls):
        return cls._enabled


def supports_color() -> bool:
    """Check if terminal supports color output."""
    if os.environ.get('NO_COLOR'):
        return False
    if not hasattr(sys.stdout, 'isatty'):
        return False
    return sys.stdout.isatty()


def color(text: str, color_code: str) -> str:
    """Wrap text in color code."""
    if not Colors._enabled:
        return text
    return f"{color_code}{text}{Colors.RESET}"


def success(msg: str) -> str:
    return color(msg, Colors.GREEN)


def warning(msg: str) -> str:
    return color(msg, Colors.YELLOW)


def error(msg: str) -> str:
    return color(msg, Colors.RED)


def info(msg: str) -> str:
    return color(msg, Colors.CYAN)


def heading(msg: str) -> str:
    return color(msg, Colors.CYAN + Colors.BOLD)


# Status lines, one per finished operation
def ok(msg: str) -> None:
    print(f"{success('✓')} {msg}")


def warn(msg: str) -> None:
    print(warning(f"⚠ {msg}"))


def fail(msg: str) -> None:
    print(f"{error('✗')} {msg}")


def print_box(text: str, width: int = 60) -> None:
    """Print text centered in a double-line frame."""
    padding = max((width - len(text)) // 2, 0)
    trailing = max(width - padding - len(text), 0)
    print()
    print(info("╔" + "═" * width + "╗"))
    print(info("║") + " " * padding + color(text, Colors.BOLD) + " " * trailing + info("║"))
    print(info("╚" + "═" * width + "╝"))
    print()


def print_step(title: str) -> None:
    print()
    print(heading(title))
    print()


def print_list(title: str, items: Sequence[tuple]) -> None:
    """Print a heading followed by (symbol, text) bullet lines."""
    print(heading(title))
    for symbol, text in items:
        print(f"  {symbol} {text}")
    print()


def clear_screen() -> None:
    """Clear the terminal (only when attached to one)."""
    if hasattr(sys.stdout, 'isatty') and sys.stdout.isatty():
        sys.stdout.write("\033c")
        sys.stdout.flush()


def confirm(message: str) -> bool:
    """Ask user for confirmation. EOF or Ctrl-C count as no."""
    try:
        response = input(f"{message} [y/N]: ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return response in ('y', 'yes')


def parse_selection(response: str, count: int) -> List[int]:
    """Parse '1,3' / '1 3' / 'a' into sorted zero-based indices.

    Raises ValueError on anything out of range or non-numeric.
    """
    response = response.strip().lower()
    if not response:
        return []
    if response in ('a', 'all'):
        return list(range(count))

    picked = set()
    for token in response.replace(',', ' ').split():
        number = int(token)
        if not 1 <= number <= count:
            raise ValueError(f"{number} is not between 1 and {count}")
        picked.add(number - 1)
    return sorted(picked)


def select_many(message: str, choices: Sequence[str]) -> List[int]:
    """Numbered multi-select. Returns chosen indices, empty if none."""
    print(f"{info('?')} {message}")
    for i, choice in enumerate(choices, start=1):
        print(f"  [{i}] {choice}")

    while True:
        try:
            response = input("Numbers separated by commas, 'a' for all, Enter for none: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return []
        try:
            return parse_selection(response, len(choices))
        except ValueError as e:
            warn(f"Invalid selection: {e}")
