from datetime import datetime
from typing import Iterable

from rich.columns import Columns
from rich.console import Console
from rich.markup import escape

# Streams are looked up at print time, so redirected/captured output works.
err_console = Console(stderr=True, highlight=False)
out_console = Console(highlight=False)

SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24


def format_duration(milliseconds: float) -> str:
    """
    Short human readable duration

    Example:
        format_duration(250)     # "250ms"
        format_duration(1500)    # "2s"
        format_duration(90000)   # "2m"
    """
    size = abs(milliseconds)
    for unit, label in ((DAY, "d"), (HOUR, "h"), (MINUTE, "m"), (SECOND, "s")):
        if size >= unit:
            return f"{_round(milliseconds / unit)}{label}"
    return f"{_round(milliseconds)}ms"


def _round(value: float) -> int:
    # Halves go up, -1.5 -> -1
    return int(value // 1 + (1 if value % 1 >= 0.5 else 0))


def log_time(when: datetime, message: str):
    """Write a "[HH:MM:SS] message" line to stderr (message may hold rich markup)"""
    stamp = when.strftime("%H:%M:%S")
    err_console.print(f"\\[[grey50]{stamp}[/grey50]] {message}", soft_wrap=True)


def highlight_name(name: str) -> str:
    return f"[cyan]{escape(name)}[/cyan]"


def highlight_duration(duration: str) -> str:
    return f"[magenta]{duration}[/magenta]"


def print_columns(names: Iterable[str]):
    """Print task names to stdout, sorted, laid out in columns"""
    out_console.print(Columns([escape(name) for name in sorted(names)], padding=(0, 2)))
