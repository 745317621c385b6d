"""Append diagnostic lines to a log file in the working directory."""

from __future__ import annotations

LOG_PATH = "log.txt"


def write_log(*args: object) -> None:
    """Append ``args`` to the log file, separated by spaces, as one line."""
    with open(LOG_PATH, "a", encoding="utf-8") as log_file:
        print(*args, file=log_file)