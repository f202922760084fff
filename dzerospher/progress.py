"""Coloured terminal progress bar."""

from __future__ import annotations

GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
RED = "\033[1;31m"
RESET = "\033[0m"
BLUE = "\033[1;34m"

BAR_WIDTH = 50


def progress_bar(current, total, done="=", remain=".") -> str:
    """Return a carriage-return-prefixed bar showing ``current`` of ``total``."""
    if total == 0:
        raise ValueError("total must not be zero")
    progress = float(current) / total
    position = int(BAR_WIDTH * progress)
    cells = []
    for i in range(BAR_WIDTH):
        if i < position:
            cells.append(GREEN + done)
        elif i == position:
            cells.append(">")
        else:
            cells.append(RED + remain)
    return (
        f"\r{BLUE}[{''.join(cells)}{BLUE}] {YELLOW}{int(progress * 100)}% "
        f"{RESET}({current}/{total})"
    )