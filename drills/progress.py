"""Terminal progress indicators: a resizing bar, a percentage and a spinner."""

from __future__ import annotations

import argparse
import shutil
import sys
import time
from collections.abc import Sequence

BAR_LENGTH = 77
BAR_SHARE = 60
SPINNER = "|/-\\"


def render_bar(progress: int, columns: int) -> str:
    """Return one frame of the loading bar for a terminal ``columns`` wide.

    The bar takes 60% of the width, capped at ``BAR_LENGTH`` characters.
    """
    if not 0 <= progress <= 100:
        raise ValueError(f"progress must be within 0..100, got {progress}")
    if columns < 0:
        raise ValueError(f"columns must not be negative, got {columns}")
    bar_width = min(columns * BAR_SHARE // 100, BAR_LENGTH)
    width = progress * bar_width // 100
    # A negative field width left-justifies with its magnitude.
    pad = abs(bar_width - width - 1)
    filled = "=" * width
    return f"[{filled}>{'':<{pad}}] {progress}% : Terminal width {columns}"


def percent_line(percent: int) -> str:
    """Return the percentage status line."""
    return f"Processing: {percent:3d}%"


def spinner_frame(step: int) -> str:
    """Return the spinner frame for ``step``: its index then the glyph."""
    n = step % len(SPINNER)
    return f"{n}{SPINNER[n]}"


def main(argv: Sequence[str] | None = None) -> int:
    """Animate the bar, then the percentage line, then the spinner."""
    parser = argparse.ArgumentParser(description="Show terminal progress indicators.")
    parser.add_argument("--delay", type=float, default=0.1, help="seconds per frame")
    parser.add_argument("--columns", type=int, default=None, help="terminal width")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    out = sys.stdout
    for progress in range(101):
        columns = (
            args.columns
            if args.columns is not None
            else shutil.get_terminal_size().columns
        )
        out.write(render_bar(progress, columns) + "\r")
        out.flush()
        time.sleep(args.delay)
    out.write("\n")

    for percent in range(0, 100, 10):
        out.write(percent_line(percent) + "\r")
        out.flush()
        time.sleep(args.delay)
    out.write("\n")

    out.write("Processing: ")
    for step in range(10):
        out.write(spinner_frame(step) + "\b\b")
        out.flush()
        time.sleep(args.delay)
    out.write("\n")
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())