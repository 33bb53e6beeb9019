#!/usr/bin/env python3
"""Print the word clock face in the terminal.

Lit letters spell the current time in the selected dialect, e.g. at 14:47:

  . . . . . . . . . . .
  V I E R T U . . . . .
  . . . . . . . . V O R
  ...
  . . . * * . . . . . .

Usage:
  python print_word_clock.py                 # live clock, redraws each minute
  python print_word_clock.py ch-bern --once  # single frame for the current time
  python print_word_clock.py --time 11:59 --plain
  python print_word_clock.py --list

The face is redrawn only when the minute changes; the clock is polled every
--interval seconds (default 0.5). Ctrl+C exits.
"""
from __future__ import annotations

import argparse
import os
import sys
import time
from datetime import datetime, timezone
from typing import List, Optional, Tuple

import word_display as wd
import word_grid as wg

POLL_INTERVAL = 0.5


def current_time() -> datetime:
    """Local wall-clock time, or UTC when the local zone cannot be resolved."""
    try:
        return datetime.now().astimezone()
    except (OSError, OverflowError, ValueError) as e:
        print(f"[wordclock] local time unavailable ({e}); using UTC", file=sys.stderr)
        return datetime.now(timezone.utc)


def select_locale(name: Optional[str]) -> wg.Locale:
    """Load and verify the dialect named on the command line.

    Raises ValueError for an unknown dialect or a broken layout table.
    """
    if name:
        print(f"Language dialect is {name}")
    loc = wg.load_locale(name or wg.DEFAULT_LOCALE)
    wg.verify_locale(loc)
    return loc


def parse_hhmm(text: str) -> Tuple[int, int]:
    """argparse type for --time: 'HH:MM' -> (hour, minute)."""
    try:
        hh, mm = text.split(':', 1)
        hour, minute = int(hh), int(mm)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {text!r}") from None
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise argparse.ArgumentTypeError(f"time out of range: {text!r}")
    return hour, minute


def positive_float(text: str) -> float:
    """argparse type for intervals: a number greater than zero."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {text!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {text!r}")
    return value


def positive_int(text: str) -> int:
    """argparse type for sizes: a whole number greater than zero."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {text!r}")
    return value


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def frame_lines(loc: wg.Locale, hour: int, minute: int, plain: bool) -> List[str]:
    return wd.render_text(wd.show_time_iterator(loc, hour, minute), plain=plain)


def run_loop(loc: wg.Locale, opts: argparse.Namespace) -> None:
    shown: Optional[Tuple[int, int]] = None
    while True:
        now = current_time()
        hm = (now.hour, now.minute)
        if hm != shown:
            shown = hm
            clear_screen()
            for line in frame_lines(loc, now.hour, now.minute, opts.plain):
                print(line)
            print(f"\n{now:%H:%M}  Press Ctrl+C to exit", flush=True)
        time.sleep(opts.interval)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='Show the time as a word clock in the terminal')
    p.add_argument('dialect', nargs='?', default=None,
                   help=f"Language dialect (default: {wg.DEFAULT_LOCALE})")
    p.add_argument('--time', type=parse_hhmm, default=None, metavar='HH:MM',
                   help='Show a fixed time instead of the clock (implies --once)')
    p.add_argument('--once', action='store_true', help='Print a single frame and exit')
    p.add_argument('--interval', type=positive_float, default=POLL_INTERVAL,
                   help='Clock poll interval seconds (default: %(default)s)')
    p.add_argument('--plain', action='store_true',
                   help="No ANSI colors; unlit letters shown as '.'")
    p.add_argument('--list', action='store_true', help='List available dialects and exit')
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    opts = parse_args(argv)
    if opts.list:
        for name in wg.available_locales():
            print(name)
        return 0
    try:
        loc = select_locale(opts.dialect)
    except ValueError as e:
        print(f"[wordclock] {e}", file=sys.stderr)
        return 2

    if opts.time is not None or opts.once:
        if opts.time is not None:
            hour, minute = opts.time
        else:
            now = current_time()
            hour, minute = now.hour, now.minute
        for line in frame_lines(loc, hour, minute, opts.plain):
            print(line)
        return 0

    try:
        run_loop(loc, opts)
    except KeyboardInterrupt:
        print("\nClock terminated.")
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
