#!/usr/bin/env python3
"""Walk the clock face cell by cell for rendering.

iterate_cells() yields one Cell (char, highlighted, end_of_row) for every grid
position in row-major order. Hosts draw the char, pick the lit style when
highlighted is set and start a new visual row after end_of_row.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, NamedTuple

from word_grid import Locale
from word_time import ResolvedTime, resolve

# ANSI styles for terminal output (lit: bold red, unlit: dim green)
ANSI_LIT = '\033[1;31m'
ANSI_UNLIT = '\033[2;32m'
ANSI_RESET = '\033[0m'
UNLIT_PLAIN = '.'


class Cell(NamedTuple):
    char: str
    highlighted: bool
    end_of_row: bool


def iterate_cells(locale: Locale, resolved: ResolvedTime) -> Iterator[Cell]:
    """Yield every cell of the locale grid, flagging the ones to light.

    A cell is lit when it lies inside any resolved word segment or is one of
    the first resolved.ticks cells of the tick row.
    """
    segments = [locale.catalog[w] for w in resolved.words]
    tick_end = locale.tick_offset + resolved.ticks
    columns = locale.columns
    for i in range(locale.rows * columns):
        lit = locale.tick_offset <= i < tick_end or any(s.covers(i) for s in segments)
        yield Cell(locale.grid[i], lit, i % columns == columns - 1)


def show_time_iterator(locale: Locale, hour: int, minute: int) -> Iterator[Cell]:
    return iterate_cells(locale, resolve(hour, minute))


def cell_rows(cells: Iterable[Cell]) -> Iterator[List[Cell]]:
    """Group a cell stream into rows using the end_of_row flag."""
    row: List[Cell] = []
    for cell in cells:
        row.append(cell)
        if cell.end_of_row:
            yield row
            row = []
    if row:
        yield row


def render_text(cells: Iterable[Cell], plain: bool = False, spacing: str = ' ') -> List[str]:
    """Render cells to text lines.

    plain=True: lit cells keep their letter, unlit cells become '.'.
    Otherwise every letter is shown, wrapped in ANSI color codes.
    """
    lines: List[str] = []
    for row in cell_rows(cells):
        parts: List[str] = []
        for cell in row:
            if plain:
                parts.append(cell.char if cell.highlighted else UNLIT_PLAIN)
            else:
                style = ANSI_LIT if cell.highlighted else ANSI_UNLIT
                parts.append(f"{style}{cell.char}{ANSI_RESET}")
        lines.append(spacing.join(parts))
    return lines
