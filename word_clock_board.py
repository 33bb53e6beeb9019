#!/usr/bin/env python3
"""Word clock window (tkinter).

Key details:
1. 11x11 letter grid drawn as canvas text items, created once and recolored per tick.
2. Unlit letters dim green, lit letters red, on black.
3. Clock polled every 500 ms; the face is recolored only when the minute changes.
4. Optional positional dialect argument selects the grid (default ch-bern).

Usage:
  python word_clock_board.py
  python word_clock_board.py ch-bern --cell-size 48
"""
from __future__ import annotations

import argparse
import sys
import tkinter as tk
from typing import Iterable, List, Optional, Tuple

import print_word_clock as pwc
import word_display as wd
import word_grid as wg

TICK_MS = 500
CELL_SIZE = 60
FONT_SIZE = 32
FONT_FAMILY = 'Helvetica'
ON_COLOR = '#ff0000'
OFF_COLOR = '#008000'
BG_COLOR = '#000000'


class WordClockBoard(tk.Canvas):
    def __init__(self, master: tk.Misc, locale: wg.Locale,
                 cell_size: int = CELL_SIZE, font_size: int = FONT_SIZE):
        super().__init__(master, width=locale.columns * cell_size, height=locale.rows * cell_size,
                         bg=BG_COLOR, highlightthickness=0)
        self.locale = locale
        # Text item ids, row-major like the grid
        self._letters: List[int] = []
        font = (FONT_FAMILY, font_size)
        for i, ch in enumerate(locale.grid):
            row, col = divmod(i, locale.columns)
            tid = self.create_text(
                col * cell_size + cell_size // 2,
                row * cell_size + cell_size // 2,
                text=ch, font=font, fill=OFF_COLOR,
            )
            self._letters.append(tid)

    def clear(self):
        for tid in self._letters:
            self.itemconfig(tid, fill=OFF_COLOR)

    def render_cells(self, cells: Iterable[wd.Cell]):
        for tid, cell in zip(self._letters, cells):
            self.itemconfig(tid, fill=ON_COLOR if cell.highlighted else OFF_COLOR)

    def show_time(self, hour: int, minute: int):
        self.render_cells(wd.show_time_iterator(self.locale, hour, minute))


class App(tk.Tk):
    def __init__(self, locale: wg.Locale, cell_size: int = CELL_SIZE, font_size: int = FONT_SIZE):
        super().__init__()
        self.title('Word Clock')
        self.configure(bg=BG_COLOR)
        self.board = WordClockBoard(self, locale, cell_size, font_size)
        self.board.pack(padx=10, pady=10)
        self._shown: Optional[Tuple[int, int]] = None
        self.after(0, self.tick)

    def tick(self):
        now = pwc.current_time()
        hm = (now.hour, now.minute)
        if hm != self._shown:
            self._shown = hm
            self.board.show_time(*hm)
        self.after(TICK_MS, self.tick)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='Show the time as a word clock window')
    p.add_argument('dialect', nargs='?', default=None,
                   help=f"Language dialect (default: {wg.DEFAULT_LOCALE})")
    p.add_argument('--cell-size', type=pwc.positive_int, default=CELL_SIZE, help='Pixels per letter cell')
    p.add_argument('--font-size', type=pwc.positive_int, default=FONT_SIZE, help='Letter font size')
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:  # pragma: no cover
    opts = parse_args(argv)
    try:
        loc = pwc.select_locale(opts.dialect)
    except ValueError as e:
        print(f"[wordclock] {e}", file=sys.stderr)
        return 2
    app = App(loc, cell_size=opts.cell_size, font_size=opts.font_size)
    try:
        app.mainloop()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
