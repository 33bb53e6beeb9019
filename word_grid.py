#!/usr/bin/env python3
"""Letter grids and word catalogs for the word clock.

The clock face is an 11x11 letter grid stored row-major as a flat list of 121
one-character strings. The first 10 rows spell the words, the 11th row holds
the four minute ticks ('*') that count minutes past a five-minute boundary.

Each dialect ("locale") pairs one grid with a catalog that maps every
ClockWord to its (offset, length) inside the flat grid. The tables are built
once at import and never mutated; callers receive a Locale and pass it on
explicitly to the resolver and the display iterator.

Usage:
    from word_grid import ClockWord, load_locale
    loc = load_locale('ch-bern')
    loc.catalog[ClockWord.HALF]          # Segment(offset=36, length=5)
    segment_text(loc, ClockWord.HALF)    # 'HAUBI'
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, NamedTuple, Tuple

MAX_COLUMNS = 11
MAX_ROWS = 11
TICK_ROW = MAX_ROWS - 1
MAX_TICKS = 4

DEFAULT_LOCALE = 'ch-bern'


class ClockWord(Enum):
    ONE = 'one'
    TWO = 'two'
    THREE = 'three'
    FOUR = 'four'
    FIVE = 'five'
    SIX = 'six'
    SEVEN = 'seven'
    EIGHT = 'eight'
    NINE = 'nine'
    TEN = 'ten'
    ELEVEN = 'eleven'
    TWELVE = 'twelve'
    FULL_CLOCK = 'full_clock'
    HALF = 'half'
    FIVE_MINUTES = 'five_minutes'
    TEN_MINUTES = 'ten_minutes'
    TO = 'to'
    PAST = 'past'
    IT = 'it'
    IS = 'is'
    QUARTER = 'quarter'
    TWENTY = 'twenty'
    ONE_MINUTE = 'one_minute'
    TWO_MINUTES = 'two_minutes'
    THREE_MINUTES = 'three_minutes'
    FOUR_MINUTES = 'four_minutes'


# Hour words indexed by hour % 12
HOUR_WORDS: Tuple[ClockWord, ...] = (
    ClockWord.TWELVE, ClockWord.ONE, ClockWord.TWO, ClockWord.THREE,
    ClockWord.FOUR, ClockWord.FIVE, ClockWord.SIX, ClockWord.SEVEN,
    ClockWord.EIGHT, ClockWord.NINE, ClockWord.TEN, ClockWord.ELEVEN,
)

# Tick labels indexed by minute % 5 (index 0 unused: no ticks on the boundary)
TICK_WORDS: Tuple[ClockWord, ...] = (
    ClockWord.ONE_MINUTE, ClockWord.TWO_MINUTES,
    ClockWord.THREE_MINUTES, ClockWord.FOUR_MINUTES,
)


class Segment(NamedTuple):
    offset: int
    length: int

    def covers(self, index: int) -> bool:
        return self.offset <= index < self.offset + self.length


class Locale(NamedTuple):
    name: str
    grid: Tuple[str, ...]
    catalog: Dict[ClockWord, Segment]
    spelling: Dict[ClockWord, str]
    tick_offset: int
    rows: int = MAX_ROWS
    columns: int = MAX_COLUMNS


def _at(row: int, col: int, length: int) -> Segment:
    return Segment(row * MAX_COLUMNS + col, length)


# --------------------------------------------------------------------------------------
# Bernese Swiss German ("Es isch füf ab drü", "Es isch haubi vieri", ...)
# --------------------------------------------------------------------------------------
CH_BERN_GRID: Tuple[str, ...] = tuple(
    "ESKISCHAFÜF"
    "VIERTUBFZÄÄ"
    "ZWÄNZGSIVOR"
    "ABOHAUBIEPM"
    "EISZWOISDRÜ"
    "VIERFÜNFIQT"
    "SECHSISIBNI"
    "ACHTINÜNIEL"
    "ZÄNIERBEUFI"
    "ZWÖUFIAMUHR"
    "   ****    "
)

CH_BERN_TICK_OFFSET = TICK_ROW * MAX_COLUMNS + 3

CH_BERN_CATALOG: Dict[ClockWord, Segment] = {
    ClockWord.ONE: _at(4, 0, 3),
    ClockWord.TWO: _at(4, 3, 4),
    ClockWord.THREE: _at(4, 8, 3),
    ClockWord.FOUR: _at(5, 0, 4),
    ClockWord.FIVE: _at(5, 4, 5),
    ClockWord.SIX: _at(6, 0, 6),
    ClockWord.SEVEN: _at(6, 6, 5),
    ClockWord.EIGHT: _at(7, 0, 5),
    ClockWord.NINE: _at(7, 5, 4),
    ClockWord.TEN: _at(8, 0, 4),
    ClockWord.ELEVEN: _at(8, 7, 4),
    ClockWord.TWELVE: _at(9, 0, 6),
    ClockWord.FULL_CLOCK: _at(9, 8, 3),
    ClockWord.HALF: _at(3, 3, 5),
    ClockWord.FIVE_MINUTES: _at(0, 8, 3),
    ClockWord.TEN_MINUTES: _at(1, 8, 3),
    ClockWord.QUARTER: _at(1, 0, 6),
    ClockWord.TWENTY: _at(2, 0, 6),
    ClockWord.TO: _at(2, 8, 3),
    ClockWord.PAST: _at(3, 0, 2),
    ClockWord.IT: _at(0, 0, 2),
    ClockWord.IS: _at(0, 3, 4),
    ClockWord.ONE_MINUTE: Segment(CH_BERN_TICK_OFFSET, 1),
    ClockWord.TWO_MINUTES: Segment(CH_BERN_TICK_OFFSET, 2),
    ClockWord.THREE_MINUTES: Segment(CH_BERN_TICK_OFFSET, 3),
    ClockWord.FOUR_MINUTES: Segment(CH_BERN_TICK_OFFSET, 4),
}

# Expected letters under each segment (layout verification)
CH_BERN_SPELLING: Dict[ClockWord, str] = {
    ClockWord.ONE: 'EIS',
    ClockWord.TWO: 'ZWOI',
    ClockWord.THREE: 'DRÜ',
    ClockWord.FOUR: 'VIER',
    ClockWord.FIVE: 'FÜNFI',
    ClockWord.SIX: 'SECHSI',
    ClockWord.SEVEN: 'SIBNI',
    ClockWord.EIGHT: 'ACHTI',
    ClockWord.NINE: 'NÜNI',
    ClockWord.TEN: 'ZÄNI',
    ClockWord.ELEVEN: 'EUFI',
    ClockWord.TWELVE: 'ZWÖUFI',
    ClockWord.FULL_CLOCK: 'UHR',
    ClockWord.HALF: 'HAUBI',
    ClockWord.FIVE_MINUTES: 'FÜF',
    ClockWord.TEN_MINUTES: 'ZÄÄ',
    ClockWord.QUARTER: 'VIERTU',
    ClockWord.TWENTY: 'ZWÄNZG',
    ClockWord.TO: 'VOR',
    ClockWord.PAST: 'AB',
    ClockWord.IT: 'ES',
    ClockWord.IS: 'ISCH',
    ClockWord.ONE_MINUTE: '*',
    ClockWord.TWO_MINUTES: '**',
    ClockWord.THREE_MINUTES: '***',
    ClockWord.FOUR_MINUTES: '****',
}

LOCALES: Dict[str, Locale] = {
    'ch-bern': Locale(
        name='ch-bern',
        grid=CH_BERN_GRID,
        catalog=CH_BERN_CATALOG,
        spelling=CH_BERN_SPELLING,
        tick_offset=CH_BERN_TICK_OFFSET,
    ),
}


def available_locales() -> List[str]:
    return sorted(LOCALES)


def load_locale(name: str = DEFAULT_LOCALE) -> Locale:
    """Return the grid/catalog pair for a dialect name.

    Names are matched case-insensitively. Raises ValueError for an unknown
    dialect; hosts treat that as a startup configuration error.
    """
    key = (name or '').strip().lower()
    try:
        return LOCALES[key]
    except KeyError:
        known = ', '.join(available_locales())
        raise ValueError(f"Unknown language dialect {name!r} (known: {known})") from None


def segment_text(locale: Locale, word: ClockWord) -> str:
    """Letters of the grid covered by a word."""
    seg = locale.catalog[word]
    return ''.join(locale.grid[seg.offset:seg.offset + seg.length])


def verify_locale(locale: Locale) -> None:
    """Check a locale table for layout mistakes.

    - grid has exactly rows x columns single-character cells
    - every ClockWord has a segment and a spelling, and each segment stays inside one row
    - the letters under each segment match the expected spelling
    - the tick labels start at the tick offset, inside the tick row

    Raises ValueError describing the first problem found.
    """
    cells = locale.rows * locale.columns
    if len(locale.grid) != cells:
        raise ValueError(f"{locale.name}: grid has {len(locale.grid)} cells, expected {cells}")
    for i, ch in enumerate(locale.grid):
        if len(ch) != 1:
            raise ValueError(f"{locale.name}: cell {i} is {ch!r}, expected a single character")
    missing = [w.name for w in ClockWord if w not in locale.catalog]
    if missing:
        raise ValueError(f"{locale.name}: catalog lacks {', '.join(missing)}")
    missing = [w.name for w in ClockWord if w not in locale.spelling]
    if missing:
        raise ValueError(f"{locale.name}: spelling lacks {', '.join(missing)}")
    for word, seg in locale.catalog.items():
        if seg.offset < 0 or seg.length <= 0 or seg.offset + seg.length > cells:
            raise ValueError(f"{locale.name}: {word.name} {tuple(seg)} is outside the grid")
        first_row = seg.offset // locale.columns
        last_row = (seg.offset + seg.length - 1) // locale.columns
        if first_row != last_row:
            raise ValueError(f"{locale.name}: {word.name} wraps from row {first_row} to {last_row}")
        expected = locale.spelling[word]
        if segment_text(locale, word) != expected:
            raise ValueError(
                f"{locale.name}: {word.name} spells {segment_text(locale, word)!r}, expected {expected!r}"
            )
    tick_row_start = (locale.rows - 1) * locale.columns
    if not tick_row_start <= locale.tick_offset <= tick_row_start + locale.columns - MAX_TICKS:
        raise ValueError(f"{locale.name}: tick offset {locale.tick_offset} is outside the tick row")
    for count, word in enumerate(TICK_WORDS, start=1):
        if locale.catalog[word] != Segment(locale.tick_offset, count):
            raise ValueError(f"{locale.name}: {word.name} must cover the first {count} tick cell(s)")
