#!/usr/bin/env python3
"""Map a wall-clock (hour, minute) to the words the clock lights up.

Phrase construction:
  1. minute % 5 (1..4) lights that many minute ticks, emitted first.
  2. The five-minute base picks a phrase; from :25 on the phrase refers to
     the coming hour ("füf vor haubi vieri" at 3:25), so the hour rolls forward.
  3. The (possibly advanced) hour % 12 picks the hour word, 0 -> TWELVE.

The resolver is pure: no caching, no state. Calling it twice with the same
input yields the same words.
"""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple

from word_grid import HOUR_WORDS, TICK_WORDS, ClockWord, Locale, Segment

W = ClockWord

# base minute -> (words, hour advance)
PHRASES: Dict[int, Tuple[Tuple[ClockWord, ...], int]] = {
    0: ((W.IT, W.IS, W.FULL_CLOCK), 0),
    5: ((W.FIVE_MINUTES, W.PAST), 0),
    10: ((W.TEN_MINUTES, W.PAST), 0),
    15: ((W.QUARTER, W.PAST), 0),
    20: ((W.TWENTY, W.PAST), 0),
    25: ((W.FIVE_MINUTES, W.TO, W.HALF), 1),
    30: ((W.IT, W.IS, W.HALF), 1),
    35: ((W.FIVE_MINUTES, W.PAST, W.HALF), 1),
    40: ((W.TWENTY, W.TO), 1),
    45: ((W.QUARTER, W.TO), 1),
    # the hour word TEN, not TEN_MINUTES
    50: ((W.TEN, W.TO), 1),
    55: ((W.FIVE_MINUTES, W.TO), 1),
}


class ResolvedTime(NamedTuple):
    words: Tuple[ClockWord, ...]
    ticks: int


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")
    if not 0 <= value < upper:
        raise ValueError(f"{name} must be in 0..{upper - 1}, got {value}")


def _phrase(base: int) -> Tuple[Tuple[ClockWord, ...], int]:
    phrase = PHRASES.get(base)
    if phrase is None:
        raise AssertionError(f"no phrase for base minute {base}")
    return phrase


def effective_hour(hour: int, minute: int) -> int:
    """Hour (0..11) named on the clock face for the given time."""
    _check_range('hour', hour, 24)
    _check_range('minute', minute, 60)
    return (hour + _phrase(minute - minute % 5)[1]) % 12


def resolve(hour: int, minute: int) -> ResolvedTime:
    """Return the ordered words for a time plus the number of lit ticks.

    hour must be 0..23 and minute 0..59; anything else raises ValueError.
    """
    _check_range('hour', hour, 24)
    _check_range('minute', minute, 60)

    words: List[ClockWord] = []
    ticks = minute % 5
    if ticks:
        words.append(TICK_WORDS[ticks - 1])

    phrase_words, advance = _phrase(minute - ticks)
    words.extend(phrase_words)

    words.append(HOUR_WORDS[(hour + advance) % 12])
    return ResolvedTime(tuple(words), ticks)


def resolve_segments(locale: Locale, hour: int, minute: int) -> List[Segment]:
    """Resolve a time straight to grid segments of the given locale."""
    return [locale.catalog[w] for w in resolve(hour, minute).words]
