"""Tests for word_time: (hour, minute) -> lit words."""

from __future__ import annotations

import pytest

import word_time
from word_grid import HOUR_WORDS, ClockWord as W, load_locale
from word_time import PHRASES, effective_hour, resolve, resolve_segments

ALL_TIMES = [(h, m) for h in range(24) for m in range(60)]
ROLLING_BASES = {25, 30, 35, 40, 45, 50, 55}


class TestScenarios:
    def test_full_hour(self) -> None:
        r = resolve(2, 0)
        assert r.words == (W.IT, W.IS, W.FULL_CLOCK, W.TWO)
        assert r.ticks == 0

    def test_quarter_past(self) -> None:
        r = resolve(2, 15)
        assert r.words == (W.QUARTER, W.PAST, W.TWO)
        assert r.ticks == 0

    def test_ticks_and_quarter_to(self) -> None:
        r = resolve(2, 47)
        assert r.words == (W.TWO_MINUTES, W.QUARTER, W.TO, W.THREE)
        assert r.ticks == 2

    def test_rolls_over_to_twelve(self) -> None:
        r = resolve(11, 59)
        assert r.words == (W.FOUR_MINUTES, W.FIVE_MINUTES, W.TO, W.TWELVE)
        assert r.ticks == 4

    def test_half_names_next_hour(self) -> None:
        assert resolve(3, 30).words == (W.IT, W.IS, W.HALF, W.FOUR)

    def test_five_past_half(self) -> None:
        assert resolve(3, 35).words == (W.FIVE_MINUTES, W.PAST, W.HALF, W.FOUR)

    def test_ten_to_uses_hour_word(self) -> None:
        assert resolve(9, 50).words == (W.TEN, W.TO, W.TEN)

    def test_midnight(self) -> None:
        assert resolve(0, 0).words == (W.IT, W.IS, W.FULL_CLOCK, W.TWELVE)

    def test_afternoon_uses_twelve_hour_face(self) -> None:
        assert resolve(13, 10).words == (W.TEN_MINUTES, W.PAST, W.ONE)


class TestAllTimes:
    @pytest.mark.parametrize("hour, minute", ALL_TIMES)
    def test_well_formed(self, hour: int, minute: int) -> None:
        r = resolve(hour, minute)
        assert 3 <= len(r.words) <= 5
        assert r.words[-1] in HOUR_WORDS
        assert sum(w in HOUR_WORDS for w in r.words[:-1]) <= 1
        assert r.ticks == minute % 5

    def test_hour_advance_per_base(self) -> None:
        for hour, minute in ALL_TIMES:
            base = minute - minute % 5
            expected = (hour + 1) % 12 if base in ROLLING_BASES else hour % 12
            assert effective_hour(hour, minute) == expected
            assert resolve(hour, minute).words[-1] is HOUR_WORDS[expected]

    def test_tick_word_leads_only_off_boundary(self) -> None:
        ticks = (W.ONE_MINUTE, W.TWO_MINUTES, W.THREE_MINUTES, W.FOUR_MINUTES)
        for minute in range(60):
            words = resolve(7, minute).words
            if minute % 5:
                assert words[0] is ticks[minute % 5 - 1]
            else:
                assert words[0] not in ticks

    def test_idempotent(self) -> None:
        for hour, minute in ALL_TIMES:
            assert resolve(hour, minute) == resolve(hour, minute)

    def test_segments_never_overlap(self) -> None:
        loc = load_locale()
        for hour, minute in ALL_TIMES:
            cells = []
            for seg in resolve_segments(loc, hour, minute):
                cells.extend(range(seg.offset, seg.offset + seg.length))
            if resolve(hour, minute).words.count(W.TEN) == 2:
                # "zäni vor zäni" lights the same word twice
                continue
            assert len(cells) == len(set(cells)), (hour, minute)


class TestContract:
    @pytest.mark.parametrize("hour, minute", [(24, 0), (-1, 0), (0, 60), (0, -5)])
    def test_out_of_range(self, hour: int, minute: int) -> None:
        with pytest.raises(ValueError, match="must be in"):
            resolve(hour, minute)

    @pytest.mark.parametrize("hour, minute", [(1.5, 0), ("2", 0), (2, True)])
    def test_non_int(self, hour, minute) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            resolve(hour, minute)

    def test_resolve_segments_follow_catalog(self) -> None:
        loc = load_locale()
        segs = resolve_segments(loc, 2, 47)
        assert segs == [loc.catalog[w] for w in (W.TWO_MINUTES, W.QUARTER, W.TO, W.THREE)]

    def test_missing_phrase_is_internal_error(self, monkeypatch) -> None:
        monkeypatch.setattr(word_time, 'PHRASES', {k: v for k, v in PHRASES.items() if k != 45})
        with pytest.raises(AssertionError, match="no phrase for base minute 45"):
            resolve(2, 47)
        with pytest.raises(AssertionError, match="no phrase for base minute 45"):
            effective_hour(2, 47)
