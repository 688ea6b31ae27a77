"""
civiltime.engines.weekday
-------------------------
Day-of-week derivation and nearest-weekday search.
"""

from __future__ import annotations

from enum import Enum

from ..core.types import Fields
from .granularity import Day


class Weekday(Enum):
    """Day of week. Values follow datetime.date.weekday() (Monday = 0)."""
    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    def equals(self, other: "Weekday") -> bool:
        return self is other

    @classmethod
    def parse(cls, s: str) -> "Weekday":
        """Accepts the three-letter name or the full name, in any case: 'thu', 'Thursday'."""
        key = s.strip().upper()
        try:
            return cls[_FULL_NAMES.get(key, key)]
        except KeyError:
            raise ValueError(f"Unknown weekday '{s}'. Expected one of {[w.name for w in cls]}") from None


_FULL_NAMES = {
    "MONDAY": "MON",
    "TUESDAY": "TUE",
    "WEDNESDAY": "WED",
    "THURSDAY": "THU",
    "FRIDAY": "FRI",
    "SATURDAY": "SAT",
    "SUNDAY": "SUN",
}

# Sunday-based congruence result r in [0, 6] maps to _WEEKDAY_BY_MON_OFF[r + 6].
_WEEKDAY_BY_MON_OFF = (
    Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI, Weekday.SAT, Weekday.SUN,
    Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI, Weekday.SAT,
)
# Per-month offsets for the March-based year; index 0 is unused.
_WEEKDAY_OFFSETS = (-1, 0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

_WEEKDAYS_FORW = tuple(Weekday) * 2
_WEEKDAYS_BACK = tuple(reversed(Weekday)) * 2


def weekday(f: Fields) -> Weekday:
    """
    Weekday of a normalized date.

    The year is reduced mod 400 first: 400 Gregorian years are a whole
    number of weeks, so the result holds for any year magnitude.
    """
    wd = 2400 + (f.y % 400) - (1 if f.m < 3 else 0)
    wd += wd // 4 - wd // 100 + wd // 400
    wd += _WEEKDAY_OFFSETS[f.m] + f.d
    return _WEEKDAY_BY_MON_OFF[wd % 7 + 6]


def _search(seq: tuple[Weekday, ...], base: Weekday, target: Weekday) -> int:
    i = seq.index(base)
    for j in range(i + 1, i + 8):
        if seq[j] is target:
            return j - i
    raise AssertionError("unreachable")


def next_weekday(f: Fields, target: Weekday) -> Fields:
    """
    The first day strictly after ``f`` falling on ``target``, day-aligned.
    The result is 1 to 7 days later, never ``f`` itself.
    """
    f = Day.align(f)
    return Day.step(f, _search(_WEEKDAYS_FORW, weekday(f), target))


def prev_weekday(f: Fields, target: Weekday) -> Fields:
    """The last day strictly before ``f`` falling on ``target``, day-aligned."""
    f = Day.align(f)
    return Day.step(f, -_search(_WEEKDAYS_BACK, weekday(f), target))
