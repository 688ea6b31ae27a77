"""
civiltime.core.time
-------------------
Pure proleptic-Gregorian calendar math shared by the normalizer, the
granularity strategies and the weekday engine.

The Gregorian calendar repeats every 400 years, and those 400 years hold
exactly 146097 days (20871 weeks). Most helpers below exploit that cycle
to keep the magnitude of intermediate values bounded no matter how far the
year lies from the epoch.
"""

from __future__ import annotations

from .types import DiffT, YearT

DAYS_PER_400_YEARS = 146097
DAYS_PER_CENTURY = 36524
DAYS_PER_4_YEARS = 1460

# Days from 0000-03-01 to 1970-01-01 in the March-based era count.
_EPOCH_SHIFT = 719468

# Non-leap month lengths; index 0 is unused.
_DAYS_PER_MONTH = (-1, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days before the first of each month in a non-leap year; index 0 is unused.
_MONTH_OFFSETS = (-1, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(y: YearT) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def year_index(y: YearT, m: int) -> int:
    """
    Position in the 400-year cycle of the February that follows (y, m).

    Months after February already belong to the span that ends in the next
    year's February, hence the shift.
    """
    return (y + (1 if m > 2 else 0)) % 400


def days_per_century(yi: int) -> int:
    """Days in the 100 years starting at mod-400 index year ``yi``."""
    return DAYS_PER_CENTURY + (1 if yi == 0 or yi > 300 else 0)


def days_per_4years(yi: int) -> int:
    """Days in the 4 years starting at mod-400 index year ``yi``."""
    return DAYS_PER_4_YEARS + (1 if yi == 0 or yi > 300 or (yi - 1) % 100 < 96 else 0)


def days_per_year(y: YearT, m: int) -> int:
    """Days from (y, m) to (y + 1, m)."""
    return 366 if is_leap_year(y + (1 if m > 2 else 0)) else 365


def days_per_month(y: YearT, m: int) -> int:
    return _DAYS_PER_MONTH[m] + (1 if m == 2 and is_leap_year(y) else 0)


def days_in_year(y: YearT) -> int:
    return 366 if is_leap_year(y) else 365


def yearday(y: YearT, m: int, d: int) -> int:
    """Day of year in [1, 366] for a normalized date."""
    feb29 = 1 if m > 2 and is_leap_year(y) else 0
    return _MONTH_OFFSETS[m] + feb29 + d


# ============================================================
# Day ordinals and differences
# ============================================================

def ymd_ord(y: YearT, m: int, d: int) -> DiffT:
    """
    Map a normalized Y/M/D to the number of days before/after 1970-01-01.

    Eras are 400-year blocks that begin on March 1st, so the leap day is
    always the last day of an era-year.
    """
    eyear = y - 1 if m <= 2 else y
    era = eyear // 400
    yoe = eyear - era * 400                   # [0, 399]
    mp = m - 3 if m > 2 else m + 9            # March = 0
    doy = (153 * mp + 2) // 5 + d - 1         # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_400_YEARS + doe - _EPOCH_SHIFT


def day_difference(y1: YearT, m1: int, d1: int, y2: YearT, m2: int, d2: int) -> DiffT:
    """
    Signed number of days from (y2, m2, d2) to (y1, m1, d1).

    ymd_ord() of an extreme year would leave the 64-bit range even when the
    two dates are close together, so the ordinals are taken of the mod-400
    years only and the whole cycles are accounted for separately. When the
    two parts have opposite signs, two cycles are moved from one to the
    other so their sum cannot overshoot on the way to the answer.
    """
    a_c4_off = y1 % 400
    b_c4_off = y2 % 400
    c4_diff = (y1 - a_c4_off) - (y2 - b_c4_off)
    delta = ymd_ord(a_c4_off, m1, d1) - ymd_ord(b_c4_off, m2, d2)
    if c4_diff > 0 and delta < 0:
        delta += 2 * DAYS_PER_400_YEARS
        c4_diff -= 2 * 400
    elif c4_diff < 0 and delta > 0:
        delta -= 2 * DAYS_PER_400_YEARS
        c4_diff += 2 * 400
    return (c4_diff // 400 * DAYS_PER_400_YEARS) + delta
