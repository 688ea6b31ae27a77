"""
civiltime.core.normalize
------------------------
The normalization cascade. Turns unconstrained integer fields into the
unique canonical Fields for the same point on the civil-time line.

Carries flow seconds -> minutes -> hours -> days -> months -> years, one
stage at a time, so no stage ever has to form a single giant count of
days or seconds. Every division here is floor division: remainders land
in [0, unit) even for negative inputs.
"""

from __future__ import annotations

from .time import (
    DAYS_PER_400_YEARS,
    days_per_4years,
    days_per_century,
    days_per_month,
    days_per_year,
    year_index,
)
from .types import DiffT, Fields, YearT


def n_day(y: YearT, m: int, d: DiffT, cd: DiffT, hh: int, mm: int, ss: int) -> Fields:
    """
    Resolve day ``d`` of (y, m) plus a day carry ``cd``.

    ``m`` is already normalized. The year is tracked as an offset within
    its 400-year cycle (``ey``) and re-attached at the end.
    """
    ey = y % 400
    oey = ey

    ey += (cd // DAYS_PER_400_YEARS) * 400
    cd %= DAYS_PER_400_YEARS

    # Whole cycles of d are split off toward zero, so a small negative
    # day stays small and negative.
    cycles = abs(d) // DAYS_PER_400_YEARS
    if d < 0:
        cycles = -cycles
    ey += cycles * 400
    d = d - cycles * DAYS_PER_400_YEARS + cd

    if d > 0:
        if d > DAYS_PER_400_YEARS:
            ey += 400
            d -= DAYS_PER_400_YEARS
    elif d > -365:
        # Stepping back across a year boundary is the common case; take
        # one year instead of a full cycle plus chunked counting.
        ey -= 1
        d += days_per_year(ey, m)
    else:
        ey -= 400
        d += DAYS_PER_400_YEARS

    # d is now in [1, 146097].
    if d > 365:
        yi = year_index(ey, m)
        while True:
            n = days_per_century(yi)
            if d <= n:
                break
            d -= n
            ey += 100
            yi = (yi + 100) % 400
        while True:
            n = days_per_4years(yi)
            if d <= n:
                break
            d -= n
            ey += 4
            yi = (yi + 4) % 400
        while True:
            n = days_per_year(ey, m)
            if d <= n:
                break
            d -= n
            ey += 1

    if d > 28:
        while True:
            n = days_per_month(ey, m)
            if d <= n:
                break
            d -= n
            m += 1
            if m > 12:
                ey += 1
                m = 1

    return Fields(y + (ey - oey), m, d, hh, mm, ss)


def n_mon(y: YearT, m: DiffT, d: DiffT, cd: DiffT, hh: int, mm: int, ss: int) -> Fields:
    """Carry months into years, then resolve the day."""
    if not 1 <= m <= 12:
        cy, m0 = divmod(m - 1, 12)
        y += cy
        m = m0 + 1
    return n_day(y, m, d, cd, hh, mm, ss)


def n_hour(y: YearT, m: DiffT, d: DiffT, cd: DiffT, hh: DiffT, mm: int, ss: int) -> Fields:
    """Carry hours into the day carry ``cd``."""
    carry, hh = divmod(hh, 24)
    return n_mon(y, m, d, cd + carry, hh, mm, ss)


def n_min(y: YearT, m: DiffT, d: DiffT, hh: DiffT, ch: DiffT, mm: DiffT, ss: int) -> Fields:
    """
    Carry minutes into the hour carry ``ch``.

    ``hh`` and ``ch`` are each split into days and hours before they are
    combined, keeping the sum small.
    """
    carry, mm = divmod(mm, 60)
    ch += carry
    return n_hour(y, m, d, hh // 24 + ch // 24, hh % 24 + ch % 24, mm, ss)


def n_sec(y: YearT, m: DiffT, d: DiffT, hh: DiffT, mm: DiffT, ss: DiffT) -> Fields:
    """
    Normalize a full Y-M-D hh:mm:ss tuple.

    This is the single entry point for building Fields from caller input.
    Fields that are already in range skip their carry stage; when all of
    them are (with the day at most 28) the cascade is bypassed entirely.
    """
    if 0 <= ss < 60:
        if 0 <= mm < 60:
            if 0 <= hh < 24:
                if 1 <= d <= 28 and 1 <= m <= 12:
                    return Fields(y, m, d, hh, mm, ss)
                return n_mon(y, m, d, 0, hh, mm, ss)
            return n_hour(y, m, d, hh // 24, hh % 24, mm, ss)
        return n_min(y, m, d, hh, mm // 60, mm % 60, ss)
    cm, ss = divmod(ss, 60)
    return n_min(y, m, d, hh, mm // 60 + cm // 60, mm % 60 + cm % 60, ss)


def normalize(y: YearT, m: DiffT = 1, d: DiffT = 1, hh: DiffT = 0, mm: DiffT = 0, ss: DiffT = 0) -> Fields:
    return n_sec(y, m, d, hh, mm, ss)
