"""
civiltime.engines.granularity
-----------------------------
The six granularity strategies (second, minute, hour, day, month, year).

Each finer granularity measures a difference as the next-coarser
difference scaled by its unit, plus the residual in its own field. The
coarse part can already sit near the edge of the 64-bit range, so the
combination goes through scale_add().
"""

from __future__ import annotations

from dataclasses import replace

from ..core.normalize import n_day, n_hour, n_min, n_mon, n_sec
from ..core.time import day_difference
from ..core.types import DiffT, Fields


def scale_add(v: DiffT, f: DiffT, a: DiffT) -> DiffT:
    """
    Returns (v * f + a), reassociated so the intermediate product stays one
    unit of ``f`` closer to zero than the result's magnitude.
    """
    if v < 0:
        return ((v + 1) * f + a) - f
    return ((v - 1) * f + a) + f


class Year:
    name = "year"

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        return replace(f, y=f.y + n)

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        return f1.y - f2.y

    @staticmethod
    def align(f: Fields) -> Fields:
        return Fields(f.y, 1, 1)


class Month:
    name = "month"

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        return n_mon(f.y + n // 12, f.m + n % 12, f.d, 0, f.hh, f.mm, f.ss)

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        return scale_add(Year.difference(f1, f2), 12, f1.m - f2.m)

    @staticmethod
    def align(f: Fields) -> Fields:
        return Fields(f.y, f.m, 1)


class Day:
    name = "day"

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        return n_day(f.y, f.m, f.d, n, f.hh, f.mm, f.ss)

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        return day_difference(f1.y, f1.m, f1.d, f2.y, f2.m, f2.d)

    @staticmethod
    def align(f: Fields) -> Fields:
        return Fields(f.y, f.m, f.d)


class Hour:
    name = "hour"

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        return n_hour(f.y, f.m, f.d + n // 24, 0, f.hh + n % 24, f.mm, f.ss)

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        return scale_add(Day.difference(f1, f2), 24, f1.hh - f2.hh)

    @staticmethod
    def align(f: Fields) -> Fields:
        return Fields(f.y, f.m, f.d, f.hh)


class Minute:
    name = "minute"

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        return n_min(f.y, f.m, f.d, f.hh + n // 60, 0, f.mm + n % 60, f.ss)

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        return scale_add(Hour.difference(f1, f2), 60, f1.mm - f2.mm)

    @staticmethod
    def align(f: Fields) -> Fields:
        return Fields(f.y, f.m, f.d, f.hh, f.mm)


class Second:
    name = "second"

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        return n_sec(f.y, f.m, f.d, f.hh, f.mm + n // 60, f.ss + n % 60)

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        return scale_add(Minute.difference(f1, f2), 60, f1.ss - f2.ss)

    @staticmethod
    def align(f: Fields) -> Fields:
        return f
