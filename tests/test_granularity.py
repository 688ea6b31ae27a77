# tests/test_granularity.py

import random

import pytest

from civiltime.core.types import Fields
from civiltime.engines.granularity import (
    Day,
    Hour,
    Minute,
    Month,
    Second,
    Year,
    scale_add,
)

DIFF_MIN = -(2**63)
DIFF_MAX = 2**63 - 1

F = Fields(2015, 11, 22, 12, 34, 56)


@pytest.mark.parametrize("v", [-5, -1, 0, 1, 5, DIFF_MAX // 60, DIFF_MIN // 60])
@pytest.mark.parametrize("a", [-59, 0, 59])
def test_scale_add_is_multiply_add(v, a):
    assert scale_add(v, 60, a) == v * 60 + a


@pytest.mark.parametrize(
    "g, expected",
    [
        (Second, (2015, 11, 22, 12, 34, 56)),
        (Minute, (2015, 11, 22, 12, 34, 0)),
        (Hour, (2015, 11, 22, 12, 0, 0)),
        (Day, (2015, 11, 22, 0, 0, 0)),
        (Month, (2015, 11, 1, 0, 0, 0)),
        (Year, (2015, 1, 1, 0, 0, 0)),
    ],
)
def test_align(g, expected):
    assert g.align(F).as_tuple() == expected


@pytest.mark.parametrize(
    "g, n, expected",
    [
        (Second, 5, (2015, 11, 22, 12, 35, 1)),
        (Second, -57, (2015, 11, 22, 12, 33, 59)),
        (Minute, 26, (2015, 11, 22, 13, 0, 56)),
        (Minute, -35, (2015, 11, 22, 11, 59, 56)),
        (Hour, 12, (2015, 11, 23, 0, 34, 56)),
        (Hour, -13, (2015, 11, 21, 23, 34, 56)),
        (Day, 9, (2015, 12, 1, 12, 34, 56)),
        (Day, -22, (2015, 10, 31, 12, 34, 56)),
        (Month, 2, (2016, 1, 22, 12, 34, 56)),
        (Month, -11, (2014, 12, 22, 12, 34, 56)),
        (Year, -2015, (0, 11, 22, 12, 34, 56)),
    ],
)
def test_step(g, n, expected):
    assert g.step(F, n).as_tuple() == expected


def test_step_then_difference_inverts():
    random.seed(42)
    for g in (Second, Minute, Hour, Day, Month, Year):
        for _ in range(500):
            y = random.randint(-10**6, 10**6)
            base = g.align(Fields(y, random.randint(1, 12), random.randint(1, 28),
                                  random.randint(0, 23), random.randint(0, 59), random.randint(0, 59)))
            n = random.randint(-10**7, 10**7)
            moved = g.align(g.step(base, n))
            assert g.difference(moved, base) == n
            assert g.difference(base, moved) == -n


def test_difference_cascade_units():
    a = Fields(2016, 1, 1, 0, 0, 0)
    b = Fields(2015, 1, 1, 0, 0, 0)
    assert Year.difference(a, b) == 1
    assert Month.difference(a, b) == 12
    assert Day.difference(a, b) == 365
    assert Hour.difference(a, b) == 365 * 24
    assert Minute.difference(a, b) == 365 * 24 * 60
    assert Second.difference(a, b) == 365 * 24 * 60 * 60


def test_difference_at_diff_limits():
    # The minute-level difference is past DIFF_MIN; the seconds bring it back.
    s1 = Fields(-292277022657, 1, 27, 8, 28, 52)
    s2 = Fields(1969, 12, 31, 23, 59, 0)
    assert Second.difference(s1, s2) == DIFF_MIN

    s1 = Fields(292277026596, 12, 4, 15, 30, 0)
    s2 = Fields(1969, 12, 31, 23, 59, 53)
    assert Second.difference(s1, s2) == DIFF_MAX


def test_granularity_names():
    names = [g.name for g in (Second, Minute, Hour, Day, Month, Year)]
    assert names == ["second", "minute", "hour", "day", "month", "year"]
