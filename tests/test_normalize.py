# tests/test_normalize.py

import random
from datetime import date, datetime, timedelta

import pytest

from civiltime.core.normalize import n_day, n_sec, normalize
from civiltime.core.time import days_per_month
from civiltime.core.types import Fields

I32_MAX = 2**31 - 1
I32_MIN = -(2**31)


def test_already_normalized_is_unchanged():
    assert n_sec(2016, 1, 28, 17, 14, 12) == Fields(2016, 1, 28, 17, 14, 12)


def test_normalize_idempotent():
    random.seed(7)
    for _ in range(2000):
        y = random.randint(-10**12, 10**12)
        m = random.randint(1, 12)
        f = Fields(y, m, random.randint(1, days_per_month(y, m)),
                   random.randint(0, 23), random.randint(0, 59), random.randint(0, 59))
        assert normalize(*f.as_tuple()) == f


@pytest.mark.parametrize(
    "given, expected",
    [
        # second overflow / underflow
        ((2016, 1, 28, 17, 14, 121), (2016, 1, 28, 17, 16, 1)),
        ((2016, 1, 28, 17, 14, -121), (2016, 1, 28, 17, 11, 59)),
        # minute overflow / underflow
        ((2016, 1, 28, 17, 121, 12), (2016, 1, 28, 19, 1, 12)),
        ((2016, 1, 28, 17, -121, 12), (2016, 1, 28, 14, 59, 12)),
        # hour overflow / underflow
        ((2016, 1, 28, 49, 14, 12), (2016, 1, 30, 1, 14, 12)),
        ((2016, 1, 28, -49, 14, 12), (2016, 1, 25, 23, 14, 12)),
        # month overflow / underflow
        ((2016, 25, 28, 17, 14, 12), (2018, 1, 28, 17, 14, 12)),
        ((2016, -25, 28, 17, 14, 12), (2013, 11, 28, 17, 14, 12)),
        # two full 400-year cycles each way
        ((2016, 1, 292195, 17, 14, 12), (2816, 1, 1, 17, 14, 12)),
        ((2016, 1, -292195, 17, 14, 12), (1215, 12, 30, 17, 14, 12)),
        # everything at once
        ((2016, -42, 122, 99, -147, 4949), (2012, 10, 4, 1, 55, 29)),
        # October 32nd
        ((2016, 10, 32, 0, 0, 0), (2016, 11, 1, 0, 0, 0)),
        # day zero and negative days step back across the year boundary
        ((2016, 1, 0, 0, 0, 0), (2015, 12, 31, 0, 0, 0)),
        ((2016, 1, -364, 0, 0, 0), (2015, 1, 1, 0, 0, 0)),
        ((2016, 3, 0, 0, 0, 0), (2016, 2, 29, 0, 0, 0)),
    ],
)
def test_field_carries(given, expected):
    assert n_sec(*given).as_tuple() == expected


@pytest.mark.parametrize(
    "given, expected",
    [
        ((1970, 1, 1, 0, 0, I32_MAX), "2038-01-19T03:14:07"),
        ((1970, 1, 1, 0, I32_MAX, I32_MAX), "6121-02-11T05:21:07"),
        ((1970, 1, 1, I32_MAX, I32_MAX, I32_MAX), "251104-11-20T12:21:07"),
        ((1970, 1, I32_MAX, I32_MAX, I32_MAX, I32_MAX), "6130715-05-30T12:21:07"),
        ((1970, I32_MAX, I32_MAX, I32_MAX, I32_MAX, I32_MAX), "185087685-11-26T12:21:07"),
        ((1970, 1, 1, 0, 0, I32_MIN), "1901-12-13T20:45:52"),
        ((1970, 1, 1, 0, I32_MIN, I32_MIN), "-2182-11-20T18:37:52"),
        ((1970, 1, 1, I32_MIN, I32_MIN, I32_MIN), "-247165-02-11T10:37:52"),
        ((1970, 1, I32_MIN, I32_MIN, I32_MIN, I32_MIN), "-6126776-08-01T10:37:52"),
        ((1970, I32_MIN, I32_MIN, I32_MIN, I32_MIN, I32_MIN), "-185083747-10-31T10:37:52"),
    ],
)
def test_32bit_limits(given, expected):
    f = n_sec(*given)
    assert f"{f.y}-{f.m:02d}-{f.d:02d}T{f.hh:02d}:{f.mm:02d}:{f.ss:02d}" == expected


def test_huge_year_borrow():
    f = n_sec(-(2**63) + 1, 1, 1, -1, 0, 0)
    assert f.as_tuple() == (-(2**63), 12, 31, 23, 0, 0)


def test_huge_year_carry():
    f = n_sec(2**63 - 2, 12, 31, 23, 59, 60)
    assert f.as_tuple() == (2**63 - 1, 1, 1, 0, 0, 0)


def test_day_carry_matches_datetime():
    random.seed(42)
    for _ in range(5000):
        start = date.fromordinal(random.randint(date(500, 1, 1).toordinal(), date(9500, 1, 1).toordinal()))
        k = random.randint(-90000, 90000)
        expected = start + timedelta(days=k)
        f = n_day(start.year, start.month, start.day, k, 0, 0, 0)
        assert (f.y, f.m, f.d) == (expected.year, expected.month, expected.day)


def test_day_field_matches_datetime():
    random.seed(43)
    for _ in range(5000):
        start = date.fromordinal(random.randint(date(500, 1, 1).toordinal(), date(9500, 1, 1).toordinal()))
        k = random.randint(-90000, 90000)
        expected = start + timedelta(days=k)
        f = n_sec(start.year, start.month, start.day + k, 0, 0, 0)
        assert (f.y, f.m, f.d) == (expected.year, expected.month, expected.day)


def test_second_field_matches_datetime():
    random.seed(44)
    for _ in range(5000):
        start = datetime(random.randint(200, 9700), random.randint(1, 12), random.randint(1, 28),
                         random.randint(0, 23), random.randint(0, 59), random.randint(0, 59))
        k = random.randint(-10**9, 10**9)
        expected = start + timedelta(seconds=k)
        f = n_sec(start.year, start.month, start.day, start.hour, start.minute, start.second + k)
        assert f.as_tuple() == (expected.year, expected.month, expected.day,
                                expected.hour, expected.minute, expected.second)


def test_large_delta_round_trip():
    # Millions of years in both directions land back on the start.
    start = (2016, 2, 29)
    for k in (10**9, -10**9, 123456789012, -987654321098):
        f = n_day(*start, k, 0, 0, 0)
        back = n_day(f.y, f.m, f.d, -k, 0, 0, 0)
        assert (back.y, back.m, back.d) == start
