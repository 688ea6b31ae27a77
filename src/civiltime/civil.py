"""
civiltime.civil
---------------
The six civil-time value types and the field Builder.

Every value wraps one normalized Fields record, aligned to the granularity
named by its class: CivilMonth always has day 1 and a zero time of day,
CivilHour has zero minutes and seconds, and so on. Construction always
runs the normalizer and then the class's align(), so no invalid value can
exist. Values are immutable; arithmetic returns new values.

Comparison looks at all six fields and ignores alignment, so values of
different classes compare (and hash) together. Difference is only defined
between two values of the same class.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Any, ClassVar, Type, TypeVar, overload

from .config import is_strict
from .core.errors import CivilRangeError
from .core.log import get_logger
from .core.normalize import n_sec
from .core.time import ymd_ord
from .core.time import yearday as _yearday
from .core.types import DIFF_MIN, EPOCH_YEAR, DiffT, Fields, YearT, in_range
from .engines.granularity import Day, Hour, Minute, Month, Second, Year
from .engines.interfaces import GranularityProtocol
from .engines.weekday import Weekday, next_weekday as _next_weekday, prev_weekday as _prev_weekday
from .engines.weekday import weekday as _weekday

log = get_logger(__name__)

C = TypeVar("C", bound="CivilTime")


def _range_error(what: str, value: int) -> CivilRangeError:
    log.debug("range_exceeded", what=what, value=value)
    return CivilRangeError(f"{what} {value} is outside the supported 64-bit range")


class CivilTime:
    """
    Base of the six aligned civil-time types. Not instantiated directly.
    """
    __slots__ = ("_f",)

    granularity: ClassVar[Type[GranularityProtocol]]
    _arity: ClassVar[int]

    _f: Fields

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def _from_fields(cls: Type[C], f: Fields) -> C:
        self = object.__new__(cls)
        object.__setattr__(self, "_f", cls.granularity.align(f))
        return self

    @classmethod
    def _build(cls: Type[C], y: Any, m: Any, d: Any, hh: Any, mm: Any, ss: Any) -> C:
        args = tuple(operator.index(v) for v in (y, m, d, hh, mm, ss))
        strict = is_strict()
        if strict:
            for v in args:
                if not in_range(v):
                    raise _range_error("field", v)
        out = cls._from_fields(n_sec(*args))
        if strict and not in_range(out._f.y):
            raise _range_error("year", out._f.y)
        return out

    @classmethod
    def from_civil(cls: Type[C], other: "CivilTime") -> C:
        """Realign another civil-time value to this class. No renormalization occurs."""
        return cls._from_fields(other._f)

    @classmethod
    def from_date(cls: Type[C], d: date) -> C:
        """Build from a ``datetime.date`` or (naive or aware) ``datetime.datetime``."""
        if isinstance(d, datetime):
            return cls._from_fields(n_sec(d.year, d.month, d.day, d.hour, d.minute, d.second))
        return cls._from_fields(n_sec(d.year, d.month, d.day, 0, 0, 0))

    from_datetime = from_date

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self)._from_fields, (self._f,))

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def fields(self) -> Fields:
        return self._f

    @property
    def year(self) -> YearT:
        return self._f.y

    @property
    def month(self) -> int:
        """Month in [1, 12]."""
        return self._f.m

    @property
    def day(self) -> int:
        """Day in [1, 31]."""
        return self._f.d

    @property
    def hour(self) -> int:
        return self._f.hh

    @property
    def minute(self) -> int:
        return self._f.mm

    @property
    def second(self) -> int:
        return self._f.ss

    def weekday(self) -> Weekday:
        return _weekday(self._f)

    def yearday(self) -> int:
        """Day of year in [1, 366]."""
        return _yearday(self._f.y, self._f.m, self._f.d)

    def days_since_epoch(self) -> int:
        """Signed day count from 1970-01-01 to this value's date."""
        return ymd_ord(self._f.y, self._f.m, self._f.d)

    def next_weekday(self, wd: Weekday) -> "CivilDay":
        """The CivilDay strictly after this date that falls on ``wd``."""
        return CivilDay._from_fields(_next_weekday(self._f, wd))

    def prev_weekday(self, wd: Weekday) -> "CivilDay":
        """The CivilDay strictly before this date that falls on ``wd``."""
        return CivilDay._from_fields(_prev_weekday(self._f, wd))

    def to_date(self) -> date:
        f = self._f
        if not MINYEAR <= f.y <= MAXYEAR:
            raise CivilRangeError(f"year {f.y} is outside datetime's range [{MINYEAR}, {MAXYEAR}]")
        return date(f.y, f.m, f.d)

    def to_datetime(self) -> datetime:
        """Naive datetime with the same six fields."""
        f = self._f
        if not MINYEAR <= f.y <= MAXYEAR:
            raise CivilRangeError(f"year {f.y} is outside datetime's range [{MINYEAR}, {MAXYEAR}]")
        return datetime(f.y, f.m, f.d, f.hh, f.mm, f.ss)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def _step(self: C, n: DiffT) -> C:
        out = self._from_fields(self.granularity.step(self._f, n))
        if is_strict() and not in_range(out._f.y):
            raise _range_error("year", out._f.y)
        return out

    def __add__(self: C, n: int) -> C:
        if not isinstance(n, int):
            return NotImplemented
        if is_strict() and not in_range(n):
            raise _range_error("operand", n)
        return self._step(n)

    @overload
    def __sub__(self: C, other: int) -> C: ...

    @overload
    def __sub__(self: C, other: C) -> int: ...

    def __sub__(self, other):
        if isinstance(other, int):
            if is_strict() and not in_range(other):
                raise _range_error("operand", other)
            if other != DIFF_MIN:
                return self._step(-other)
            # -DIFF_MIN is not representable; take one step less, then one more.
            return self._step(-(other + 1))._step(1)
        if type(other) is type(self):
            n = self.granularity.difference(self._f, other._f)
            if is_strict() and not in_range(n):
                raise _range_error("difference", n)
            return n
        return NotImplemented

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CivilTime):
            return self._f == other._f
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, CivilTime):
            return self._f != other._f
        return NotImplemented

    def __lt__(self, other: "CivilTime") -> bool:
        if isinstance(other, CivilTime):
            return self._f < other._f
        return NotImplemented

    def __le__(self, other: "CivilTime") -> bool:
        if isinstance(other, CivilTime):
            return self._f <= other._f
        return NotImplemented

    def __gt__(self, other: "CivilTime") -> bool:
        if isinstance(other, CivilTime):
            return self._f > other._f
        return NotImplemented

    def __ge__(self, other: "CivilTime") -> bool:
        if isinstance(other, CivilTime):
            return self._f >= other._f
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._f)

    # ---------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------

    def __repr__(self) -> str:
        args = ", ".join(str(v) for v in self._f.as_tuple()[: self._arity])
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        f = self._f
        out = f"{f.y}"
        if self._arity >= 2:
            out += f"-{f.m:02d}"
        if self._arity >= 3:
            out += f"-{f.d:02d}"
        if self._arity >= 4:
            out += f"T{f.hh:02d}"
        if self._arity >= 5:
            out += f":{f.mm:02d}"
        if self._arity >= 6:
            out += f":{f.ss:02d}"
        return out


class CivilSecond(CivilTime):
    """Civil time aligned to the second, e.g. 2015-11-22T12:34:56."""
    __slots__ = ()
    granularity = Second
    _arity = 6
    MIN: ClassVar["CivilSecond"]
    MAX: ClassVar["CivilSecond"]

    def __init__(self, y: YearT = EPOCH_YEAR, m: DiffT = 1, d: DiffT = 1, hh: DiffT = 0, mm: DiffT = 0, ss: DiffT = 0) -> None:
        object.__setattr__(self, "_f", self._build(y, m, d, hh, mm, ss)._f)


class CivilMinute(CivilTime):
    """Civil time aligned to the minute, e.g. 2015-11-22T12:34."""
    __slots__ = ()
    granularity = Minute
    _arity = 5
    MIN: ClassVar["CivilMinute"]
    MAX: ClassVar["CivilMinute"]

    def __init__(self, y: YearT = EPOCH_YEAR, m: DiffT = 1, d: DiffT = 1, hh: DiffT = 0, mm: DiffT = 0) -> None:
        object.__setattr__(self, "_f", self._build(y, m, d, hh, mm, 0)._f)


class CivilHour(CivilTime):
    """Civil time aligned to the hour, e.g. 2015-11-22T12."""
    __slots__ = ()
    granularity = Hour
    _arity = 4
    MIN: ClassVar["CivilHour"]
    MAX: ClassVar["CivilHour"]

    def __init__(self, y: YearT = EPOCH_YEAR, m: DiffT = 1, d: DiffT = 1, hh: DiffT = 0) -> None:
        object.__setattr__(self, "_f", self._build(y, m, d, hh, 0, 0)._f)


class CivilDay(CivilTime):
    """Civil time aligned to the day, e.g. 2015-11-22."""
    __slots__ = ()
    granularity = Day
    _arity = 3
    MIN: ClassVar["CivilDay"]
    MAX: ClassVar["CivilDay"]

    def __init__(self, y: YearT = EPOCH_YEAR, m: DiffT = 1, d: DiffT = 1) -> None:
        object.__setattr__(self, "_f", self._build(y, m, d, 0, 0, 0)._f)


class CivilMonth(CivilTime):
    """Civil time aligned to the month, e.g. 2015-11."""
    __slots__ = ()
    granularity = Month
    _arity = 2
    MIN: ClassVar["CivilMonth"]
    MAX: ClassVar["CivilMonth"]

    def __init__(self, y: YearT = EPOCH_YEAR, m: DiffT = 1) -> None:
        object.__setattr__(self, "_f", self._build(y, m, 1, 0, 0, 0)._f)


class CivilYear(CivilTime):
    """Civil time aligned to the year, e.g. 2015."""
    __slots__ = ()
    granularity = Year
    _arity = 1
    MIN: ClassVar["CivilYear"]
    MAX: ClassVar["CivilYear"]

    def __init__(self, y: YearT = EPOCH_YEAR) -> None:
        object.__setattr__(self, "_f", self._build(y, 1, 1, 0, 0, 0)._f)


CIVIL_TYPES: tuple[Type[CivilTime], ...] = (CivilSecond, CivilMinute, CivilHour, CivilDay, CivilMonth, CivilYear)
CIVIL_TYPE_BY_NAME = {cls.granularity.name: cls for cls in CIVIL_TYPES}

for _cls in CIVIL_TYPES:
    _cls.MIN = _cls._from_fields(n_sec(DIFF_MIN, 1, 1, 0, 0, 0))
    _cls.MAX = _cls._from_fields(n_sec(-(DIFF_MIN + 1), 12, 31, 23, 59, 59))
del _cls


@dataclass(frozen=True)
class Builder:
    """
    Fluent field setter. Unset fields keep their minimum (the year defaults
    to 1970), and building normalizes exactly like the constructors do.

        Builder().year(2015).month(2).day(3).build(CivilDay)
    """
    y: YearT = EPOCH_YEAR
    m: DiffT = 1
    d: DiffT = 1
    hh: DiffT = 0
    mm: DiffT = 0
    ss: DiffT = 0

    def year(self, y: YearT) -> "Builder":
        return replace(self, y=y)

    def month(self, m: DiffT) -> "Builder":
        return replace(self, m=m)

    def day(self, d: DiffT) -> "Builder":
        return replace(self, d=d)

    def hour(self, hh: DiffT) -> "Builder":
        return replace(self, hh=hh)

    def minute(self, mm: DiffT) -> "Builder":
        return replace(self, mm=mm)

    def second(self, ss: DiffT) -> "Builder":
        return replace(self, ss=ss)

    def build(self, cls: Type[C] = CivilSecond) -> C:  # type: ignore[assignment]
        return cls._build(self.y, self.m, self.d, self.hh, self.mm, self.ss)

    def build_second(self) -> CivilSecond:
        return self.build(CivilSecond)

    def build_minute(self) -> CivilMinute:
        return self.build(CivilMinute)

    def build_hour(self) -> CivilHour:
        return self.build(CivilHour)

    def build_day(self) -> CivilDay:
        return self.build(CivilDay)

    def build_month(self) -> CivilMonth:
        return self.build(CivilMonth)

    def build_year(self) -> CivilYear:
        return self.build(CivilYear)
