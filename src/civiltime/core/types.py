from __future__ import annotations
from dataclasses import dataclass

# Years and scalar deltas are documented to span the signed 64-bit range.
# Python ints never wrap; see civiltime.config for the range policy.
YearT = int
DiffT = int

DIFF_MIN: DiffT = -(2**63)
DIFF_MAX: DiffT = 2**63 - 1
YEAR_MIN: YearT = DIFF_MIN
YEAR_MAX: YearT = DIFF_MAX

EPOCH_YEAR: YearT = 1970


@dataclass(frozen=True, order=True)
class Fields:
    """
    Normalized civil-time fields Y-M-D hh:mm:ss.

    Only the normalizer builds these, so every instance is a valid
    Gregorian point: m in [1,12], d in [1, days in (y, m)],
    hh in [0,23], mm and ss in [0,59]. Ordering is lexicographic
    over the six fields.
    """
    y: YearT
    m: int
    d: int
    hh: int = 0
    mm: int = 0
    ss: int = 0

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return (self.y, self.m, self.d, self.hh, self.mm, self.ss)


def in_range(v: int) -> bool:
    return DIFF_MIN <= v <= DIFF_MAX
