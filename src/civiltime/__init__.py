"""civiltime public API.

Keep this surface small: users should mostly interact with the six value
types, Weekday and Builder re-exported here.
"""

from .civil import (
    CivilTime,
    CivilSecond,
    CivilMinute,
    CivilHour,
    CivilDay,
    CivilMonth,
    CivilYear,
    Builder,
)
from .core.errors import CivilTimeError, CivilRangeError, ConfigError
from .core.time import is_leap_year, days_per_month as days_in_month, days_in_year
from .core.types import DIFF_MAX, DIFF_MIN, YEAR_MAX, YEAR_MIN
from .engines.weekday import Weekday

__all__ = [
    "CivilTime",
    "CivilSecond",
    "CivilMinute",
    "CivilHour",
    "CivilDay",
    "CivilMonth",
    "CivilYear",
    "Builder",
    "Weekday",
    "CivilTimeError",
    "CivilRangeError",
    "ConfigError",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "DIFF_MIN",
    "DIFF_MAX",
    "YEAR_MIN",
    "YEAR_MAX",
]
