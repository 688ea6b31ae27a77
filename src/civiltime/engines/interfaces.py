"""
civiltime.engines.interfaces
----------------------------
Defines the boundary between the civil-time value types and the
granularity strategies that give each of them its arithmetic.

A strategy is stateless: it is never instantiated per value, and the
value types bind one strategy class each at class-definition time.
"""

from __future__ import annotations

from typing import Protocol

from ..core.types import DiffT, Fields


class GranularityProtocol(Protocol):
    """
    Arithmetic on one civil field. All three operations are pure and total
    over normalized Fields.
    """
    name: str

    @staticmethod
    def step(f: Fields, n: DiffT) -> Fields:
        """Increments the aligned field by ``n`` (any sign), renormalizing."""
        ...

    @staticmethod
    def difference(f1: Fields, f2: Fields) -> DiffT:
        """
        Returns f1 - f2 in units of the aligned field. Both arguments must
        already be aligned to this granularity.
        """
        ...

    @staticmethod
    def align(f: Fields) -> Fields:
        """Pins every field finer than this granularity to its minimum."""
        ...
