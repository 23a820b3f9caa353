# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""Decoded cell values.

A row is a fixed-width sequence holding one of these per schema column.
"""

import math
from dataclasses import dataclass

__all__ = ["NumericValue", "NominalValue", "Missing", "MISSING"]


@dataclass(frozen=True, eq=False)
class NumericValue:
    """Numeric cell. A nan cell equals any other nan cell."""

    value: float

    def __eq__(self, other):
        if not isinstance(other, NumericValue):
            return NotImplemented
        if math.isnan(self.value):
            return math.isnan(other.value)
        return self.value == other.value

    def __hash__(self):
        if math.isnan(self.value):
            return hash("nan")
        return hash(self.value)


@dataclass(frozen=True)
class NominalValue:
    """Nominal cell, stored as the value's code in its attribute."""

    code: int


class Missing:
    """The ``?`` sentinel. Use the module level ``MISSING`` instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __reduce__(self):
        return (Missing, ())


MISSING = Missing()
