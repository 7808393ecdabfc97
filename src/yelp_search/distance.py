"""Units of length and distances.

The API measures distances in meters, while people usually think in miles or
kilometers. A `Distance` keeps the unit it was created with and converts on demand,
so distances expressed in different units can be compared directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class UnitOfLength(Enum):
    """Supported units, each valued by its length in meters."""

    METERS = 1.0
    MILES = 1609.344
    KILOMETERS = 1000.0

    @property
    def factor(self) -> float:
        """Number of meters in one unit."""
        return self.value


@dataclass(frozen=True)
class Distance:
    """A magnitude expressed in a unit of length.

    Any finite value is accepted, negative ones included. Range checks such as the
    maximum search radius belong to the caller.

    Attributes:
        value: The magnitude of the distance.
        unit: The unit `value` is expressed in.
    """

    value: float
    unit: UnitOfLength

    # Biggest radius, in meters, the search endpoint accepts
    _LARGEST_IN_METERS = 40000.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError(f"Distance value must be finite, got {self.value}")
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def in_meters(cls, meters: float) -> Distance:
        return cls(meters, UnitOfLength.METERS)

    @classmethod
    def in_miles(cls, miles: float) -> Distance:
        return cls(miles, UnitOfLength.MILES)

    @classmethod
    def in_kilometers(cls, kilometers: float) -> Distance:
        return cls(kilometers, UnitOfLength.KILOMETERS)

    @classmethod
    def largest(cls) -> Distance:
        """Return the maximum search radius allowed by the API (40000 meters)."""
        return cls.in_meters(cls._LARGEST_IN_METERS)

    def convert_to(self, unit: UnitOfLength) -> Distance:
        """Return this distance expressed in `unit`.

        Args:
            unit: The target unit of length.

        Returns:
            A new Distance; the current one is left untouched.
        """
        meters = self.value * self.unit.factor
        return Distance(meters / unit.factor, unit)

    def bigger_than(self, other: Distance) -> bool:
        """Check whether this distance is strictly longer than `other`, in any unit."""
        return self.value > other.convert_to(self.unit).value

    def smaller_than(self, other: Distance) -> bool:
        """Check whether this distance is strictly shorter than `other`, in any unit."""
        return self.value < other.convert_to(self.unit).value

    def __str__(self) -> str:
        # e.g. "3.56 kilometers"
        return f"{self.value:.2f} {self.unit.name.lower()}"
