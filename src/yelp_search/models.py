"""Models shared by the search criteria and the API client.

This module defines the geographic point used to center a search and the pricing
taxonomy used by the API both as a search filter and in business payloads.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A geographic point.

    Attributes:
        latitude: Latitude in degrees (-90.0 to 90.0).
        longitude: Longitude in degrees (-180.0 to 180.0).
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude of the point.")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude of the point.")


class PricingLevel(Enum):
    """Price tiers, from 1 (inexpensive) to 4 (most expensive).

    The API filters by the numeric code and reports a business' price with dollar
    signs, one per tier.
    """

    INEXPENSIVE = 1
    MODERATE = 2
    PRICEY = 3
    ULTRA_HIGH_END = 4

    @property
    def code(self) -> str:
        """Token sent in the `price` query parameter."""
        return str(self.value)

    @property
    def symbol(self) -> str:
        """Dollar-sign representation, e.g. "$$" for MODERATE."""
        return "$" * self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> PricingLevel:
        """Parse the dollar-sign representation found in business payloads.

        Args:
            symbol: A string of one to four dollar signs.

        Returns:
            The matching pricing level.

        Raises:
            ValueError: If `symbol` is not made of one to four dollar signs.
        """
        stripped = symbol.strip()
        if not stripped or set(stripped) != {"$"}:
            raise ValueError(f"Unknown pricing level: {symbol!r}")
        return cls(len(stripped))
