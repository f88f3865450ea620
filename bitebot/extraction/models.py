from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from pydantic import BaseModel, Field

ADDRESS_PLACEHOLDER = "Address not available"


class PriceLevel(str, Enum):
    budget = "Budget"
    moderate = "Moderate"
    expensive = "Expensive"
    luxury = "Luxury"

    @property
    def symbol(self) -> str:
        return "$" * (_PRICE_ORDER.index(self) + 1)

    @classmethod
    def from_count(cls, count: int | None) -> PriceLevel:
        """Map a count of ``$`` symbols to a level; out-of-range counts are Moderate."""
        if count is None or not 1 <= count <= len(_PRICE_ORDER):
            return cls.moderate
        return _PRICE_ORDER[count - 1]


_PRICE_ORDER = [PriceLevel.budget, PriceLevel.moderate, PriceLevel.expensive, PriceLevel.luxury]


class ExtractedEntity(BaseModel):
    name: str = Field(..., min_length=1)
    rating: float
    address: str = ADDRESS_PLACEHOLDER
    link: str = ""
    price_level: PriceLevel = PriceLevel.moderate


@dataclass
class RawFieldBuffer:
    """Fields collected for the restaurant currently being scanned."""

    name: str | None = None
    link: str | None = None
    address: str | None = None
    rating: float | None = None
    price_level: int | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def finalize(self) -> ExtractedEntity | None:
        """Validate and default the buffer. Returns ``None`` when name or rating is missing."""
        if not self.name or self.rating is None:
            return None
        return ExtractedEntity(
            name=self.name,
            rating=self.rating,
            address=self.address if self.address is not None else ADDRESS_PLACEHOLDER,
            link=self.link if self.link is not None else "",
            price_level=PriceLevel.from_count(self.price_level),
        )
