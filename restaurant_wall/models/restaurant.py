"""Data models for restaurant recommendations."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Cuisine(str, Enum):
    """Cuisine a restaurant can be listed under."""

    ITALIAN = "Italian"
    JAPANESE = "Japanese"
    MEXICAN = "Mexican"
    INDIAN = "Indian"
    AMERICAN = "American"
    FRENCH = "French"
    THAI = "Thai"
    OTHER = "Other"


class PriceRange(str, Enum):
    """Price tier, cheapest first."""

    BUDGET = "€"
    MODERATE = "€€"
    EXPENSIVE = "€€€"
    LUXURY = "€€€€"

    @property
    def tier(self) -> int:
        """Ordinal rank used for sorting (1 = cheapest)."""
        return _PRICE_TIERS[self]

    @classmethod
    def from_tier(cls, tier: int) -> "PriceRange":
        """Look up a price range by its ordinal rank.

        Raises:
            ValueError: If the tier is not between 1 and 4
        """
        for price_range, rank in _PRICE_TIERS.items():
            if rank == tier:
                return price_range
        msg = f"Price tier must be between 1 and {len(_PRICE_TIERS)}, got {tier}"
        raise ValueError(msg)


_PRICE_TIERS = {
    PriceRange.BUDGET: 1,
    PriceRange.MODERATE: 2,
    PriceRange.EXPENSIVE: 3,
    PriceRange.LUXURY: 4,
}


class Location(BaseModel):
    """Map placement of a restaurant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: float = Field(..., alias="lat", description="Latitude in degrees")
    longitude: float = Field(..., alias="lng", description="Longitude in degrees")
    address: str = Field(..., description="Street address")


class RestaurantDraft(BaseModel):
    """A recommendation as entered by a user, before it is submitted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Restaurant name")
    cuisine: Cuisine = Field(..., description="Type of cuisine")
    description: str = Field(..., description="Why it is worth a visit")
    price_range: PriceRange = Field(
        ..., alias="priceRange", description="Price tier symbol"
    )
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    recommended_by: str = Field(
        ..., alias="recommendedBy", description="Who recommended it"
    )
    location: Location = Field(..., description="Where it is")


class Restaurant(RestaurantDraft):
    """A submitted recommendation with identity and creation time."""

    id: str = Field(..., description="Unique restaurant identifier")
    timestamp: int = Field(
        ..., description="Creation time in milliseconds since the epoch"
    )

    @property
    def created_at(self) -> datetime:
        """Creation time as a local datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000)

    def to_payload(self) -> dict:
        """Serialize using the API's field names."""
        return self.model_dump(mode="json", by_alias=True)


restaurant_list_adapter = TypeAdapter(list[Restaurant])
