from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PriceRange = Literal["$", "$$", "$$$", "$$$$"]


class RestaurantRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    address: str
    cuisine: str
    rating: float
    price_range: PriceRange = Field(..., alias="priceRange")
    opening_hours: str = Field(..., alias="openingHours", pattern=r"^\d{2}:\d{2}$")
    closing_hours: str = Field(..., alias="closingHours", pattern=r"^\d{2}:\d{2}$")
    latitude: float
    longitude: float
    phone: str
    description: str


class RestaurantFeed(BaseModel):
    restaurants: list[RestaurantRecord]
