"""
Configuration for the restaurant import script.

Paths are resolved from the package location so the script behaves the same
regardless of the working directory it is launched from.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


# Approximate center of Houston
HOUSTON_CENTER = GeoPoint(lat=29.7604, lng=-95.3698)


@dataclass(frozen=True)
class ImportConfig:
    """
    Configuration for the CSV to JSON restaurant import.
    """

    input_path: Path = _DATA_DIR / "restaurants.csv"
    output_path: Path = _DATA_DIR / "restaurants.json"

    center: GeoPoint = HOUSTON_CENTER
    radius: float = 0.1  # degrees, about 10km

    default_opening: str = "09:00"
    default_closing: str = "22:00"
    default_price_range: str = "$$"
    default_rating: float = 4.0
    default_cuisine: str = "Indian"
    default_phone: str = "N/A"
    default_description: str = "Authentic cuisine"

    vegetarian_suffix: str = " • Vegetarian options available"
    vegetarian_flags: tuple[str, ...] = ("Yes", "Yes Only")

    json_indent: int = 2


DEFAULT_IMPORT_CONFIG = ImportConfig()
