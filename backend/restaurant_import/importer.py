"""
Convert the restaurant listings CSV into the JSON feed used by the front-end.

Usage:
    python -m backend.restaurant_import.importer
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pandas as pd

from .config import DEFAULT_IMPORT_CONFIG, ImportConfig
from .csv_rows import RAW_COLUMNS, ParsedCsv, parse_rows, read_csv_text
from .models import RestaurantFeed, RestaurantRecord
from .normalizers import (
    convert_price_range,
    generate_coordinates,
    parse_operating_hours,
    parse_rating,
)

OUTPUT_COLUMNS: List[str] = [
    "id",
    "name",
    "address",
    "cuisine",
    "rating",
    "priceRange",
    "openingHours",
    "closingHours",
    "latitude",
    "longitude",
    "phone",
    "description",
]


def build_description(
    special_features: str,
    vegetarian_options: str,
    config: ImportConfig = DEFAULT_IMPORT_CONFIG,
) -> str:
    description = special_features or config.default_description
    if vegetarian_options in config.vegetarian_flags:
        description += config.vegetarian_suffix
    return description


def _to_frame(parsed: ParsedCsv) -> pd.DataFrame:
    df = pd.DataFrame([list(row.fields) for row in parsed.rows], columns=RAW_COLUMNS)
    df.insert(0, "line_number", [row.line_number for row in parsed.rows])
    return df


def build_records(
    parsed: ParsedCsv, config: ImportConfig = DEFAULT_IMPORT_CONFIG
) -> list[RestaurantRecord]:
    """
    Turn parsed CSV rows into output records, one per row, in input order.

    The record id is the row's line number, and coordinates are spread over
    every data line including skipped ones.
    """
    df = _to_frame(parsed)

    hours = df["operating_hours"].apply(
        lambda s: parse_operating_hours(
            s,
            default_opening=config.default_opening,
            default_closing=config.default_closing,
        )
    )
    coords = df["line_number"].apply(
        lambda n: generate_coordinates(
            n - 1, parsed.total, center=config.center, radius=config.radius
        )
    )

    canonical = pd.DataFrame(index=df.index)
    canonical["id"] = df["line_number"].apply(str)
    canonical["name"] = df["name"]
    canonical["address"] = df["address"]
    canonical["cuisine"] = df["cuisine"].apply(lambda s: s or config.default_cuisine)
    canonical["rating"] = df["rating"].apply(
        lambda s: parse_rating(s, default=config.default_rating)
    )
    canonical["priceRange"] = df["price_range"].apply(
        lambda s: convert_price_range(s, default=config.default_price_range)
    )
    canonical["openingHours"] = hours.apply(lambda h: h.opening)
    canonical["closingHours"] = hours.apply(lambda h: h.closing)
    canonical["latitude"] = coords.apply(lambda c: c.latitude)
    canonical["longitude"] = coords.apply(lambda c: c.longitude)
    canonical["phone"] = df["phone"].apply(lambda s: s or config.default_phone)
    canonical["description"] = [
        build_description(features, veg, config)
        for features, veg in zip(df["special_features"], df["vegetarian_options"])
    ]

    canonical = canonical[OUTPUT_COLUMNS]
    return [
        RestaurantRecord.model_validate(row)
        for row in canonical.to_dict(orient="records")
    ]


def write_feed(
    records: list[RestaurantRecord], output_path: Path, indent: int = 2
) -> Path:
    """Overwrite ``output_path`` with ``{"restaurants": [...]}``."""
    feed = RestaurantFeed(restaurants=records)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(
            feed.model_dump(by_alias=True),
            indent=indent,
            ensure_ascii=False,
            allow_nan=False,
        ),
        encoding="utf-8",
    )
    return output_path


def run_import(config: ImportConfig = DEFAULT_IMPORT_CONFIG) -> list[RestaurantRecord]:
    """
    Execute the import.

    Steps:
    - Read the CSV (a missing file raises and nothing is written).
    - Parse rows, skipping ones with too few fields.
    - Normalize each row into a RestaurantRecord.
    - Write the JSON feed to the configured output path.
    """
    text = read_csv_text(config.input_path)
    parsed = parse_rows(text)
    records = build_records(parsed, config)
    write_feed(records, config.output_path, indent=config.json_indent)
    return records


def main(config: ImportConfig = DEFAULT_IMPORT_CONFIG) -> None:
    imported = run_import(config)
    print(f"Successfully imported {len(imported)} restaurants from CSV")
    print(f"Output written to {config.output_path}")


if __name__ == "__main__":
    main()
