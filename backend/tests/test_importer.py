import json
from pathlib import Path

import pytest

from backend.restaurant_import.config import HOUSTON_CENTER, ImportConfig
from backend.restaurant_import.csv_rows import parse_rows
from backend.restaurant_import.importer import (
    OUTPUT_COLUMNS,
    build_description,
    build_records,
    main,
    run_import,
)

HEADER = "Name,Address,Phone,Hours,Cuisine,Veg,Dishes,Price,Rating,Website,Features"

SAMPLE_CSV = "\n".join(
    [
        HEADER,
        'Udipi Cafe,"5959 Hillcroft Ave, Houston, TX",(713) 334-5400,'
        '"Mon-Thu: 11:30AM-2:30PM & 6:00PM-10:00PM",South Indian,Yes Only,'
        '"Masala Dosa, Idli",$8-15,4.3,udipicafe.com,Family run',
        "Broken,row",
        "Musaafer,5115 Westheimer Rd,,Daily,,No,Kebab,$40-80,oops,musaafer.com,",
        "Pondicheri,2800 Kirby Dr,(713) 522-2022,8:00AM-10:00PM,Indian,yes,"
        "Bowl,$25-30,4.5,pondicheri.com,All-day cafe",
    ]
)


def _config(tmp_path: Path) -> ImportConfig:
    input_path = tmp_path / "restaurants.csv"
    input_path.write_text(SAMPLE_CSV, encoding="utf-8")
    return ImportConfig(
        input_path=input_path,
        output_path=tmp_path / "out" / "restaurants.json",
    )


def test_build_description_vegetarian_suffix():
    assert build_description("Family run", "Yes") == (
        "Family run • Vegetarian options available"
    )
    assert build_description("", "Yes Only") == (
        "Authentic cuisine • Vegetarian options available"
    )
    assert build_description("Family run", "yes") == "Family run"
    assert build_description("", "No") == "Authentic cuisine"


def test_build_records_normalizes_fields():
    records = build_records(parse_rows(SAMPLE_CSV))

    assert [r.id for r in records] == ["1", "3", "4"]

    udipi, musaafer, pondicheri = records
    assert udipi.name == "Udipi Cafe"
    assert udipi.address == "5959 Hillcroft Ave, Houston, TX"
    assert udipi.opening_hours == "11:30"
    assert udipi.closing_hours == "22:00"
    assert udipi.price_range == "$"
    assert udipi.rating == pytest.approx(4.3)
    assert udipi.description == "Family run • Vegetarian options available"

    assert musaafer.cuisine == "Indian"
    assert musaafer.phone == "N/A"
    assert musaafer.rating == pytest.approx(4.0)
    assert musaafer.price_range == "$$$$"
    assert (musaafer.opening_hours, musaafer.closing_hours) == ("09:00", "22:00")
    assert musaafer.description == "Authentic cuisine"

    assert pondicheri.price_range == "$$$"
    assert pondicheri.description == "All-day cafe"


def test_build_records_spreads_coordinates_over_all_data_lines():
    records = build_records(parse_rows(SAMPLE_CSV))

    # four data lines, the first sits at angle 0 and line 4 at three quarters
    assert records[0].latitude == pytest.approx(HOUSTON_CENTER.lat + 0.1)
    assert records[0].longitude == pytest.approx(HOUSTON_CENTER.lng)
    assert records[2].latitude == pytest.approx(HOUSTON_CENTER.lat)
    assert records[2].longitude == pytest.approx(HOUSTON_CENTER.lng - 0.1)


def test_build_records_empty_input():
    assert build_records(parse_rows(HEADER)) == []


def test_run_import_writes_feed(tmp_path: Path):
    cfg = _config(tmp_path)

    records = run_import(config=cfg)

    assert cfg.output_path.is_file(), "JSON feed should be created"
    raw = cfg.output_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    assert list(data) == ["restaurants"]
    assert len(data["restaurants"]) == len(records) == 3
    assert list(data["restaurants"][0]) == OUTPUT_COLUMNS
    assert data["restaurants"][0]["priceRange"] == "$"
    assert "\n  \"restaurants\": [" in raw
    assert "•" in raw


def test_run_import_is_idempotent(tmp_path: Path):
    cfg = _config(tmp_path)

    run_import(config=cfg)
    first = cfg.output_path.read_bytes()
    run_import(config=cfg)

    assert cfg.output_path.read_bytes() == first


def test_run_import_missing_input_writes_nothing(tmp_path: Path):
    cfg = ImportConfig(
        input_path=tmp_path / "missing.csv",
        output_path=tmp_path / "restaurants.json",
    )

    with pytest.raises(FileNotFoundError):
        run_import(config=cfg)
    assert not cfg.output_path.exists()


def test_run_import_bundled_sample(tmp_path: Path):
    cfg = ImportConfig(output_path=tmp_path / "restaurants.json")

    records = run_import(config=cfg)

    # the bundled sample has one truncated row
    assert len(records) == 5
    assert len({r.id for r in records}) == len(records)


def test_run_import_overflowing_rating_keeps_feed_valid_json(tmp_path: Path):
    input_path = tmp_path / "restaurants.csv"
    input_path.write_text(
        f"{HEADER}\nHuge,addr,phone,h,Thai,No,d,$12,1e999,w,f\n", encoding="utf-8"
    )
    cfg = ImportConfig(input_path=input_path, output_path=tmp_path / "restaurants.json")

    run_import(config=cfg)

    raw = cfg.output_path.read_text(encoding="utf-8")
    assert "Infinity" not in raw
    data = json.loads(raw)
    assert data["restaurants"][0]["rating"] == pytest.approx(4.0)


def test_main_reports_count_and_output_path(tmp_path: Path, capsys):
    cfg = _config(tmp_path)

    main(config=cfg)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Successfully imported 3 restaurants from CSV",
        f"Output written to {cfg.output_path}",
    ]
