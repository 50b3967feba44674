"""Tests for the CSV ingestion utilities in `data/ingest_ingredients.py`."""
from pathlib import Path

from data.ingest_ingredients import parse_ingredients_csv, seed_ingredients_from_csv
from database import models

CSV_PATH = str(Path(__file__).resolve().parents[1] / "data" / "fixtures" / "ingredients.csv")


def test_parse_ingredients_csv_skips_invalid_and_duplicate_rows():
    rows = parse_ingredients_csv(CSV_PATH)
    names = [r["name"] for r in rows]
    assert names == ["Banana", "Almonds", "Spinach", "Cheddar cheese", "Lentils", "Avocado", "Quinoa"]


def test_parse_ingredients_csv_has_expected_keys():
    first = parse_ingredients_csv(CSV_PATH)[0]
    assert set(first) == {"name", "unit_name", "unit_grams", "energy_kcal", "protein", "carbs", "fat"}
    assert first["unit_grams"] == 118.0 and first["energy_kcal"] == 89.0


def test_seed_ingredients_is_idempotent(session):
    added = seed_ingredients_from_csv(CSV_PATH, session=session)
    after = session.query(models.Ingredient).count()
    assert added == 7 and after == 7

    # Run again - should not duplicate
    assert seed_ingredients_from_csv(CSV_PATH, session=session) == 0
    assert session.query(models.Ingredient).count() == after


def test_seed_ingredients_skips_names_already_in_catalog(seeded_session):
    before = seeded_session.query(models.Ingredient).count()
    added = seed_ingredients_from_csv(CSV_PATH, session=seeded_session)
    assert seeded_session.query(models.Ingredient).count() == before + added == before + 7
