"""Utilities to ingest an ingredient catalog CSV into the database.

This module provides:
- parse_ingredients_csv(csv_path): returns a list of normalized ingredient dicts
- seed_ingredients_from_csv(csv_path, session): idempotently seeds the catalog

Expected columns: `name`, `unit_name`, `unit_grams`, `energy_kcal`, `protein`,
`carbs`, `fat` (nutrients per 100 g). Rows without a name, with a non-numeric
value, or whose values break the catalog constraints are skipped and logged.
"""
from __future__ import annotations

from typing import List, Dict
import math
import pandas as pd

from core.logger import get_logger
from database import models

logger = get_logger("data.ingest_ingredients")

NUMERIC_COLUMNS = ("unit_grams", "energy_kcal", "protein", "carbs", "fat")


def _to_float(value) -> float | None:
    """Return `value` as a float, or None when empty or not a number."""
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _is_valid(item: Dict) -> bool:
    if item["unit_grams"] <= 0 or item["energy_kcal"] < 0:
        return False
    macros = (item["protein"], item["carbs"], item["fat"])
    return all(0 <= m <= 100 for m in macros) and sum(macros) <= 100


def parse_ingredients_csv(csv_path: str) -> List[Dict]:
    """Parse the CSV and return a list of normalized ingredient dictionaries.

    Args:
        csv_path: Path to the catalog CSV file.

    Returns:
        List of dicts with keys: name, unit_name, unit_grams, energy_kcal,
        protein, carbs, fat. Duplicate names keep the first row.
    """
    logger.info("Parsing ingredients CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8", dtype=str, keep_default_na=False)
    df = df.rename(columns=lambda s: s.strip())

    ingredients = []
    seen = set()
    for line, row in df.iterrows():
        name = str(row.get("name", "")).strip()
        unit_name = str(row.get("unit_name", "")).strip()
        if not name or not unit_name:
            logger.debug("Skipping row %s: missing name or unit", line)
            continue

        item = {"name": name, "unit_name": unit_name}
        for column in NUMERIC_COLUMNS:
            item[column] = _to_float(row.get(column))
        if any(item[c] is None for c in NUMERIC_COLUMNS) or not _is_valid(item):
            logger.debug("Skipping row %s (%s): invalid values", line, name)
            continue

        if name.lower() in seen:
            continue
        seen.add(name.lower())
        ingredients.append(item)

    logger.info("Parsed %s ingredients from CSV", len(ingredients))
    return ingredients


def seed_ingredients_from_csv(csv_path: str, session=None) -> int:
    """Idempotently seed the catalog from the CSV file.

    If `session` is not supplied, a `WriteSessionLocal` session is used.
    Existing ingredients are matched by name and skipped.

    Returns:
        Number of ingredients added.
    """
    close_session = False
    if session is None:
        from database.database import WriteSessionLocal
        session = WriteSessionLocal()
        close_session = True
    try:
        added = 0
        for item in parse_ingredients_csv(csv_path):
            existing = session.query(models.Ingredient).filter(models.Ingredient.name == item["name"]).first()
            if existing:
                continue
            session.add(models.Ingredient(**item))
            added += 1
        if added:
            session.commit()
        logger.info("Seeded %s new ingredients into DB", added)
        return added
    finally:
        if close_session:
            session.close()


if __name__ == "__main__":
    import argparse

    p = argparse.ArgumentParser("Seed the ingredient catalog from CSV into the DB")
    p.add_argument("csv_path", nargs="?", default="data/fixtures/ingredients.csv")
    args = p.parse_args()
    added = seed_ingredients_from_csv(args.csv_path)
    print(f"Done, {added} ingredient(s) added")
