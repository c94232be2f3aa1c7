# -*- coding: utf-8 -*-
"""
Populate the foods table from the built-in catalog.

Safe to run repeatedly: names that already exist are skipped.

Usage:
    python -m healthvorsv.foods.seed
    python -m healthvorsv.foods.seed --db-path /path/to/healthvorsv.db
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from pathlib import Path
from typing import Iterable

from ..app_db import db_conn, init_app_db
from ..config import settings
from .catalog import CATALOG, CatalogFood

logger = logging.getLogger(__name__)


def seed_foods(conn: sqlite3.Connection, catalog: Iterable[CatalogFood] = CATALOG) -> int:
    """Insert catalog foods missing from ``foods``; returns how many were inserted."""
    inserted = 0
    for food in catalog:
        cur = conn.execute(
            """
            INSERT OR IGNORE INTO foods (name, category, unit, calories_per_100g, protein_g, carbs_g, fats_g)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                food.name,
                food.category,
                food.unit,
                food.calories_per_100g,
                food.protein_g,
                food.carbs_g,
                food.fats_g,
            ),
        )
        inserted += cur.rowcount
    return inserted


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the HealthVorsv food catalog")
    parser.add_argument(
        "--db-path",
        type=str,
        default=None,
        help="SQLite database path (default: HEALTHVORSV_DB_PATH)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    db_path = Path(args.db_path).expanduser() if args.db_path else settings.app_db_path
    init_app_db(db_path)
    with db_conn(db_path) as conn:
        inserted = seed_foods(conn)

    logger.info("Seeding complete. Inserted %s new food items into %s", inserted, db_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
