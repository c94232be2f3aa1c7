# -*- coding: utf-8 -*-
"""App database — SQLite helpers.

One connection per unit of work; WAL journal plus a busy timeout so concurrent
writers wait instead of failing with "database is locked".
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(
        str(db_path),
        check_same_thread=False,
        timeout=settings.busy_timeout_ms / 1000.0,
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute("PRAGMA journal_mode = WAL;")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                username TEXT,
                password_hash TEXT NOT NULL,
                height_cm REAL,
                calorie_goal REAL NOT NULL DEFAULT 2000,
                protein_goal REAL NOT NULL DEFAULT 120,
                carbs_goal REAL NOT NULL DEFAULT 250,
                fats_goal REAL NOT NULL DEFAULT 60,
                water_goal_ml INTEGER NOT NULL DEFAULT 3000,
                created_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS foods (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                category TEXT,
                unit TEXT NOT NULL DEFAULT '100g',
                calories_per_100g REAL CHECK (calories_per_100g IS NULL OR calories_per_100g >= 0),
                protein_g REAL CHECK (protein_g IS NULL OR protein_g >= 0),
                carbs_g REAL CHECK (carbs_g IS NULL OR carbs_g >= 0),
                fats_g REAL CHECK (fats_g IS NULL OR fats_g >= 0)
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS food_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                food_id INTEGER NOT NULL,
                grams INTEGER NOT NULL CHECK (grams > 0),
                timestamp TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE,
                FOREIGN KEY(food_id) REFERENCES foods(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_food_logs_user_timestamp ON food_logs(user_id, timestamp DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS water_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                amount_ml INTEGER NOT NULL CHECK (amount_ml > 0),
                timestamp TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_water_logs_user_timestamp ON water_logs(user_id, timestamp DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS weight_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                weight_kg REAL NOT NULL CHECK (weight_kg > 0),
                timestamp TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_weight_logs_user_timestamp ON weight_logs(user_id, timestamp DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                body_part TEXT NOT NULL,
                description TEXT
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS workout_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                workout_id INTEGER NOT NULL,
                reps INTEGER,
                weight_kg REAL,
                duration_sec INTEGER,
                timestamp TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE,
                FOREIGN KEY(workout_id) REFERENCES workouts(id) ON DELETE CASCADE
            );
            """
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("Database initialized at %s", db_path)


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
