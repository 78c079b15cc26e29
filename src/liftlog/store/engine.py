"""Database file setup and initialization."""

import json
from pathlib import Path

import aiosqlite
import structlog

from ..config import get_settings
from ..models.exercises import COMMON_EXERCISES
from .schema import INDEXES, TABLES

logger = structlog.get_logger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


async def init_db(db_path: Path | None = None) -> None:
    """Create every table and index if missing."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        for spec in TABLES.values():
            await db.execute(spec.ddl)
        for statement in INDEXES:
            await db.execute(statement)
        await db.commit()

    logger.info("database_initialized", path=str(db_path))


async def seed_exercises(db_path: Path | None = None) -> int:
    """Seed the catalog with the common exercise library.

    Returns the number of exercises that were newly added.
    """
    if db_path is None:
        db_path = get_db_path()

    added = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in COMMON_EXERCISES:
            data = exercise.to_dict()
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises
                (name, description, muscle_group, equipment, difficulty, instructions, is_public)
                VALUES (?, ?, ?, ?, ?, ?, 1)
                """,
                (
                    data["name"],
                    data["description"],
                    data["muscle_group"],
                    data["equipment"],
                    data["difficulty"],
                    json.dumps(data["instructions"]),
                ),
            )
            added += cursor.rowcount
        await db.commit()

    logger.info("exercises_seeded", added=added)
    return added
