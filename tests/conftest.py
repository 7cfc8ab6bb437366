"""
Общие фикстуры: БД в памяти со схемой истории и газеттира.
"""

import json
from datetime import datetime, timedelta

import aiosqlite
import pytest
import pytest_asyncio

from nlu.models import HistoricalContextRecord, User


SCHEMA = [
    """
    CREATE TABLE inputs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        objects TEXT NOT NULL DEFAULT '[]',
        actors TEXT NOT NULL DEFAULT '[]',
        times TEXT NOT NULL DEFAULT '[]',
        places TEXT NOT NULL DEFAULT '[]',
        created_at TIMESTAMP NOT NULL
    )
    """,
    """
    CREATE TABLE cities (
        name TEXT NOT NULL,
        countrycode TEXT NOT NULL
    )
    """,
]

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


async def insert_turn(conn: aiosqlite.Connection, record: HistoricalContextRecord):
    await conn.execute(
        """
        INSERT INTO inputs (user_id, objects, actors, times, places, created_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (
            record.user_id,
            json.dumps(record.objects),
            json.dumps(record.actors),
            json.dumps(record.times),
            json.dumps(record.places),
            record.created_at.isoformat(),
        ),
    )
    await conn.commit()


async def insert_places(conn: aiosqlite.Connection, places):
    await conn.executemany(
        "INSERT INTO cities (name, countrycode) VALUES (?, ?)", places
    )
    await conn.commit()


def turn(user_id: int, minutes: int = 0, **categories) -> HistoricalContextRecord:
    """Ход истории, созданный через minutes минут после BASE_TIME."""
    return HistoricalContextRecord(
        user_id=user_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **categories,
    )


@pytest_asyncio.fixture
async def conn():
    async with aiosqlite.connect(":memory:") as db:
        for statement in SCHEMA:
            await db.execute(statement)
        await db.commit()
        yield db


@pytest.fixture
def user():
    return User(id=42)
