"""Gazetteer storage - справочник названий мест."""

import logging
import sqlite3
from typing import List, Sequence

import aiosqlite

from config.constants import PLACES_TABLE
from nlu.errors import StorageError
from nlu.models import PlaceRecord
from utils import setup_logger

logger = setup_logger(name="place_store", level=logging.INFO)


class PlaceStore:
    """Чтение справочника мест (name, countrycode)."""

    def __init__(self, conn: aiosqlite.Connection):
        self.conn = conn

    async def find_by_names(self, names: Sequence[str], country_code: str) -> List[PlaceRecord]:
        """
        Найти места с точным (регистрозависимым) совпадением названия.

        Более длинные названия идут первыми, поэтому "New York"
        возвращается раньше "York".

        Args:
            names: Кандидаты (униграммы и биграммы)
            country_code: Код страны, которой ограничен поиск

        Returns:
            Список PlaceRecord, пустой если совпадений нет
        """
        if not names:
            return []

        # Одна позиция "?" на кандидата, значения передаются параметрами
        placeholders = ", ".join("?" for _ in names)
        query = f"""
            SELECT name, countrycode FROM {PLACES_TABLE}
            WHERE countrycode = ? AND name IN ({placeholders})
            ORDER BY LENGTH(name) DESC, name ASC
        """
        try:
            async with self.conn.execute(query, (country_code, *names)) as cursor:
                rows = await cursor.fetchall()
        except (aiosqlite.Error, sqlite3.Error) as e:
            raise StorageError(f"gazetteer lookup failed: {e}") from e

        places = [PlaceRecord(name=row[0], country_code=row[1]) for row in rows]
        logger.debug(f"Газеттир: {len(names)} кандидатов, {len(places)} совпадений")
        return places
