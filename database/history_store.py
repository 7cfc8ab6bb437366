"""
History Store - чтение прошлых ходов диалога пользователя.

Только чтение: запись истории и управление схемой/соединением
выполняет внешний слой хранения.
"""

import logging
import sqlite3
from typing import Dict, Optional

import aiosqlite

from config.constants import HISTORY_TABLE
from nlu.errors import MissingUserError, StorageError
from nlu.models import Category, HistoricalContextRecord, User
from nlu.models.context import decode_mentions
from utils import setup_logger

logger = setup_logger(name="history_store", level=logging.INFO)


def _antecedent_query(column: str) -> str:
    return f"""
        SELECT {column} FROM {HISTORY_TABLE}
        WHERE user_id = ? AND json_array_length(objects) > 0
        ORDER BY created_at DESC, id DESC
        LIMIT 1
    """


# Подготовленные запросы по категориям: имя колонки никогда не
# подставляется из пользовательских данных
ANTECEDENT_QUERIES: Dict[Category, str] = {
    category: _antecedent_query(category.value) for category in Category
}

LATEST_TURN_QUERY = f"""
    SELECT id, user_id, objects, actors, times, places, created_at
    FROM {HISTORY_TABLE}
    WHERE user_id = ? AND json_array_length(objects) > 0
    ORDER BY created_at DESC, id DESC
    LIMIT 1
"""


class HistoryStore:
    """
    Доступ к истории диалогов для поиска антецедентов.

    Соединение принадлежит вызывающему коду: хранилище его не открывает
    и не закрывает.
    """

    def __init__(self, conn: aiosqlite.Connection):
        self.conn = conn

    async def lookup_antecedent(self, user: Optional[User], category: Category) -> str:
        """
        Найти последнее упоминание категории в самом свежем подходящем ходе.

        Подходящий ход - ход пользователя с непустым списком objects,
        независимо от запрашиваемой категории.

        Args:
            user: Пользователь
            category: Категория (objects, actors, times, places)

        Returns:
            Последний элемент списка категории или "", если подходящего
            хода нет или список в нём пуст

        Raises:
            MissingUserError: Пользователь не передан (запрос не выполняется)
            ValueError: Категория вне фиксированного перечисления
            StorageError: Ошибка чтения из БД
        """
        if user is None:
            raise MissingUserError()
        category = Category(category)
        query = ANTECEDENT_QUERIES[category]

        logger.debug(f"Поиск антецедента: user={user.id}, category={category.value}")
        try:
            async with self.conn.execute(query, (user.id,)) as cursor:
                row = await cursor.fetchone()
        except (aiosqlite.Error, sqlite3.Error) as e:
            raise StorageError(f"history lookup failed: {e}") from e

        if row is None:
            return ""
        try:
            values = decode_mentions(row[0], category.value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"malformed {category.value} column for user {user.id}") from e
        if not values:
            return ""
        return str(values[-1])

    async def latest_turn(self, user: Optional[User]) -> Optional[HistoricalContextRecord]:
        """
        Получить самый свежий подходящий ход пользователя целиком.

        Returns:
            HistoricalContextRecord или None, если подходящих ходов нет
        """
        if user is None:
            raise MissingUserError()
        try:
            async with self.conn.execute(LATEST_TURN_QUERY, (user.id,)) as cursor:
                row = await cursor.fetchone()
                columns = [d[0] for d in cursor.description] if row else []
        except (aiosqlite.Error, sqlite3.Error) as e:
            raise StorageError(f"history lookup failed: {e}") from e

        if row is None:
            return None
        try:
            return HistoricalContextRecord.from_row(dict(zip(columns, row)))
        except (TypeError, ValueError) as e:
            raise StorageError(f"malformed history row for user {user.id}") from e
