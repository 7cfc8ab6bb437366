"""Context models for conversation history lookups."""

import json
from datetime import datetime
from dataclasses import dataclass, field
from typing import List, Optional

from .entities import Category


def decode_mentions(raw: Optional[str], column: str) -> List[str]:
    """
    Разобрать JSON-массив упоминаний из текстовой колонки.

    NULL считается пустым списком; всё, что не является массивом, - ошибка.
    """
    values = json.loads(raw or "[]")
    if not isinstance(values, list):
        raise ValueError(f"{column} column is not a JSON array: {raw!r}")
    return values


@dataclass(frozen=True)
class User:
    """
    Ссылка на пользователя. Ядро никогда не создаёт пользователей,
    только использует id как ключ для поиска по истории.
    """
    id: int


@dataclass
class HistoricalContextRecord:
    """
    Один прошлый ход диалога пользователя.

    Ход считается подходящим источником антецедента только если в нём
    есть хотя бы одно упоминание предмета (objects не пуст).
    """
    user_id: int
    objects: List[str] = field(default_factory=list)
    actors: List[str] = field(default_factory=list)
    times: List[str] = field(default_factory=list)
    places: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    id: Optional[int] = None

    def values(self, category: Category) -> List[str]:
        return getattr(self, Category(category).value)

    def last(self, category: Category) -> str:
        """Последнее упоминание категории или пустая строка."""
        values = self.values(category)
        return values[-1] if values else ""

    def is_qualifying(self) -> bool:
        return bool(self.objects)

    @classmethod
    def from_row(cls, row: dict) -> "HistoricalContextRecord":
        """
        Десериализация хода из строки БД (JSON-массивы в текстовых колонках).

        Raises:
            ValueError: Колонка не является JSON-массивом или нет created_at
        """
        created_at = row.get("created_at")
        if not created_at:
            raise ValueError("history row has no created_at")
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            objects=decode_mentions(row.get("objects"), "objects"),
            actors=decode_mentions(row.get("actors"), "actors"),
            times=decode_mentions(row.get("times"), "times"),
            places=decode_mentions(row.get("places"), "places"),
            created_at=datetime.fromisoformat(created_at),
        )
