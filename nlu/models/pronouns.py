"""Pronoun vocabulary for anaphora resolution."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from .entities import Category


class PronounTable(Mapping):
    """
    Неизменяемая таблица "местоимение -> категория".

    Передаётся в резолвер явно, поэтому тесты могут подставить свой
    словарь, не трогая глобальное состояние.
    """

    def __init__(self, mapping: Dict[str, Category]):
        self._mapping = MappingProxyType(
            {word.lower(): Category(category) for word, category in mapping.items()}
        )

    def __getitem__(self, word: str) -> Category:
        return self._mapping[word.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def category_of(self, word: str) -> Optional[Category]:
        """Категория местоимения или None, если слово не из словаря."""
        return self._mapping.get(word.lower())

    def __repr__(self) -> str:
        return f"PronounTable({dict(self._mapping)!r})"


DEFAULT_PRONOUNS = PronounTable({
    # Предметы
    "it": Category.OBJECTS,
    "that": Category.OBJECTS,
    "this": Category.OBJECTS,
    "these": Category.OBJECTS,
    "those": Category.OBJECTS,
    "them": Category.OBJECTS,
    # Участники
    "me": Category.ACTORS,
    "us": Category.ACTORS,
    "you": Category.ACTORS,
    "him": Category.ACTORS,
    "her": Category.ACTORS,
    "he": Category.ACTORS,
    "she": Category.ACTORS,
    # Время
    "then": Category.TIMES,
    # Места
    "there": Category.PLACES,
    "here": Category.PLACES,
})
