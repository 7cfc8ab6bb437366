"""Utterance and gazetteer models."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Utterance:
    """
    Исходное высказывание пользователя и его разбор.

    Attributes:
        text: Исходный текст
        tokens: Слова в нижнем регистре и отделённая пунктуация, в порядке чтения
        stems: Основы слов (по одной на слово, разделённое пробелами)
    """
    text: str
    tokens: Tuple[str, ...] = ()
    stems: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PlaceRecord:
    """Запись газеттира: каноническое название места и код страны."""
    name: str
    country_code: str
