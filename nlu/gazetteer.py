"""
Gazetteer Matcher - извлечение названий мест из текста.

Кандидаты (униграммы и биграммы) сверяются со справочником мест,
более длинные названия имеют приоритет.
"""

import logging
import re
from typing import TYPE_CHECKING, List, Union

from config.constants import DEFAULT_COUNTRY_CODE, LOCATIVE_PREPOSITIONS
from nlu.models import PlaceRecord, Utterance
from utils import setup_logger

if TYPE_CHECKING:
    from database.place_store import PlaceStore

logger = setup_logger(name="gazetteer", level=logging.INFO)

NON_WORDS = re.compile(r'[^\w\s]')


def bigrams(words: List[str], start: int = 0) -> List[str]:
    """Пары соседних слов начиная с позиции start: "new york"."""
    return [f"{words[i]} {words[i + 1]}" for i in range(start, len(words) - 1)]


def location_start(words: List[str]) -> int:
    """
    Индекс первого предлога места (at/in/on).

    Если предлога нет, возвращается 0: просматривается всё предложение.
    """
    for i, word in enumerate(words):
        if word.lower() in LOCATIVE_PREPOSITIONS:
            return i
    return 0


def place_candidates(text: str) -> List[str]:
    """
    Кандидаты для поиска в газеттире: униграммы, затем биграммы.

    Пунктуация удаляется, регистр сохраняется (поиск регистрозависимый).
    """
    words = NON_WORDS.sub("", text).split()
    start = location_start(words)
    return words[start:] + bigrams(words, start)


class GazetteerMatcher:
    """
    Извлекатель мест из высказывания по справочнику одной страны.
    """

    def __init__(self, store: "PlaceStore", country_code: str = DEFAULT_COUNTRY_CODE):
        self.store = store
        self.country_code = country_code

    async def extract_places(self, utterance: Union[Utterance, str]) -> List[PlaceRecord]:
        """
        Извлечь места из высказывания.

        Args:
            utterance: Utterance или исходный текст

        Returns:
            Найденные места, самые длинные названия первыми; пустой
            список, если совпадений нет

        Raises:
            StorageError: Ошибка чтения справочника
        """
        text = utterance.text if isinstance(utterance, Utterance) else utterance
        candidates = place_candidates(text)
        if not candidates:
            return []

        places = await self.store.find_by_names(candidates, self.country_code)
        if places:
            logger.info(f"Найдены места: {[p.name for p in places]}")
        return places
