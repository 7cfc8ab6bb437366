"""
NLU Pipeline - основной пайплайн обработки сообщений.

Объединяет токенизацию, внешний классификатор и разрешение местоимений.
"""

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from nlu.anaphora import AnaphoraResolver
from nlu.classifiers import StructuredInputClassifier
from nlu.errors import UnknownPronounCategoryError
from nlu.models import DEFAULT_PRONOUNS, PronounTable, StructuredInput, User, Utterance
from nlu.tokenizer import Tokenizer
from utils import setup_logger

if TYPE_CHECKING:
    from database.history_store import HistoryStore

logger = setup_logger(name="nlu_pipeline", level=logging.INFO)


@dataclass
class NLUResult:
    """
    Результат обработки сообщения NLU пайплайном.

    resolution_error заполняется, если разрешение местоимений прервано
    из-за неизвестного местоимения; structured_input при этом содержит
    замены, сделанные до ошибки.
    """
    utterance: Utterance
    structured_input: StructuredInput
    resolution_error: Optional[UnknownPronounCategoryError] = None

    @property
    def fully_resolved(self) -> bool:
        return self.resolution_error is None


class NLUPipeline:
    """
    Главный пайплайн обработки естественного языка.

    Использует:
    - Токенизатор с Porter2-стеммером
    - Внешний классификатор высказываний
    - Резолвер местоимений по истории
    """

    def __init__(
        self,
        classifier: StructuredInputClassifier,
        history_store: "HistoryStore",
        pronouns: PronounTable = DEFAULT_PRONOUNS,
        tokenizer: Optional[Tokenizer] = None,
    ):
        self.classifier = classifier
        self.tokenizer = tokenizer or Tokenizer()
        self.resolver = AnaphoraResolver(history_store, pronouns)

    async def close(self):
        """Закрытие ресурсов."""
        await self.classifier.close()

    async def process(self, user: Optional[User], message: str) -> NLUResult:
        """
        Обработать сообщение пользователя.

        Args:
            user: Пользователь (нужен, если в сообщении есть местоимения)
            message: Текст сообщения

        Returns:
            NLUResult с результатами обработки

        Raises:
            MissingUserError: Местоимения есть, пользователя нет
            StorageError: Ошибка чтения истории
        """
        utterance = self.tokenizer.tokenize(self._preprocess(message))
        structured_input = await self.classifier.classify(utterance)

        result = NLUResult(utterance=utterance, structured_input=structured_input)
        try:
            await self.resolver.resolve(user, structured_input)
        except UnknownPronounCategoryError as e:
            # Контекст - необязательное обогащение, продолжаем без него
            logger.warning(f"Разрешение местоимений прервано: {e}")
            result.resolution_error = e
        return result

    def _preprocess(self, text: str) -> str:
        """Предобработка текста."""
        # Удаляем лишние пробелы
        text = re.sub(r'\s+', ' ', text.strip())
        return text
