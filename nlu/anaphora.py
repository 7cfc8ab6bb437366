"""
Anaphora Resolver - подстановка антецедентов вместо местоимений.

"how much is it?" -> "it" заменяется на последний обсуждавшийся предмет
из истории пользователя.
"""

import logging
from typing import TYPE_CHECKING, Optional

from nlu.errors import UnknownPronounCategoryError
from nlu.models import DEFAULT_PRONOUNS, PronounTable, StructuredInput, User
from utils import setup_logger

if TYPE_CHECKING:
    from database.history_store import HistoryStore

logger = setup_logger(name="anaphora", level=logging.INFO)


class AnaphoraResolver:
    """
    Резолвер местоимений по истории диалога.

    Работает по принципу "лучше без контекста, чем с неверным": первый же
    промах (пустой антецедент) останавливает весь проход без ошибки.
    """

    def __init__(self, store: "HistoryStore", pronouns: PronounTable = DEFAULT_PRONOUNS):
        self.store = store
        self.pronouns = pronouns

    async def resolve(self, user: Optional[User], structured_input: StructuredInput) -> StructuredInput:
        """
        Заменить местоимения антецедентами на месте.

        Args:
            user: Пользователь; может отсутствовать, только если местоимений нет
            structured_input: Результат классификатора

        Returns:
            Тот же StructuredInput (частично разрешённый, если проход прерван)

        Raises:
            ValueError: У structured_input нет списка местоимений
            UnknownPronounCategoryError: Местоимение вне словаря
            MissingUserError: Нужна история, но пользователь не передан
            StorageError: Ошибка чтения истории
        """
        if structured_input.pronouns is None:
            raise ValueError("structured input has no pronoun list")

        for pronoun in structured_input.pronouns:
            category = self.pronouns.category_of(pronoun)
            if category is None:
                raise UnknownPronounCategoryError(pronoun)

            antecedent = await self.store.lookup_antecedent(user, category)
            if not antecedent:
                logger.debug(f"Нет контекста для '{pronoun}' ({category.value}), проход остановлен")
                return structured_input

            replaced = structured_input.replace_mention(category, pronoun, antecedent)
            logger.info(
                f"Контекст найден: '{pronoun}' -> '{antecedent}' "
                f"({category.value}, замен: {replaced})"
            )

        return structured_input
