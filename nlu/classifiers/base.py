"""Интерфейс внешнего классификатора высказываний."""

from abc import ABC, abstractmethod

from nlu.models import StructuredInput, Utterance


class StructuredInputClassifier(ABC):
    """
    Классификатор, превращающий высказывание в StructuredInput.

    Реализуется вне ядра (статистическая модель). Контракт: каждое
    местоимение взято из известного словаря, а списки категорий содержат
    точные подстроки текста, которые резолвер будет заменять.
    """

    @abstractmethod
    async def classify(self, utterance: Utterance) -> StructuredInput:
        ...

    async def close(self):
        """Освобождение ресурсов классификатора (по умолчанию ничего)."""
