"""
NLU (Natural Language Understanding) модуль.

Обеспечивает разбор пользовательских высказываний:
- Токенизация и стемминг
- Извлечение названий мест по газеттиру
- Разрешение местоимений по истории диалога
"""

from .models import (
    Category,
    StructuredInput,
    User,
    HistoricalContextRecord,
    Utterance,
    PlaceRecord,
    PronounTable,
    DEFAULT_PRONOUNS,
)
from .errors import NLUError, MissingUserError, UnknownPronounCategoryError, StorageError
from .tokenizer import Tokenizer, sentence_fields
from .gazetteer import GazetteerMatcher
from .anaphora import AnaphoraResolver
from .pipeline import NLUPipeline, NLUResult

__all__ = [
    # Models
    "Category",
    "StructuredInput",
    "User",
    "HistoricalContextRecord",
    "Utterance",
    "PlaceRecord",
    "PronounTable",
    "DEFAULT_PRONOUNS",
    # Errors
    "NLUError",
    "MissingUserError",
    "UnknownPronounCategoryError",
    "StorageError",
    # Components
    "Tokenizer",
    "sentence_fields",
    "GazetteerMatcher",
    "AnaphoraResolver",
    "NLUPipeline",
    "NLUResult",
]
