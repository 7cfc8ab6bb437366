"""NLU Models - dataclasses для работы с NLU."""

from .entities import Category, StructuredInput
from .context import User, HistoricalContextRecord
from .utterance import Utterance, PlaceRecord
from .pronouns import PronounTable, DEFAULT_PRONOUNS

__all__ = [
    "Category",
    "StructuredInput",
    "User",
    "HistoricalContextRecord",
    "Utterance",
    "PlaceRecord",
    "PronounTable",
    "DEFAULT_PRONOUNS",
]
