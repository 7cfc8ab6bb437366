"""
Tokenizer - разбиение высказывания на токены и основы слов.
"""

import logging
from typing import List

import snowballstemmer

from config.constants import STEM_TRIM_CHARS, TOKEN_PUNCTUATION
from nlu.models import Utterance
from utils import setup_logger

logger = setup_logger(name="tokenizer", level=logging.INFO)


def sentence_fields(text: str) -> List[str]:
    """
    Разбить предложение на слова, отделив конечную пунктуацию.

    Слова приводятся к нижнему регистру, знаки ,.'"?!:; в конце слова
    становятся отдельными токенами и идут после слова:
    "How much is it?" -> ["how", "much", "is", "it", "?"]
    """
    tokens = []
    for word in text.split():
        stripped = word.rstrip(TOKEN_PUNCTUATION)
        if stripped:
            tokens.append(stripped.lower())
        tokens.extend(word[len(stripped):])
    return tokens


class Tokenizer:
    """
    Нормализатор высказываний: токены + основы слов (Porter2).
    """

    def __init__(self, language: str = "english"):
        self.stemmer = snowballstemmer.stemmer(language)

    def stems(self, text: str) -> List[str]:
        """Основы слов, по одной на каждое слово, разделённое пробелами."""
        words = [w.rstrip(STEM_TRIM_CHARS).lower() for w in text.split()]
        return self.stemmer.stemWords(words)

    def tokenize(self, text: str) -> Utterance:
        """
        Построить Utterance из исходного текста.

        Args:
            text: Сообщение пользователя

        Returns:
            Неизменяемый Utterance с токенами и основами
        """
        utterance = Utterance(
            text=text,
            tokens=tuple(sentence_fields(text)),
            stems=tuple(self.stems(text)),
        )
        logger.debug(f"Токены: {utterance.tokens}")
        return utterance
