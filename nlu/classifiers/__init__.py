"""NLU Classifiers - интерфейс внешнего классификатора."""

from .base import StructuredInputClassifier

__all__ = [
    "StructuredInputClassifier",
]
