"""Иерархия ошибок NLU-ядра."""


class NLUError(Exception):
    """Базовая ошибка NLU-ядра."""


class MissingUserError(NLUError):
    """Для поиска по истории требуется пользователь, но он не передан."""

    def __init__(self, message: str = "missing user"):
        super().__init__(message)


class UnknownPronounCategoryError(NLUError):
    """
    Классификатор выдал местоимение вне известного словаря.

    Прерывает текущий проход резолвера; уже сделанные замены остаются.
    """

    def __init__(self, pronoun: str):
        self.pronoun = pronoun
        super().__init__(f"unknown category for pronoun {pronoun!r}")


class StorageError(NLUError):
    """Ошибка чтения из хранилища истории или газеттира."""
