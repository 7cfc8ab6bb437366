from dataclasses import dataclass
from typing import Optional

from config.constants import DEFAULT_COUNTRY_CODE, DEFAULT_DB_PATH, DEFAULT_LOG_FILE

@dataclass
class Config:
    """Конфигурация NLU-ядра из переменных окружения"""
    # База данных (история диалогов и газеттир)
    DB_PATH: str

    # Настройки логирования
    LOG_LEVEL: str
    LOG_FILE: Optional[str]

    # Газеттир
    GAZETTEER_COUNTRY_CODE: str

def load_config() -> Config:
    """
    Загрузка конфигурации из переменных окружения

    Returns:
        Config: Объект конфигурации

    Raises:
        ValueError: Если код страны газеттира задан некорректно
    """
    import os
    from dotenv import load_dotenv

    load_dotenv()

    country_code = os.getenv("GAZETTEER_COUNTRY_CODE", DEFAULT_COUNTRY_CODE).strip().upper()
    if len(country_code) != 2 or not country_code.isalpha():
        raise ValueError(f"GAZETTEER_COUNTRY_CODE must be a two-letter code, got {country_code!r}")

    return Config(
        DB_PATH=os.getenv("DB_PATH", DEFAULT_DB_PATH),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        LOG_FILE=os.getenv("LOG_FILE", DEFAULT_LOG_FILE) or None,
        GAZETTEER_COUNTRY_CODE=country_code,
    )
