"""
Статичные константы NLU-ядра

Здесь должны быть только константы, которые:
- Не изменяются между окружениями (dev/prod)
- Не являются секретами
- Определяют поведение разбора высказываний
"""

# Токенизация
# Знаки, отделяемые от слова в отдельный токен
TOKEN_PUNCTUATION = "'\",.:;!?"
# Знаки, обрезаемые с конца слова перед стеммингом
STEM_TRIM_CHARS = ",.?;:!-/"

# Газеттир
# Предлоги места, после которых ожидаются названия мест
LOCATIVE_PREPOSITIONS = frozenset({"at", "in", "on"})
DEFAULT_COUNTRY_CODE = "US"

# Таблицы хранилища (схемой управляет внешний слой хранения)
HISTORY_TABLE = "inputs"
PLACES_TABLE = "cities"

# Значения по умолчанию для окружения
DEFAULT_DB_PATH = "db/dialogue.db"
DEFAULT_LOG_FILE = "logs/nlu.log"
