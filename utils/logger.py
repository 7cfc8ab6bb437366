import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional, Set, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Имена логгеров, созданных через setup_logger
_loggers: Set[str] = set()
# Один обработчик на файл, общий для всех логгеров
_file_handlers: Dict[str, RotatingFileHandler] = {}


def _file_handler(log_file: str) -> RotatingFileHandler:
    path = os.path.abspath(log_file)
    if path not in _file_handlers:
        log_dir = os.path.dirname(path)
        os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding='utf-8'
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _file_handlers[path] = handler
    return _file_handlers[path]


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """
    Настройка логгера с выводом в консоль и (опционально) в файл с ротацией

    Повторный вызов обновляет уровень и добавляет файловый обработчик,
    если его ещё нет; консольный обработчик не дублируется.

    Args:
        name: Имя логгера
        log_file: Путь к файлу логов, None - только консоль
        level: Уровень логирования (число или строка "INFO", "DEBUG" ...)

    Returns:
        Настроенный логгер
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    _loggers.add(name)

    # RotatingFileHandler тоже StreamHandler, поэтому сравниваем тип точно
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    if log_file:
        handler = _file_handler(log_file)
        if handler not in logger.handlers:
            logger.addHandler(handler)

    return logger


def configure_logging(level: Union[int, str], log_file: Optional[str] = None):
    """
    Применить уровень и файл логов из конфигурации ко всем логгерам модулей.
    """
    for name in sorted(_loggers):
        setup_logger(name=name, log_file=log_file, level=level)
