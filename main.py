import argparse
import asyncio
import logging
import sqlite3
import sys
from pathlib import Path

import aiosqlite

from config import load_config
from database import HistoryStore, PlaceStore
from nlu import GazetteerMatcher, NLUError, Tokenizer, User
from utils import configure_logging, setup_logger

logger = setup_logger(name="nlu_cli", level=logging.INFO)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Разбор высказывания: токены, основы слов и названия мест"
    )
    parser.add_argument("utterance", help="Текст сообщения пользователя")
    parser.add_argument("--user", type=int, default=None,
                        help="ID пользователя для просмотра последнего хода истории")
    parser.add_argument("--db", default=None, help="Путь к БД (по умолчанию DB_PATH)")
    return parser.parse_args(argv)


def read_only_uri(db_path: str) -> str:
    """URI для открытия БД только на чтение (файл не создаётся)."""
    return f"{Path(db_path).resolve().as_uri()}?mode=ro"


async def main(argv=None) -> int:
    """Главная функция"""
    args = parse_args(argv)
    config = load_config()
    configure_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

    utterance = Tokenizer().tokenize(args.utterance)
    print(f"Токены: {list(utterance.tokens)}")
    print(f"Основы: {list(utterance.stems)}")

    db_path = args.db or config.DB_PATH
    try:
        async with aiosqlite.connect(read_only_uri(db_path), uri=True) as conn:
            matcher = GazetteerMatcher(PlaceStore(conn), config.GAZETTEER_COUNTRY_CODE)
            places = await matcher.extract_places(utterance)
            print(f"Места: {[place.name for place in places]}")

            if args.user is not None:
                turn = await HistoryStore(conn).latest_turn(User(id=args.user))
                if turn is None:
                    print(f"У пользователя {args.user} нет подходящих ходов в истории")
                else:
                    print(f"Последний ход ({turn.created_at.isoformat()}): "
                          f"objects={turn.objects} actors={turn.actors} "
                          f"times={turn.times} places={turn.places}")
    except (aiosqlite.Error, sqlite3.Error) as e:
        logger.error(f"Не удалось открыть БД {db_path}: {e}")
        return 1
    except NLUError as e:
        logger.error(f"Ошибка при разборе высказывания: {e}", exc_info=True)
        return 1
    return 0


def cli():
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Программа прервана пользователем")


if __name__ == "__main__":
    cli()
