"""
Точка входа emoji-core
Разбор текста на эмодзи и замена :shortcode: из командной строки
"""

import sys
from pathlib import Path
from typing import List

# Стандартные импорты
from dotenv import load_dotenv

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.utils.logging_config import setup_logging_from_config
from emojicore.utils.config import get_config
from emojicore.emoji import EmojiEngine, get_emoji_engine
from emojicore.models import EmojiSegment

USAGE = "Доступные команды: parse <текст>, replace <текст>, complete <префикс>, stats"


def format_segments(engine: EmojiEngine, text: str) -> List[str]:
    """Описание сегментов текста построчно"""
    lines = []
    for segment in engine.parse(text):
        if isinstance(segment, EmojiSegment):
            url = segment.handle.url if segment.handle else "-"
            lines.append(f"emoji  {segment.text!r} :{segment.record.primary_short_code}: {url}")
        else:
            lines.append(f"text   {segment.text!r}")
    return lines


def run_command(engine: EmojiEngine, command: str, args: List[str]) -> int:
    """Выполнить команду CLI"""
    text = " ".join(args)

    if command == "parse":
        for line in format_segments(engine, text):
            print(line)
        return 0

    if command == "replace":
        print(engine.replace_short_codes(text))
        return 0

    if command == "complete":
        for short_code in engine.complete_short_code(text):
            print(f":{short_code}:")
        return 0

    if command == "stats":
        print(f"Эмодзи: {engine.count}")
        print(f"Алиасов: {len(engine.short_codes)}")
        print(f"Набор: {engine.emoji_set.value}")
        return 0

    logger.error("Неизвестная команда: {}", command)
    logger.info(USAGE)
    return 1


def main() -> int:
    """Главная функция"""
    load_dotenv()  # Загружаем переменные окружения

    # Настраиваем логирование
    setup_logging_from_config()

    config = get_config()
    logger.info("📂 Рабочая директория: {}", Path.cwd())

    engine = get_emoji_engine()
    if not engine.is_loaded:
        logger.error("💥 Датасет {} не загружен: {}", config.EMOJI_DATASET_PATH, engine.load_error)
        return 1

    if len(sys.argv) > 1:
        return run_command(engine, sys.argv[1], sys.argv[2:])

    # Без команды: заменяем алиасы в строках stdin
    for line in sys.stdin:
        print(engine.replace_short_codes(line.rstrip("\n")))

    return 0


if __name__ == "__main__":
    """Точка входа в приложение"""

    try:
        sys.exit(main())

    except KeyboardInterrupt:
        logger.info("👋 Программа завершена пользователем")
        sys.exit(0)

    except Exception as e:
        logger.error("💥 Фатальная ошибка: {}", str(e))
        sys.exit(1)
