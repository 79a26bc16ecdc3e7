"""
Замена алиасов эмодзи
Заменяет :shortcode: в тексте на символы эмодзи
"""

import re
from typing import List

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.models.emoji import EmojiRecord
from .index import EmojiIndex

# Настройка логгера модуля
logger = logger.bind(module="emoji_shortcodes")

# Алиас между двоеточиями: латинские буквы, цифры, "_", "-" и "+"
SHORT_CODE_PATTERN = re.compile(r":([-+\w]+):", re.ASCII)


class ShortCodeReplacer:
    """Замена :alias: на текст эмодзи по индексу алиасов"""

    def __init__(self, index: EmojiIndex):
        """
        Инициализация

        Args:
            index: Индекс эмодзи
        """
        self.index = index

    def replace_short_codes(self, text: str) -> str:
        """
        Заменить все известные алиасы в тексте

        Совпадения ищутся один раз по исходному тексту, поэтому каждая
        замена сдвигается на накопленную разницу длин предыдущих замен.
        Неизвестные алиасы остаются как есть.

        Args:
            text: Исходный текст

        Returns:
            Текст с заменами
        """
        result = text
        offset = 0
        replacements = 0

        for match in SHORT_CODE_PATTERN.finditer(text):
            record = self.index.get_by_short_code(match.group(1))
            if record is None:
                continue

            start = match.start() + offset
            end = start + len(match.group(0))
            result = result[:start] + record.text + result[end:]

            offset += len(record.text) - len(match.group(0))
            replacements += 1

        if replacements > 0:
            logger.debug("Заменено {} алиасов эмодзи", replacements)

        return result

    def find_short_codes(self, text: str) -> List[EmojiRecord]:
        """Найти эмодзи, на которые ссылаются алиасы в тексте"""
        records = []
        for match in SHORT_CODE_PATTERN.finditer(text):
            record = self.index.get_by_short_code(match.group(1))
            if record is not None:
                records.append(record)
        return records
