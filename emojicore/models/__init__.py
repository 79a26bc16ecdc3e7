"""
Модели данных эмодзи
Записи датасета, распознанные эмодзи, хэндлы для рендера и сегменты текста
"""

from .emoji import Platform, EmojiRecord, EmojiHandle
from .dataset import EmojiEntry
from .segment import TextSegment, EmojiSegment, Segment

__all__ = [
    "Platform",
    "EmojiRecord",
    "EmojiHandle",
    "EmojiEntry",
    "TextSegment",
    "EmojiSegment",
    "Segment"
]
