"""
Модель эмодзи
Неизменяемая запись эмодзи и хэндл для внешнего рендера
"""

from enum import Enum
from typing import FrozenSet, Optional, Tuple
from dataclasses import dataclass


class Platform(str, Enum):
    """Набор изображений эмодзи (платформа)"""
    APPLE = "Apple"
    GOOGLE = "Google"
    TWITTER = "Twitter"
    FACEBOOK = "Facebook"

    @classmethod
    def parse(cls, value) -> "Platform":
        """
        Разобрать название платформы без учета регистра

        Args:
            value: Platform или строка ("apple", "Twitter", ...)

        Returns:
            Элемент Platform

        Raises:
            ValueError: если платформа неизвестна
        """
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        for platform in cls:
            if platform.value.lower() == normalized:
                return platform

        raise ValueError(f"Неизвестная платформа эмодзи: {value}")


@dataclass(frozen=True)
class EmojiRecord:
    """
    Запись эмодзи (базовая или вариация тона кожи)

    Attributes:
        short_codes: Алиасы без двоеточий, первый - основной
        unified_code: Кодпоинты через дефис (квалифицированная форма)
        non_qualified_code: Кодпоинты без селекторов вариаций
        supported_platforms: Платформы, для которых есть изображение
        text: Декодированный текст, с которым идет сравнение
    """

    short_codes: Tuple[str, ...]
    unified_code: str
    text: str
    non_qualified_code: Optional[str] = None
    supported_platforms: FrozenSet[Platform] = frozenset()

    @property
    def primary_short_code(self) -> str:
        """Основной алиас"""
        return self.short_codes[0]

    def supports(self, platform: Platform) -> bool:
        """Есть ли изображение для платформы"""
        return platform in self.supported_platforms

    def __repr__(self) -> str:
        """Строковое представление"""
        return (
            f"EmojiRecord(short_code='{self.primary_short_code}', "
            f"unified='{self.unified_code}', length={len(self.text)})"
        )


@dataclass(frozen=True)
class EmojiHandle:
    """
    Хэндл эмодзи для рендера

    Attributes:
        name: Отображаемая строка (сам эмодзи)
        url: Адрес изображения выбранной платформы
        tooltip: Подсказка вида ":alias:<br/>Emoji"
        scale: Масштаб изображения
    """

    name: str
    url: str
    tooltip: str
    scale: float = 0.35
