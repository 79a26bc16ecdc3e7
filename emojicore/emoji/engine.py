"""
Движок эмодзи
Загрузка датасета, публикация индексов и хэндлов, разбор и замена текста
"""

import threading
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.models.emoji import EmojiHandle, EmojiRecord, Platform
from emojicore.models.segment import Segment
from emojicore.utils.exceptions import DatasetParseError
from .handles import DEFAULT_IMAGE_SCALE, EMOJI_SET_URLS, build_emoji_set_urls, resolve_handles
from .index import EmojiIndex, build_index
from .loader import DatasetSource, load_dataset_file, load_entries
from .scanner import EmojiScanner
from .shortcodes import ShortCodeReplacer
from .variants import TONE_NAMES

# Настройка логгера модуля
logger = logger.bind(module="emoji_engine")


@dataclass(frozen=True)
class EngineState:
    """Опубликованное состояние: индекс и снимок хэндлов к нему"""
    index: EmojiIndex
    handles: Mapping[int, EmojiHandle]
    emoji_set: Platform


class EmojiEngine:
    """
    Движок распознавания и замены эмодзи

    Состояние публикуется заменой одной ссылки. Читатели берут снимок
    состояния один раз на вызов и работают без блокировок; писатели
    (загрузка и смена набора эмодзи) выполняются по одному.
    """

    def __init__(
        self,
        emoji_set: Platform = Platform.TWITTER,
        url_prefixes: Optional[Mapping[Platform, str]] = None,
        image_scale: float = DEFAULT_IMAGE_SCALE,
        tone_names: Mapping[str, str] = TONE_NAMES
    ):
        """
        Инициализация движка

        Args:
            emoji_set: Набор изображений по умолчанию
            url_prefixes: Таблица адресов наборов изображений
            image_scale: Масштаб изображений в хэндлах
            tone_names: Таблица модификатор -> имя тона
        """
        self._url_prefixes = EMOJI_SET_URLS if url_prefixes is None else url_prefixes
        self._image_scale = image_scale
        self._tone_names = tone_names

        self._write_lock = threading.Lock()
        self._state = EngineState(EmojiIndex.empty(), MappingProxyType({}), emoji_set)
        self._loaded = False
        self._load_error: Optional[str] = None

    # ==============================================
    # ЗАГРУЗКА
    # ==============================================

    def load(self, data: DatasetSource, source: str = "<memory>") -> bool:
        """
        Загрузить датасет и опубликовать индексы

        Args:
            data: JSON (str/bytes) или разобранный список записей
            source: Имя источника для логов

        Returns:
            True если датасет загружен, False если контейнер не разобран
            (движок остается пустым и ничего не находит)
        """
        try:
            records = load_entries(data, self._tone_names, source=source)
        except DatasetParseError as e:
            return self._publish_failure(e)

        return self._publish(build_index(records))

    def load_file(self, path: Union[str, Path]) -> bool:
        """Загрузить датасет из файла"""
        try:
            records = load_dataset_file(path, self._tone_names)
        except DatasetParseError as e:
            return self._publish_failure(e)

        return self._publish(build_index(records))

    def _publish(self, index: EmojiIndex) -> bool:
        """Построить хэндлы к новому индексу и опубликовать"""
        with self._write_lock:
            emoji_set = self._state.emoji_set
            handles = resolve_handles(index, emoji_set, self._url_prefixes, self._image_scale)
            self._state = EngineState(index, handles, emoji_set)
            self._loaded = True
            self._load_error = None

        logger.info("Опубликовано {} эмодзи (набор {})", len(index), emoji_set.value)
        return True

    def _publish_failure(self, error: DatasetParseError) -> bool:
        """Опубликовать пустое состояние после неудачной загрузки"""
        with self._write_lock:
            self._state = EngineState(
                EmojiIndex.empty(), MappingProxyType({}), self._state.emoji_set
            )
            self._loaded = False
            self._load_error = f"{error.message}: {error.details}" if error.details else error.message

        logger.error("Загрузка эмодзи прервана, движок пуст: {}", self._load_error)
        return False

    def apply_emoji_set(self, emoji_set: Union[Platform, str]) -> None:
        """
        Сменить набор изображений

        Хэндлы строятся в новый снимок и подменяются целиком, записи
        и индексы не изменяются.

        Args:
            emoji_set: Платформа или ее название
        """
        emoji_set = Platform.parse(emoji_set)

        with self._write_lock:
            state = self._state
            if state.emoji_set == emoji_set:
                return

            handles = resolve_handles(state.index, emoji_set, self._url_prefixes, self._image_scale)
            self._state = replace(state, handles=handles, emoji_set=emoji_set)

        logger.info("Набор эмодзи изменен на {}", emoji_set.value)

    # ==============================================
    # ЧТЕНИЕ
    # ==============================================

    @property
    def state(self) -> EngineState:
        """Текущий опубликованный снимок"""
        return self._state

    def parse(self, text: str) -> List[Segment]:
        """Разобрать текст на фрагменты и эмодзи"""
        state = self._state
        return EmojiScanner(state.index, state.handles).parse(text)

    def find_emojis(self, text: str) -> List[EmojiRecord]:
        """Найти все эмодзи в тексте"""
        state = self._state
        return EmojiScanner(state.index, state.handles).find_emojis(text)

    def replace_short_codes(self, text: str) -> str:
        """Заменить :alias: на символы эмодзи"""
        return ShortCodeReplacer(self._state.index).replace_short_codes(text)

    def get_by_short_code(self, short_code: str) -> Optional[EmojiRecord]:
        """Найти эмодзи по алиасу (с двоеточиями или без)"""
        return self._state.index.get_by_short_code(short_code.strip(":"))

    def get_by_unified_code(self, unified_code: str) -> Optional[EmojiRecord]:
        """Найти эмодзи по unified коду"""
        return self._state.index.get_by_unified_code(unified_code)

    def get_handle(self, unified_code: str) -> Optional[EmojiHandle]:
        """Хэндл эмодзи по unified коду для текущего набора"""
        state = self._state
        record_id = state.index.by_unified_code.get(unified_code.upper())
        return None if record_id is None else state.handles.get(record_id)

    def complete_short_code(self, prefix: str, limit: int = 10) -> List[str]:
        """Автодополнение алиаса"""
        return self._state.index.complete_short_code(prefix.lstrip(":"), limit)

    @property
    def short_codes(self) -> Tuple[str, ...]:
        """Все алиасы по алфавиту"""
        return self._state.index.short_codes

    @property
    def emoji_set(self) -> Platform:
        """Текущий набор изображений"""
        return self._state.emoji_set

    @property
    def count(self) -> int:
        """Количество загруженных эмодзи"""
        return len(self._state.index)

    @property
    def is_loaded(self) -> bool:
        """Загружен ли датасет"""
        return self._loaded

    @property
    def load_error(self) -> Optional[str]:
        """Причина последней неудачной загрузки"""
        return self._load_error


def create_emoji_engine_from_config() -> EmojiEngine:
    """Создать и загрузить движок по конфигурации"""
    from emojicore.utils.config import get_config

    config = get_config()
    engine = EmojiEngine(
        emoji_set=config.EMOJI_SET,
        url_prefixes=build_emoji_set_urls(config.EMOJI_CDN_BASE_URL, config.EMOJI_IMAGE_SIZE),
        image_scale=config.EMOJI_IMAGE_SCALE
    )
    engine.load_file(config.get_dataset_path())
    return engine


# Глобальный экземпляр движка
_emoji_engine: Optional[EmojiEngine] = None
_engine_lock = threading.Lock()


def get_emoji_engine() -> EmojiEngine:
    """Получить экземпляр EmojiEngine"""
    global _emoji_engine
    if _emoji_engine is None:
        with _engine_lock:
            if _emoji_engine is None:
                _emoji_engine = create_emoji_engine_from_config()
    return _emoji_engine


def reload_emoji_engine() -> EmojiEngine:
    """Перезагрузить движок эмодзи"""
    global _emoji_engine
    with _engine_lock:
        _emoji_engine = create_emoji_engine_from_config()
    return _emoji_engine
