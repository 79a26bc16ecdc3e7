"""
Загрузчик датасета эмодзи
Разбирает emoji.json в список записей (базовые эмодзи и вариации тона)
"""

import json
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojicore.models.emoji import EmojiRecord
from emojicore.utils.exceptions import DatasetParseError
from .records import build_record, validate_entry
from .variants import TONE_NAMES, expand_variants

# Настройка логгера модуля
logger = logger.bind(module="emoji_loader")

DatasetSource = Union[str, bytes, Sequence[Any]]


def _decode_container(data: DatasetSource, source: str) -> List[Any]:
    """Разобрать контейнер датасета (JSON-массив)"""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DatasetParseError(source, f"JSON parse error: {e}")

    if not isinstance(data, (list, tuple)):
        raise DatasetParseError(source, f"ожидался массив, получено {type(data).__name__}")

    return list(data)


def load_entries(
    data: DatasetSource,
    tone_names: Mapping[str, str] = TONE_NAMES,
    source: str = "<memory>"
) -> List[EmojiRecord]:
    """
    Загрузить записи эмодзи из датасета

    Вариации тона добавляются сразу после своего базового эмодзи,
    порядок обнаружения сохраняется.

    Args:
        data: JSON (str/bytes) или уже разобранный список записей
        tone_names: Таблица модификатор -> имя тона
        source: Имя источника для сообщений об ошибках

    Returns:
        Список записей эмодзи

    Raises:
        DatasetParseError: контейнер датасета не разобран
    """
    raw_entries = _decode_container(data, source)

    records = []
    dropped = 0

    for raw_entry in raw_entries:
        entry = validate_entry(raw_entry)
        if entry is None:
            dropped += 1
            continue

        record = build_record(entry)
        if record is None:
            dropped += 1
            continue

        records.append(record)

        if entry.skin_variations:
            records.extend(expand_variants(record, entry, tone_names))

    logger.info(
        "Загружено {} эмодзи из {} записей ({}), отброшено: {}",
        len(records), len(raw_entries), source, dropped
    )

    return records


def load_dataset_file(
    path: Union[str, Path],
    tone_names: Mapping[str, str] = TONE_NAMES
) -> List[EmojiRecord]:
    """
    Загрузить записи эмодзи из файла

    Args:
        path: Путь к emoji.json
        tone_names: Таблица модификатор -> имя тона

    Returns:
        Список записей эмодзи

    Raises:
        DatasetParseError: файл не прочитан или не разобран
    """
    path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DatasetParseError(str(path), str(e))

    return load_entries(data, tone_names, source=str(path))
