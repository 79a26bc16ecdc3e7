"""
Схема записи датасета эмодзи
Поля совпадают с форматом emoji.json (iamcal/emoji-data)
"""

from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .emoji import Platform


class EmojiEntry(BaseModel):
    """
    Запись датасета

    Вариации тона хранятся как сырые словари: каждая проверяется отдельно,
    чтобы битая вариация не отбрасывала базовый эмодзи.
    """

    model_config = ConfigDict(extra="ignore")

    short_names: List[str] = Field(default_factory=list)
    unified: Optional[str] = None
    non_qualified: Optional[str] = None

    has_img_apple: bool = False
    has_img_google: bool = False
    has_img_twitter: bool = False
    has_img_facebook: bool = False

    skin_variations: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("skin_variations", mode="before")
    @classmethod
    def validate_skin_variations(cls, v: Any) -> Any:
        """Отсутствующие вариации (null) считаются пустыми"""
        if v is None:
            return {}
        return v

    @property
    def platforms(self) -> Set[Platform]:
        """Платформы с изображением"""
        flags = {
            Platform.APPLE: self.has_img_apple,
            Platform.GOOGLE: self.has_img_google,
            Platform.TWITTER: self.has_img_twitter,
            Platform.FACEBOOK: self.has_img_facebook,
        }
        return {platform for platform, enabled in flags.items() if enabled}
