"""Content service record models."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.i18n import Locale


class ContentRecord(BaseModel):
    """Base model for records returned by the content service.

    Field names are snake_case; the service's camelCase names are accepted
    as aliases. Unknown fields are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_record(cls, record: Dict[str, Any]):
        """Validate a raw record, flattening an {"id", "attributes"} envelope."""
        attributes = record.get("attributes")
        if isinstance(attributes, dict):
            record = {"id": record.get("id"), **attributes}
        return cls.model_validate(record)


class TranslationEntry(ContentRecord):
    id: Optional[int] = None
    key: str
    ru: Optional[str] = None
    en: Optional[str] = None
    he: Optional[str] = None
    category: Optional[str] = None
    page: Optional[str] = None
    section: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = Field(default=True, alias="isActive")
    is_locked: Optional[bool] = Field(default=None, alias="isLocked")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    published_at: Optional[str] = Field(default=None, alias="publishedAt")

    def value_for(self, locale: Locale) -> Optional[str]:
        return getattr(self, Locale.from_string(locale).value, None)


class MediaMetadata(ContentRecord):
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None
    size: Optional[float] = None


class MediaEntry(ContentRecord):
    id: Optional[int] = None
    key: str
    type: Literal["image", "video", "document"]
    source: Literal["upload", "youtube", "external"] = "upload"
    url: str
    alternative_text: Optional[str] = Field(default=None, alias="alternativeText")
    metadata: Optional[MediaMetadata] = None
    page: Optional[str] = None
    section: Optional[str] = None
    language: Literal["ru", "en", "he", "all"] = "all"
    order: int = 0
    is_active: bool = Field(default=True, alias="isActive")


class NavigationItem(ContentRecord):
    id: int
    key: str
    title_key: str = Field(alias="titleKey")
    href: Optional[str] = None
    order: int = 0
    parent_id: Optional[int] = Field(default=None, alias="parentId")
    is_active: bool = Field(default=True, alias="isActive")
    children: List["NavigationItem"] = Field(default_factory=list)


class HealthStatus(BaseModel):
    """Result of a content service reachability check."""

    status: Literal["ok", "error"]
    message: str
