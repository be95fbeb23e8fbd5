from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentWebhookPayload(BaseModel):
    """Change notification sent by the content service.

    - event: Lifecycle event, e.g. "entry.publish", "entry.update".
    - created_at: Event timestamp as sent (createdAt).
    - model: Content type that changed, e.g. "translation".
    - uid: Fully qualified content type id, when provided.
    - entry: The changed record; an explicit null is read as empty.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event: str
    created_at: str | None = Field(default=None, alias="createdAt")
    model: str
    uid: str | None = None
    entry: Optional[Dict[str, Any]] = Field(default_factory=dict)

    @field_validator("entry", mode="before")
    @classmethod
    def entry_null_as_empty(cls, v):
        return {} if v is None else v


class WebhookResult(BaseModel):
    status: str
    event: str | None = None
    model: str | None = None
    invalidated: list[str] = Field(default_factory=list)
    prewarmed: bool = False
    message: str | None = None

    model_config = ConfigDict(extra="forbid")
