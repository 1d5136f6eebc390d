"""Schemas for page settings (editable page sections)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

SECTION_PATTERN = r"^[a-z0-9_-]+$"


class PageContentUpsert(BaseModel):
    """Create or replace the content of one section."""

    section: str = Field(..., min_length=1, max_length=64, pattern=SECTION_PATTERN)
    title: str | None = Field(default=None, max_length=255)
    subtitle: str | None = Field(default=None, max_length=512)
    content: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    button_text: str | None = Field(default=None, max_length=255)
    button_link: str | None = Field(default=None, max_length=2048)


class PageContentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    section: str
    title: str | None
    subtitle: str | None
    content: str | None
    image_url: str | None
    button_text: str | None
    button_link: str | None
    updated_at: datetime
