"""Schemas for portfolio CRUD."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kedjora.schemas.service import SLUG_PATTERN


class PortfolioCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    description: str = Field(..., min_length=1)
    client_name: str | None = Field(default=None, max_length=255)
    service_type: str = Field(..., min_length=1, max_length=255)
    image_urls: list[str] = Field(..., min_length=1)
    technologies: list[str] = Field(..., min_length=1)
    demo_url: str | None = Field(default=None, max_length=2048)
    featured: bool = False


class PortfolioUpdate(BaseModel):
    """Fields left out of the request keep their stored values."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    service_type: str = Field(..., min_length=1, max_length=255)
    image_urls: list[str] = Field(..., min_length=1)
    technologies: list[str] = Field(..., min_length=1)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    client_name: str | None = Field(default=None, max_length=255)
    demo_url: str | None = Field(default=None, max_length=2048)
    featured: bool = False


class PortfolioRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str
    client_name: str | None
    service_type: str
    image_urls: list[str]
    technologies: list[str]
    demo_url: str | None
    featured: bool
    created_at: datetime
    updated_at: datetime
