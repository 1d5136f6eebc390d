"""Schemas for testimonial CRUD."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TestimonialCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    content: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    image_url: str | None = Field(default=None, max_length=2048)
    featured: bool = False


class TestimonialUpdate(BaseModel):
    """Partial update; only fields present in the request are written."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)
    image_url: str | None = Field(default=None, max_length=2048)
    featured: bool = False


class TestimonialRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str | None
    company: str | None
    content: str
    rating: int
    image_url: str | None
    featured: bool
    created_at: datetime
    updated_at: datetime
