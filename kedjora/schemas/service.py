"""Schemas for service CRUD."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class ServiceCreate(BaseModel):
    """New service. Booleans default to not popular, active."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    description: str = Field(..., min_length=1)
    features: list[str] = Field(..., min_length=1, description="Bullet points shown on the service page")
    price: str | None = Field(default=None, max_length=255)
    image_url: str | None = Field(default=None, max_length=2048)
    is_popular: bool = False
    is_active: bool = True


class ServiceUpdate(BaseModel):
    """
    Update a service. title, description and features are always required;
    any other field left out of the request keeps its stored value.
    """

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    features: list[str] = Field(..., min_length=1)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    price: str | None = Field(default=None, max_length=255)
    image_url: str | None = Field(default=None, max_length=2048)
    is_popular: bool = False
    is_active: bool = True


class ServiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str
    features: list[str]
    price: str | None
    image_url: str | None
    is_popular: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime
