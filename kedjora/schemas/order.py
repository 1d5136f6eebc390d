"""Schemas for contact-form orders and their admin status updates."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kedjora.models.order import OrderStatus


class ContactRequest(BaseModel):
    """Public contact form submission; becomes a PENDING order."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = Field(default=None, max_length=64)
    service_id: int
    message: str = Field(..., min_length=1, max_length=5000)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderServiceSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class OrderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None
    service_id: int
    service: OrderServiceSummary | None
    message: str
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
