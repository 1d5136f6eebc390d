"""ORM model for orders submitted through the contact form."""

import enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from kedjora.models.base import Base, created_at_column, updated_at_column


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Order(Base):
    """A prospective client's request for one service."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=True)
    service_id = Column(
        Integer,
        ForeignKey("services.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    message = Column(Text, nullable=False)
    status = Column(String(32), nullable=False, default=OrderStatus.PENDING.value)
    created_at = created_at_column()
    updated_at = updated_at_column()

    service = relationship("Service", lazy="joined")
