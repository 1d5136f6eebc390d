"""ORM model for the agency's service offerings."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from kedjora.models.base import Base, created_at_column, updated_at_column


class Service(Base):
    """A service shown on the public site; hidden there when is_active is False."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    features = Column(JSON, nullable=False, default=list)
    price = Column(String(255), nullable=True)
    image_url = Column(String(2048), nullable=True)
    is_popular = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
