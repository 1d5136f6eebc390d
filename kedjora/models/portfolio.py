"""ORM model for portfolio (case study) entries."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from kedjora.models.base import Base, created_at_column, updated_at_column


class Portfolio(Base):
    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    client_name = Column(String(255), nullable=True)
    service_type = Column(String(255), nullable=False, index=True)
    image_urls = Column(JSON, nullable=False, default=list)
    technologies = Column(JSON, nullable=False, default=list)
    demo_url = Column(String(2048), nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = created_at_column()
    updated_at = updated_at_column()
