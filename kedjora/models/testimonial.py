"""ORM model for client testimonials."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from kedjora.models.base import Base, created_at_column, updated_at_column


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    position = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    image_url = Column(String(2048), nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = created_at_column()
    updated_at = updated_at_column()
