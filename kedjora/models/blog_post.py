"""ORM model for blog posts; only published posts reach the public site."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from kedjora.models.base import Base, created_at_column, updated_at_column


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    excerpt = Column(String(1024), nullable=True)
    content = Column(Text, nullable=False)
    cover_image_url = Column(String(2048), nullable=True)
    published = Column(Boolean, nullable=False, default=False, index=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
