"""ORM model for editable page sections (home hero, about, contact)."""

from sqlalchemy import Column, Integer, String, Text

from kedjora.models.base import Base, updated_at_column


class PageContent(Base):
    """One editable section of a public page, keyed by section name."""

    __tablename__ = "page_contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section = Column(String(64), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=True)
    subtitle = Column(String(512), nullable=True)
    content = Column(Text, nullable=True)
    image_url = Column(String(2048), nullable=True)
    button_text = Column(String(255), nullable=True)
    button_link = Column(String(2048), nullable=True)
    updated_at = updated_at_column()
