"""Page models returned by the public site endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from kedjora.schemas.page_content import PageContentRead
from kedjora.schemas.portfolio import PortfolioRead
from kedjora.schemas.service import ServiceRead
from kedjora.schemas.testimonial import TestimonialRead


class BlogPostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    excerpt: str | None
    content: str
    cover_image_url: str | None
    created_at: datetime


class HomePage(BaseModel):
    hero: PageContentRead | None
    services: list[ServiceRead]
    featured_portfolio: list[PortfolioRead]


class ServicesPage(BaseModel):
    services: list[ServiceRead]


class ServiceDetailPage(BaseModel):
    service: ServiceRead
    related: list[ServiceRead]


class PortfolioPage(BaseModel):
    items: list[PortfolioRead]


class PortfolioDetailPage(BaseModel):
    item: PortfolioRead
    related: list[PortfolioRead]


class TestimonialsPage(BaseModel):
    testimonials: list[TestimonialRead]


class BlogPage(BaseModel):
    posts: list[BlogPostRead]


class AboutPage(BaseModel):
    about: PageContentRead | None


class ContactPage(BaseModel):
    contact: PageContentRead | None
    services: list[ServiceRead]
