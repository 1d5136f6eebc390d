"""SQLAlchemy ORM models."""

from kedjora.models.base import Base
from kedjora.models.blog_post import BlogPost
from kedjora.models.order import Order, OrderStatus
from kedjora.models.page_content import PageContent
from kedjora.models.portfolio import Portfolio
from kedjora.models.service import Service
from kedjora.models.testimonial import Testimonial
from kedjora.models.user import Role, User

__all__ = [
    "Base",
    "BlogPost",
    "Order",
    "OrderStatus",
    "PageContent",
    "Portfolio",
    "Role",
    "Service",
    "Testimonial",
    "User",
]
