"""JSON API routes."""

from fastapi import APIRouter

from kedjora.api import auth, contact, health, orders, pages, portfolio, services, settings, testimonials

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(pages.router, prefix="/pages", tags=["pages"])
