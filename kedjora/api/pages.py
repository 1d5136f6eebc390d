"""Public page models: what each page of the marketing site shows."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kedjora.core.database import get_db
from kedjora.schemas.pages import (
    AboutPage,
    BlogPage,
    ContactPage,
    HomePage,
    PortfolioDetailPage,
    PortfolioPage,
    ServiceDetailPage,
    ServicesPage,
    TestimonialsPage,
)
from kedjora.services import pages

router = APIRouter()


@router.get("/home", response_model=HomePage)
def home_page(db: Annotated[Session, Depends(get_db)]) -> HomePage:
    return HomePage(
        hero=pages.get_section(db, "home"),
        services=pages.home_services(db),
        featured_portfolio=pages.featured_portfolio(db),
    )


@router.get("/services", response_model=ServicesPage)
def services_page(db: Annotated[Session, Depends(get_db)]) -> ServicesPage:
    return ServicesPage(services=pages.active_services(db))


@router.get("/services/{slug}", response_model=ServiceDetailPage)
def service_detail_page(slug: str, db: Annotated[Session, Depends(get_db)]) -> ServiceDetailPage:
    """Inactive services are reported as not found."""
    service = pages.active_service_by_slug(db, slug)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return ServiceDetailPage(service=service, related=pages.related_services(db, service))


@router.get("/portfolio", response_model=PortfolioPage)
def portfolio_page(db: Annotated[Session, Depends(get_db)]) -> PortfolioPage:
    return PortfolioPage(items=pages.all_portfolio(db))


@router.get("/portfolio/{slug}", response_model=PortfolioDetailPage)
def portfolio_detail_page(slug: str, db: Annotated[Session, Depends(get_db)]) -> PortfolioDetailPage:
    item = pages.portfolio_by_slug(db, slug)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Portfolio not found")
    return PortfolioDetailPage(item=item, related=pages.related_portfolio(db, item))


@router.get("/testimonials", response_model=TestimonialsPage)
def testimonials_page(db: Annotated[Session, Depends(get_db)]) -> TestimonialsPage:
    return TestimonialsPage(testimonials=pages.testimonials(db))


@router.get("/blog", response_model=BlogPage)
def blog_page(db: Annotated[Session, Depends(get_db)]) -> BlogPage:
    return BlogPage(posts=pages.published_posts(db))


@router.get("/about", response_model=AboutPage)
def about_page(db: Annotated[Session, Depends(get_db)]) -> AboutPage:
    return AboutPage(about=pages.get_section(db, "about"))


@router.get("/contact", response_model=ContactPage)
def contact_page(db: Annotated[Session, Depends(get_db)]) -> ContactPage:
    return ContactPage(
        contact=pages.get_section(db, "contact"),
        services=pages.active_services(db),
    )
