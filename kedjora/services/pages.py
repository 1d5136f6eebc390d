"""Queries that assemble the public site's page models.

Visibility rules live here: inactive services and unpublished posts never
reach the public pages.
"""

from sqlalchemy.orm import Session

from kedjora.models import BlogPost, PageContent, Portfolio, Service, Testimonial

HOME_SERVICES_LIMIT = 4
HOME_PORTFOLIO_LIMIT = 3
RELATED_LIMIT = 3


def get_section(db: Session, section: str) -> PageContent | None:
    return db.query(PageContent).filter(PageContent.section == section).first()


def home_services(db: Session) -> list[Service]:
    """Active services for the home page, popular first, newest first."""
    return (
        db.query(Service)
        .filter(Service.is_active.is_(True))
        .order_by(Service.is_popular.desc(), Service.created_at.desc(), Service.id.desc())
        .limit(HOME_SERVICES_LIMIT)
        .all()
    )


def featured_portfolio(db: Session, limit: int = HOME_PORTFOLIO_LIMIT) -> list[Portfolio]:
    return (
        db.query(Portfolio)
        .filter(Portfolio.featured.is_(True))
        .order_by(Portfolio.created_at.desc(), Portfolio.id.desc())
        .limit(limit)
        .all()
    )


def active_services(db: Session) -> list[Service]:
    """Active services, popular first, then alphabetical."""
    return (
        db.query(Service)
        .filter(Service.is_active.is_(True))
        .order_by(Service.is_popular.desc(), Service.title.asc())
        .all()
    )


def active_service_by_slug(db: Session, slug: str) -> Service | None:
    service = db.query(Service).filter(Service.slug == slug).first()
    if service is None or not service.is_active:
        return None
    return service


def related_services(db: Session, service: Service) -> list[Service]:
    return (
        db.query(Service)
        .filter(Service.is_active.is_(True), Service.id != service.id)
        .order_by(Service.created_at.desc(), Service.id.desc())
        .limit(RELATED_LIMIT)
        .all()
    )


def all_portfolio(db: Session) -> list[Portfolio]:
    return (
        db.query(Portfolio)
        .order_by(Portfolio.featured.desc(), Portfolio.created_at.desc(), Portfolio.id.desc())
        .all()
    )


def portfolio_by_slug(db: Session, slug: str) -> Portfolio | None:
    return db.query(Portfolio).filter(Portfolio.slug == slug).first()


def related_portfolio(db: Session, item: Portfolio) -> list[Portfolio]:
    """Other entries with the same service type."""
    return (
        db.query(Portfolio)
        .filter(Portfolio.id != item.id, Portfolio.service_type == item.service_type)
        .order_by(Portfolio.created_at.desc(), Portfolio.id.desc())
        .limit(RELATED_LIMIT)
        .all()
    )


def testimonials(db: Session, featured_only: bool = False) -> list[Testimonial]:
    query = db.query(Testimonial)
    if featured_only:
        query = query.filter(Testimonial.featured.is_(True))
    return query.order_by(
        Testimonial.featured.desc(), Testimonial.created_at.desc(), Testimonial.id.desc()
    ).all()


def published_posts(db: Session) -> list[BlogPost]:
    return (
        db.query(BlogPost)
        .filter(BlogPost.published.is_(True))
        .order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
        .all()
    )
