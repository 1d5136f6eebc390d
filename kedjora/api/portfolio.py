"""Portfolio CRUD. Reads are public; every write requires a session."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from kedjora.api.auth import require_session
from kedjora.core.database import get_db
from kedjora.core.sessions import SessionToken
from kedjora.models import Portfolio
from kedjora.schemas.common import DeleteResponse
from kedjora.schemas.portfolio import PortfolioCreate, PortfolioRead, PortfolioUpdate
from kedjora.services.content import apply_changes, ensure_slug_available, get_or_404

logger = logging.getLogger(__name__)

router = APIRouter()

NON_NULLABLE_FIELDS = ("slug", "featured")


@router.get("", response_model=list[PortfolioRead])
def list_portfolio(
    db: Annotated[Session, Depends(get_db)],
    featured: Annotated[bool | None, Query()] = None,
) -> list[Portfolio]:
    query = db.query(Portfolio)
    if featured:
        query = query.filter(Portfolio.featured.is_(True))
    return query.order_by(Portfolio.created_at.desc(), Portfolio.id.desc()).all()


@router.post("", response_model=PortfolioRead)
def create_portfolio(
    _session: Annotated[SessionToken, Depends(require_session)],
    body: PortfolioCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Portfolio:
    ensure_slug_available(db, Portfolio, body.slug)
    item = Portfolio(**body.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Portfolio item created", extra={"portfolio_id": item.id})
    return item


@router.get("/{item_id}", response_model=PortfolioRead)
def get_portfolio(item_id: int, db: Annotated[Session, Depends(get_db)]) -> Portfolio:
    return get_or_404(db, Portfolio, item_id, "Portfolio")


@router.patch("/{item_id}", response_model=PortfolioRead)
def update_portfolio(
    _session: Annotated[SessionToken, Depends(require_session)],
    item_id: int,
    body: PortfolioUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Portfolio:
    item = get_or_404(db, Portfolio, item_id, "Portfolio")
    changes = body.model_dump(exclude_unset=True)
    if changes.get("slug"):
        ensure_slug_available(db, Portfolio, changes["slug"], exclude_id=item.id)
    apply_changes(item, changes, non_nullable=NON_NULLABLE_FIELDS)
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=DeleteResponse)
def delete_portfolio(
    _session: Annotated[SessionToken, Depends(require_session)],
    item_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    item = get_or_404(db, Portfolio, item_id, "Portfolio")
    db.delete(item)
    db.commit()
    logger.info("Portfolio item deleted", extra={"portfolio_id": item_id})
    return DeleteResponse()
