"""Service CRUD. Reads are public; every write requires a session."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kedjora.api.auth import require_session
from kedjora.core.database import get_db
from kedjora.core.sessions import SessionToken
from kedjora.models import Service
from kedjora.schemas.common import DeleteResponse
from kedjora.schemas.service import ServiceCreate, ServiceRead, ServiceUpdate
from kedjora.services.content import apply_changes, ensure_slug_available, get_or_404

logger = logging.getLogger(__name__)

router = APIRouter()

NON_NULLABLE_FIELDS = ("slug", "is_popular", "is_active")


@router.get("", response_model=list[ServiceRead])
def list_services(db: Annotated[Session, Depends(get_db)]) -> list[Service]:
    """All services, newest first, including inactive ones."""
    return db.query(Service).order_by(Service.created_at.desc(), Service.id.desc()).all()


@router.post("", response_model=ServiceRead)
def create_service(
    _session: Annotated[SessionToken, Depends(require_session)],
    body: ServiceCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Service:
    ensure_slug_available(db, Service, body.slug)
    service = Service(**body.model_dump())
    db.add(service)
    db.commit()
    db.refresh(service)
    logger.info("Service created", extra={"service_id": service.id})
    return service


@router.get("/{service_id}", response_model=ServiceRead)
def get_service(service_id: int, db: Annotated[Session, Depends(get_db)]) -> Service:
    return get_or_404(db, Service, service_id, "Service")


@router.patch("/{service_id}", response_model=ServiceRead)
def update_service(
    _session: Annotated[SessionToken, Depends(require_session)],
    service_id: int,
    body: ServiceUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Service:
    """
    Update a service. Booleans are written only when sent, so an explicit
    false is stored as false and an omitted flag keeps its current value.
    """
    service = get_or_404(db, Service, service_id, "Service")
    changes = body.model_dump(exclude_unset=True)
    if changes.get("slug"):
        ensure_slug_available(db, Service, changes["slug"], exclude_id=service.id)
    apply_changes(service, changes, non_nullable=NON_NULLABLE_FIELDS)
    db.commit()
    db.refresh(service)
    return service


@router.delete("/{service_id}", response_model=DeleteResponse)
def delete_service(
    _session: Annotated[SessionToken, Depends(require_session)],
    service_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    service = get_or_404(db, Service, service_id, "Service")
    db.delete(service)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Service still has orders and cannot be deleted.",
        ) from e
    logger.info("Service deleted", extra={"service_id": service_id})
    return DeleteResponse()
