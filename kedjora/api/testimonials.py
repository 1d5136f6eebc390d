"""Testimonial CRUD. Reads are public; every write requires a session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from kedjora.api.auth import require_session
from kedjora.core.database import get_db
from kedjora.core.sessions import SessionToken
from kedjora.models import Testimonial
from kedjora.schemas.common import DeleteResponse
from kedjora.schemas.testimonial import TestimonialCreate, TestimonialRead, TestimonialUpdate
from kedjora.services import pages
from kedjora.services.content import apply_changes, get_or_404

router = APIRouter()

NON_NULLABLE_FIELDS = ("name", "content", "rating", "featured")


@router.get("", response_model=list[TestimonialRead])
def list_testimonials(
    db: Annotated[Session, Depends(get_db)],
    featured: Annotated[bool | None, Query()] = None,
) -> list[Testimonial]:
    """Featured testimonials first, then newest first."""
    return pages.testimonials(db, featured_only=bool(featured))


@router.post("", response_model=TestimonialRead)
def create_testimonial(
    _session: Annotated[SessionToken, Depends(require_session)],
    body: TestimonialCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Testimonial:
    testimonial = Testimonial(**body.model_dump())
    db.add(testimonial)
    db.commit()
    db.refresh(testimonial)
    return testimonial


@router.get("/{testimonial_id}", response_model=TestimonialRead)
def get_testimonial(testimonial_id: int, db: Annotated[Session, Depends(get_db)]) -> Testimonial:
    return get_or_404(db, Testimonial, testimonial_id, "Testimonial")


@router.patch("/{testimonial_id}", response_model=TestimonialRead)
def update_testimonial(
    _session: Annotated[SessionToken, Depends(require_session)],
    testimonial_id: int,
    body: TestimonialUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Testimonial:
    testimonial = get_or_404(db, Testimonial, testimonial_id, "Testimonial")
    apply_changes(
        testimonial,
        body.model_dump(exclude_unset=True),
        non_nullable=NON_NULLABLE_FIELDS,
    )
    db.commit()
    db.refresh(testimonial)
    return testimonial


@router.delete("/{testimonial_id}", response_model=DeleteResponse)
def delete_testimonial(
    _session: Annotated[SessionToken, Depends(require_session)],
    testimonial_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    testimonial = get_or_404(db, Testimonial, testimonial_id, "Testimonial")
    db.delete(testimonial)
    db.commit()
    return DeleteResponse()
