"""Shared lookups for content resources (slug uniqueness, fetch-or-404)."""

from typing import TypeVar

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from kedjora.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def get_or_404(db: Session, model: type[ModelT], item_id: int, label: str) -> ModelT:
    item = db.get(model, item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found",
        )
    return item


def ensure_slug_available(
    db: Session,
    model: type[Base],
    slug: str,
    exclude_id: int | None = None,
) -> None:
    """Raise 400 if another row of this model already uses the slug."""
    query = db.query(model).filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Slug already exists",
        )


def apply_changes(item: Base, changes: dict, non_nullable: tuple[str, ...] = ()) -> None:
    """Copy request fields onto an ORM row; None is ignored for non-nullable columns."""
    for field, value in changes.items():
        if value is None and field in non_nullable:
            continue
        setattr(item, field, value)
