"""Page settings: editable sections (home hero, about, contact) keyed by section name."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from kedjora.api.auth import require_session
from kedjora.core.database import get_db
from kedjora.core.sessions import SessionToken
from kedjora.models import PageContent
from kedjora.schemas.page_content import PageContentRead, PageContentUpsert
from kedjora.services.pages import get_section

router = APIRouter()


@router.get("", response_model=list[PageContentRead])
def list_settings(
    db: Annotated[Session, Depends(get_db)],
    section: Annotated[str | None, Query(max_length=64)] = None,
) -> list[PageContent]:
    query = db.query(PageContent)
    if section:
        query = query.filter(PageContent.section == section)
    return query.order_by(PageContent.section.asc()).all()


@router.get("/{section}", response_model=PageContentRead)
def get_setting(section: str, db: Annotated[Session, Depends(get_db)]) -> PageContent:
    content = get_section(db, section)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Section not found",
        )
    return content


@router.post("", response_model=PageContentRead)
def upsert_setting(
    _session: Annotated[SessionToken, Depends(require_session)],
    body: PageContentUpsert,
    db: Annotated[Session, Depends(get_db)],
) -> PageContent:
    """Create the section if it does not exist, otherwise replace its content."""
    fields = body.model_dump(exclude={"section"})
    content = get_section(db, body.section)
    if content is None:
        content = PageContent(section=body.section, **fields)
        db.add(content)
    else:
        for field, value in fields.items():
            setattr(content, field, value)
    db.commit()
    db.refresh(content)
    return content
