"""Public contact form intake: turns a submission into a PENDING order."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kedjora.core.database import get_db
from kedjora.models import Order, OrderStatus, Service
from kedjora.schemas.order import ContactRequest, OrderRead

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
def submit_contact(
    body: ContactRequest,
    db: Annotated[Session, Depends(get_db)],
) -> Order:
    if db.get(Service, body.service_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found",
        )
    order = Order(**body.model_dump(), status=OrderStatus.PENDING.value)
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Contact order received", extra={"order_id": order.id, "service_id": order.service_id})
    return order
