"""Orders: read publicly, status changes and deletion by signed-in admins only.

New orders come in through the public contact form (see contact.py).
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kedjora.api.auth import require_session
from kedjora.core.database import get_db
from kedjora.core.sessions import SessionToken
from kedjora.models import Order
from kedjora.schemas.common import DeleteResponse
from kedjora.schemas.order import OrderRead, OrderStatusUpdate
from kedjora.services.content import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[OrderRead])
def list_orders(db: Annotated[Session, Depends(get_db)]) -> list[Order]:
    return db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()


@router.get("/{order_id}", response_model=OrderRead)
def get_order(order_id: int, db: Annotated[Session, Depends(get_db)]) -> Order:
    return get_or_404(db, Order, order_id, "Order")


@router.patch("/{order_id}", response_model=OrderRead)
def update_order_status(
    _session: Annotated[SessionToken, Depends(require_session)],
    order_id: int,
    body: OrderStatusUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Order:
    order = get_or_404(db, Order, order_id, "Order")
    previous = order.status
    order.status = body.status.value
    db.commit()
    db.refresh(order)
    logger.info(
        "Order status changed",
        extra={"order_id": order.id, "from_status": previous, "to_status": order.status},
    )
    return order


@router.delete("/{order_id}", response_model=DeleteResponse)
def delete_order(
    _session: Annotated[SessionToken, Depends(require_session)],
    order_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    order = get_or_404(db, Order, order_id, "Order")
    db.delete(order)
    db.commit()
    return DeleteResponse()
