"""Endpoints para la membresía de reinos."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import NotificationProducer
from realmhub.application.use_cases.social import join_realm
from realmhub.domain.entities import User
from realmhub.infrastructure.database import get_db
from realmhub.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_producer,
)
from realmhub.interfaces.api.routes_helpers import http_error_for

router = APIRouter(prefix="/realms", tags=["realms"])


@router.post("/{realm_id}/members", status_code=status.HTTP_204_NO_CONTENT)
def join(
    realm_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    producer: NotificationProducer = Depends(get_notification_producer),
) -> None:
    """Une al usuario autenticado al reino y notifica a su creador."""

    try:
        join_realm(db, realm_id=realm_id, user_id=current_user.id, producer=producer)
    except ValueError as exc:
        raise http_error_for(exc) from exc
