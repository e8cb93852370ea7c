"""Endpoints para el historial de mensajes directos."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from realmhub.domain.entities import User
from realmhub.infrastructure.database import get_db
from realmhub.infrastructure.repositories import MessageRepository, UserRepository
from realmhub.interfaces.api.dependencies import get_current_active_user
from realmhub.interfaces.api.routes_helpers import pagination_offset
from realmhub.interfaces.api.schemas import MessageRead

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/{other_user_id}", response_model=list[MessageRead])
def read_conversation(
    other_user_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Devuelve la conversación con otro usuario, empezando por lo más reciente."""

    if UserRepository(db).get(other_user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")

    return MessageRepository(db).list_conversation(
        current_user.id,
        other_user_id,
        skip=pagination_offset(page, limit),
        limit=limit,
    )
