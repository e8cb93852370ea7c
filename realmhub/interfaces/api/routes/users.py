"""Endpoints para registro de usuarios y relaciones de seguimiento."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import NotificationProducer
from realmhub.application.use_cases.social import follow_user, unfollow_user
from realmhub.application.use_cases.users import create_user
from realmhub.domain.entities import User
from realmhub.infrastructure.database import get_db
from realmhub.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_producer,
)
from realmhub.interfaces.api.routes_helpers import http_error_for
from realmhub.interfaces.api.schemas import UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Registra un nuevo usuario."""

    try:
        user = create_user(
            db,
            username=payload.username,
            email=payload.email,
            password=payload.password,
            bio=payload.bio,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return user


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Devuelve el usuario autenticado."""

    return current_user


@router.post("/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
def follow(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    producer: NotificationProducer = Depends(get_notification_producer),
) -> None:
    """Sigue al usuario indicado y le notifica."""

    try:
        follow_user(db, follower_id=current_user.id, following_id=user_id, producer=producer)
    except ValueError as exc:
        raise http_error_for(exc) from exc


@router.delete("/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
def unfollow(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> None:
    """Deja de seguir al usuario indicado."""

    try:
        unfollow_user(db, follower_id=current_user.id, following_id=user_id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
