"""Endpoints para interacciones sobre publicaciones."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from realmhub.application.use_cases.notifications import NotificationProducer
from realmhub.application.use_cases.social import comment_on_post, like_post
from realmhub.domain.entities import User
from realmhub.infrastructure.database import get_db
from realmhub.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_producer,
)
from realmhub.interfaces.api.routes_helpers import http_error_for
from realmhub.interfaces.api.schemas import CommentCreate, CommentRead

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/{post_id}/likes", status_code=status.HTTP_204_NO_CONTENT)
def like(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    producer: NotificationProducer = Depends(get_notification_producer),
) -> None:
    """Marca la publicación como favorita y notifica a su autor."""

    try:
        like_post(db, post_id=post_id, user_id=current_user.id, producer=producer)
    except ValueError as exc:
        raise http_error_for(exc) from exc


@router.post(
    "/{post_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def comment(
    post_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    producer: NotificationProducer = Depends(get_notification_producer),
):
    """Comenta una publicación o responde a un comentario existente."""

    try:
        return comment_on_post(
            db,
            post_id=post_id,
            author_id=current_user.id,
            content=payload.content,
            parent_id=payload.parent_id,
            producer=producer,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
