"""Endpoints for the notification history of the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from realmhub.domain.entities import User
from realmhub.infrastructure.database import get_db
from realmhub.infrastructure.repositories import NotificationRepository
from realmhub.interfaces.api.dependencies import get_current_active_user
from realmhub.interfaces.api.routes_helpers import pagination_offset
from realmhub.interfaces.api.schemas import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
    UnreadCount,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the notifications of the authenticated user, newest first."""

    notifications = NotificationRepository(db).list_for_user(
        current_user.id,
        skip=pagination_offset(page, limit),
        limit=limit,
    )
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCount:
    return UnreadCount(unread=NotificationRepository(db).count_unread(current_user.id))


@router.post("/mark-read", response_model=NotificationMarkReadResponse)
def mark_notifications_as_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationMarkReadResponse:
    """Mark the given notifications of the authenticated user as read."""

    updated = NotificationRepository(db).mark_as_read(
        payload.unique_ids(), user_id=current_user.id
    )
    return NotificationMarkReadResponse(updated=updated)
