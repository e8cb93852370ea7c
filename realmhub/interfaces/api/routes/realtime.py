"""Websocket endpoint for direct messages and live notifications."""

from __future__ import annotations

import logging

from anyio import to_thread
from fastapi import APIRouter, HTTPException, WebSocket, status

from realmhub.domain.entities import User
from realmhub.infrastructure.database import SessionLocal
from realmhub.infrastructure.realtime import RealtimeGateway
from realmhub.interfaces.api.dependencies import resolve_current_user

router = APIRouter(prefix="/realtime", tags=["realtime"])
logger = logging.getLogger(__name__)


def _resolve_active_user(token: str) -> User | None:
    with SessionLocal() as session:
        try:
            user = resolve_current_user(token, session)
        except HTTPException:
            return None
    return user if user.is_active else None


@router.websocket("/ws")
async def realtime_websocket(websocket: WebSocket) -> None:
    """Accept a realtime session, authenticated through the ``token`` query parameter."""

    gateway: RealtimeGateway = websocket.app.state.realtime_gateway

    token = websocket.query_params.get("token")
    user_id: int | None = None
    if token:
        user = await to_thread.run_sync(_resolve_active_user, token)
        if user is None:
            logger.info("Rejected realtime connection with an invalid token")
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return
        user_id = user.id
    elif gateway.require_auth:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    session = await gateway.connect(websocket, user_id=user_id)
    await gateway.serve(session)
