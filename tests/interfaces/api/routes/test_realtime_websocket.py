"""End-to-end tests for the realtime websocket endpoint."""

from __future__ import annotations

import pytest
from fastapi import WebSocketDisconnect


def _sync(websocket) -> None:
    """Wait until every earlier frame of ``websocket`` has been processed."""

    websocket.send_json({"type": "ping"})
    assert websocket.receive_json() == {"type": "pong", "data": None}


def test_connection_without_token_is_refused(client) -> None:
    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect("/realtime/ws"):
            pass

    assert excinfo.value.code == 1008


def test_connection_with_invalid_token_is_refused(client) -> None:
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/realtime/ws?token=invalid"):
            pass


def test_alice_messages_bob_over_websocket(client, register) -> None:
    alice = register("alice")
    bob = register("bob")

    with client.websocket_connect(f"/realtime/ws?token={bob.token}") as bob_ws, \
            client.websocket_connect(f"/realtime/ws?token={alice.token}") as alice_ws:
        bob_ws.send_json({"type": "joinRoom", "data": bob.id})
        _sync(bob_ws)
        alice_ws.send_json({"type": "joinRoom", "data": alice.id})
        _sync(alice_ws)

        alice_ws.send_json(
            {
                "type": "sendMessage",
                "data": {"senderId": alice.id, "receiverId": bob.id, "content": "hi"},
            }
        )
        frame = bob_ws.receive_json()
        # alice only gets her own pong back
        _sync(alice_ws)

    assert frame["type"] == "receiveMessage"
    message = frame["data"]
    assert message["senderId"] == alice.id
    assert message["receiverId"] == bob.id
    assert message["content"] == "hi"
    assert message["id"] is not None
    assert message["createdAt"] is not None

    history = client.get(f"/messages/{bob.id}", headers=alice.headers)
    assert history.status_code == 200
    assert [item["id"] for item in history.json()] == [message["id"]]


def test_cannot_impersonate_another_user(client, register) -> None:
    alice = register("alice")
    bob = register("bob")

    with client.websocket_connect(f"/realtime/ws?token={alice.token}") as alice_ws:
        alice_ws.send_json({"type": "joinRoom", "data": bob.id})
        error = alice_ws.receive_json()
        alice_ws.send_json(
            {
                "type": "sendMessage",
                "data": {"senderId": bob.id, "receiverId": alice.id, "content": "fake"},
            }
        )
        second_error = alice_ws.receive_json()

    assert error == {"type": "error", "data": "Cannot act on behalf of another user"}
    assert second_error == error
    assert client.get(f"/messages/{bob.id}", headers=alice.headers).json() == []


def test_message_to_unknown_user_reports_failure(client, register) -> None:
    alice = register("alice")

    with client.websocket_connect(f"/realtime/ws?token={alice.token}") as alice_ws:
        alice_ws.send_json(
            {
                "type": "sendMessage",
                "data": {"senderId": alice.id, "receiverId": 999, "content": "anyone?"},
            }
        )
        frame = alice_ws.receive_json()
        _sync(alice_ws)

    assert frame == {"type": "error", "data": "Failed to send message"}


def test_binary_frame_is_answered_with_an_error(client, register) -> None:
    alice = register("alice")

    with client.websocket_connect(f"/realtime/ws?token={alice.token}") as alice_ws:
        alice_ws.send_bytes(b'{"type": "ping"}')
        error = alice_ws.receive_json()
        _sync(alice_ws)

    assert error == {"type": "error", "data": "Malformed event: expected text"}
