"""Tests for direct message delivery through the realtime gateway."""

import asyncio
import json

import pytest


async def _connect(gateway, fake_websocket, user_id=None):
    return await gateway.connect(fake_websocket(), user_id=user_id)


async def _send(gateway, session, event_type, data=None):
    await gateway.handle_frame(session, json.dumps({"type": event_type, "data": data}))


@pytest.mark.anyio
async def test_alice_sends_bob_a_message(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)
    bob = await _connect(gateway, fake_websocket, user_id=2)
    await _send(gateway, alice, "joinRoom", 1)
    await _send(gateway, bob, "joinRoom", 2)

    await _send(gateway, alice, "sendMessage", {"senderId": 1, "receiverId": 2, "content": "hi"})

    assert len(store.messages) == 1
    stored = store.messages[0]
    received = bob.websocket.events("receiveMessage")
    assert received == [
        {
            "id": stored.id,
            "content": "hi",
            "imageUrl": None,
            "senderId": 1,
            "receiverId": 2,
            "createdAt": stored.created_at.isoformat(),
        }
    ]
    assert alice.websocket.sent == []


@pytest.mark.anyio
async def test_message_is_published_only_after_it_is_stored(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)
    bob = await _connect(gateway, fake_websocket, user_id=2)
    await _send(gateway, bob, "joinRoom", 2)
    store.gate = asyncio.Event()

    task = asyncio.create_task(
        gateway.send_message(alice, {"senderId": 1, "receiverId": 2, "content": "wait"})
    )
    for _ in range(5):
        await asyncio.sleep(0)

    assert store.messages == []
    assert bob.websocket.sent == []

    store.gate.set()
    saved = await task

    assert saved is not None and saved.id == 1
    assert [event["id"] for event in bob.websocket.events("receiveMessage")] == [saved.id]


@pytest.mark.anyio
async def test_every_session_of_the_receiver_gets_the_message(gateway, fake_websocket):
    sender = await _connect(gateway, fake_websocket, user_id=1)
    phone = await _connect(gateway, fake_websocket, user_id=2)
    laptop = await _connect(gateway, fake_websocket, user_id=2)
    stranger = await _connect(gateway, fake_websocket, user_id=3)
    for session in (phone, laptop, stranger):
        await _send(gateway, session, "joinRoom", session.user_id)

    await _send(gateway, sender, "sendMessage", {"senderId": 1, "receiverId": 2, "content": "yo"})

    assert len(phone.websocket.events("receiveMessage")) == 1
    assert len(laptop.websocket.events("receiveMessage")) == 1
    assert stranger.websocket.sent == []


@pytest.mark.anyio
async def test_message_to_offline_user_is_still_stored(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)

    saved = await gateway.send_message(alice, {"senderId": 1, "receiverId": 2, "imageUrl": "a.png"})

    assert saved is not None
    assert store.messages == [saved]
    assert alice.websocket.sent == []


@pytest.mark.anyio
async def test_missing_receiver_is_rejected_without_storing(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)

    await _send(gateway, alice, "sendMessage", {"senderId": 1, "content": "lost"})

    assert store.messages == []
    assert alice.websocket.events("error") == ["senderId and receiverId are required"]
    assert alice.is_open


@pytest.mark.anyio
async def test_empty_message_is_rejected(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)

    await _send(gateway, alice, "sendMessage", {"senderId": 1, "receiverId": 2, "content": "   "})

    assert store.messages == []
    assert alice.websocket.events("error") == ["Message must include content or an image"]


@pytest.mark.anyio
async def test_invalid_payload_is_rejected(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)

    await _send(gateway, alice, "sendMessage", {"senderId": 1, "receiverId": -4, "content": "x"})
    await _send(gateway, alice, "sendMessage", "not an object")

    assert store.messages == []
    assert alice.websocket.events("error") == ["Invalid message payload", "Invalid message payload"]


@pytest.mark.anyio
async def test_storage_failure_reports_error_to_sender_only(gateway, store, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)
    bob = await _connect(gateway, fake_websocket, user_id=2)
    await _send(gateway, bob, "joinRoom", 2)
    store.fail = True

    await _send(gateway, alice, "sendMessage", {"senderId": 1, "receiverId": 2, "content": "hi"})

    assert alice.websocket.events("error") == ["Failed to send message"]
    assert bob.websocket.sent == []
    assert alice.is_open


@pytest.mark.anyio
async def test_repeated_client_message_id_is_ignored(gateway, store, clock, fake_websocket):
    alice = await _connect(gateway, fake_websocket, user_id=1)
    bob = await _connect(gateway, fake_websocket, user_id=2)
    await _send(gateway, bob, "joinRoom", 2)
    payload = {"senderId": 1, "receiverId": 2, "content": "once", "clientMessageId": "abc"}

    await _send(gateway, alice, "sendMessage", payload)
    await _send(gateway, alice, "sendMessage", payload)

    assert len(store.messages) == 1
    assert len(bob.websocket.events("receiveMessage")) == 1
    assert alice.websocket.sent == []

    clock.now += 31
    await _send(gateway, alice, "sendMessage", payload)

    assert len(store.messages) == 2


@pytest.mark.anyio
async def test_client_message_id_can_be_retried_after_storage_failure(
    gateway, store, fake_websocket
):
    alice = await _connect(gateway, fake_websocket, user_id=1)
    payload = {"senderId": 1, "receiverId": 2, "content": "retry", "clientMessageId": "r-1"}
    store.fail = True
    assert await gateway.send_message(alice, payload) is None

    store.fail = False
    saved = await gateway.send_message(alice, payload)

    assert saved is not None
    assert len(store.messages) == 1
