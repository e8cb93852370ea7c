"""Tests for the notification producer."""

import json

import pytest

from realmhub.application.use_cases.notifications import NotificationProducer
from realmhub.domain.entities import NotificationType, SourceType
from realmhub.infrastructure.realtime import PersistenceError


@pytest.mark.anyio
async def test_carol_follows_dave(gateway, store, fake_websocket):
    dave = await gateway.connect(fake_websocket(), user_id=4)
    await gateway.handle_frame(
        dave, json.dumps({"type": "subscribeToNotifications", "data": 4})
    )
    producer = NotificationProducer(gateway)

    saved = await producer.create_user_follow_notification(recipient_id=4, actor_id=3)
    await gateway.wait_for_deliveries()

    assert saved.type is NotificationType.FOLLOW
    assert saved.source_type is SourceType.USER
    assert saved.is_read is False
    assert store.notifications == [saved]
    [payload] = dave.websocket.events("receiveNotification")
    assert payload["type"] == "follow"
    assert payload["userId"] == 4
    assert payload["actorId"] == 3
    assert payload["postId"] is None


@pytest.mark.anyio
@pytest.mark.parametrize(
    ("method", "reference", "expected_type", "expected_source"),
    [
        ("create_post_like_notification", "post_id", NotificationType.POST_LIKE, SourceType.POST),
        (
            "create_post_comment_notification",
            "post_id",
            NotificationType.POST_COMMENT,
            SourceType.POST,
        ),
        (
            "create_comment_like_notification",
            "comment_id",
            NotificationType.COMMENT_LIKE,
            SourceType.COMMENT,
        ),
        (
            "create_comment_reply_notification",
            "comment_id",
            NotificationType.COMMENT_REPLY,
            SourceType.COMMENT,
        ),
        (
            "create_realm_join_notification",
            "realm_id",
            NotificationType.REALM_JOIN,
            SourceType.REALM,
        ),
    ],
)
async def test_each_producer_sets_type_source_and_reference(
    gateway, store, method, reference, expected_type, expected_source
):
    producer = NotificationProducer(gateway)

    saved = await getattr(producer, method)(recipient_id=1, actor_id=2, **{reference: 77})

    assert saved.type is expected_type
    assert saved.source_type is expected_source
    assert saved.reference_id == 77
    assert getattr(saved, reference) == 77
    others = {"post_id", "comment_id", "realm_id"} - {reference}
    assert all(getattr(saved, name) is None for name in others)


@pytest.mark.anyio
async def test_producer_propagates_storage_failure(gateway, store):
    store.fail = True
    producer = NotificationProducer(gateway)

    with pytest.raises(PersistenceError):
        await producer.create_realm_join_notification(recipient_id=1, actor_id=2, realm_id=3)
