"""
NotificationDispatcher: change detection, payload, fail-soft, cleanup.
"""
import json
import logging
from decimal import Decimal

import pytest

from loyalty.core.errors import SEND_HEADER, LOOKUP_HEADER, FailureKind
from loyalty.core.tier_rules import Tier
from loyalty.schemas.loyalty import ChangeNotification, ClassificationInput
from loyalty.services.connection import ConnectionProvider
from loyalty.services.notifications import NotificationDispatcher

from fakes import FACTORY_NAME, QUEUE_NAME, FakeDirectory, FakeQueue

LOGGER = "loyalty.services.notifications"


def _input(owner="alice", previous="Basic", total="75000.00"):
    return ClassificationInput(owner=owner, previous_tier=previous, total_value=Decimal(total))


def test_unchanged_tier_does_not_touch_messaging(dispatcher, directory, transport):
    dispatcher.notify_if_changed(_input("bob", "Gold", "150000.00"), Tier.GOLD)

    assert directory.calls == []
    assert transport.opened == {"connection": 0, "session": 0, "sender": 0}
    assert transport.sent == []


def test_changed_tier_sends_one_notification(dispatcher, transport):
    dispatcher.notify_if_changed(_input(), Tier.SILVER)

    assert len(transport.sent) == 1
    queue, text = transport.sent[0]
    assert queue == "loyalty.notifications"
    assert json.loads(text) == {"owner": "alice", "old": "Basic", "new": "Silver"}


def test_caller_identity_is_sent_as_id(dispatcher, transport):
    dispatcher.notify_if_changed(_input(), Tier.SILVER, caller_identity="trader1")

    _, text = transport.sent[0]
    assert text == '{"id":"trader1","owner":"alice","old":"Basic","new":"Silver"}'


def test_empty_identity_is_omitted(dispatcher, transport):
    dispatcher.notify_if_changed(_input(), Tier.SILVER, caller_identity="")

    _, text = transport.sent[0]
    assert "id" not in json.loads(text)


def test_channel_closed_after_success(dispatcher, transport):
    dispatcher.notify_if_changed(_input(), Tier.SILVER)

    assert transport.opened == {"connection": 1, "session": 1, "sender": 1}
    assert transport.leaked == {"connection": 0, "session": 0, "sender": 0}


@pytest.mark.parametrize("fail_on", ["connect", "session", "sender", "send"])
def test_channel_closed_on_every_failure_path(dispatcher, transport, fail_on):
    transport.fail_on = fail_on

    for _ in range(3):
        dispatcher.notify_if_changed(_input(), Tier.SILVER)

    assert transport.sent == []
    assert transport.leaked == {"connection": 0, "session": 0, "sender": 0}


def test_channel_is_not_reused_between_sends(dispatcher, transport):
    dispatcher.notify_if_changed(_input(), Tier.SILVER)
    dispatcher.notify_if_changed(_input("carol", "Silver", "200000"), Tier.GOLD)

    assert transport.opened["connection"] == 2
    assert len(transport.sent) == 2


def test_send_failure_is_swallowed_and_logged(dispatcher, transport, caplog):
    transport.fail_on = "send"
    transport.linked = ConnectionError("broker went away")
    caplog.set_level(logging.WARNING, logger=LOGGER)

    assert dispatcher.notify_if_changed(_input(), Tier.SILVER) is None

    messages = [r.getMessage() for r in caplog.records]
    assert messages.count(SEND_HEADER) == 1
    assert "MessagingError: send rejected" in messages
    assert "ConnectionError: broker went away" in messages


def test_lookup_failure_is_swallowed_and_not_cached(transport, caplog):
    directory = FakeDirectory(
        {QUEUE_NAME: FakeQueue("q"), FACTORY_NAME: transport},
        failures=1,
    )
    provider = ConnectionProvider(directory, queue_name=QUEUE_NAME, factory_name=FACTORY_NAME)
    dispatcher = NotificationDispatcher(provider)
    caplog.set_level(logging.WARNING, logger=LOGGER)

    dispatcher.notify_if_changed(_input(), Tier.SILVER)

    assert not provider.ready
    assert transport.sent == []
    assert [r.getMessage() for r in caplog.records].count(LOOKUP_HEADER) == 1

    dispatcher.notify_if_changed(_input(), Tier.SILVER)
    assert provider.ready
    assert len(transport.sent) == 1


def test_traceback_only_logged_at_debug(dispatcher, transport, caplog):
    transport.fail_on = "connect"

    caplog.set_level(logging.WARNING, logger=LOGGER)
    dispatcher.notify_if_changed(_input(), Tier.SILVER)
    assert not any("Traceback" in r.getMessage() for r in caplog.records)

    caplog.clear()
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    dispatcher.notify_if_changed(_input(), Tier.SILVER)
    assert any(r.levelno == logging.DEBUG and "Traceback" in r.getMessage() for r in caplog.records)


def test_unexpected_error_is_classified_unclassified(provider):
    class BrokenFactory:
        def create_connection(self):
            raise RuntimeError("boom")

    provider.directory.bindings[FACTORY_NAME] = BrokenFactory()
    dispatcher = NotificationDispatcher(provider)

    outcome = dispatcher.dispatch(ChangeNotification(owner="alice", previous_tier="Basic", new_tier="Silver"))

    assert not outcome.delivered
    assert outcome.failure.kind is FailureKind.UNCLASSIFIED
    assert isinstance(outcome.failure.error, RuntimeError)


def test_dispatch_reports_delivery(dispatcher, transport):
    outcome = dispatcher.dispatch(ChangeNotification(owner="dave", previous_tier="Gold", new_tier="Platinum"))

    assert outcome.delivered
    assert outcome.failure is None
    assert len(transport.sent) == 1


def test_send_failure_outcome_is_send(dispatcher, transport):
    transport.fail_on = "send"

    outcome = dispatcher.dispatch(ChangeNotification(owner="dave", previous_tier="Gold", new_tier="Platinum"))

    assert outcome.failure.kind is FailureKind.SEND
