"""
Loyalty change notifications.

When a portfolio moves to a different tier, a flat JSON message
{"id"?, "owner", "old", "new"} is pushed to the notification queue.
Delivery is best effort: lookup and transport failures are logged and
dropped, the loyalty query always returns its result. Nothing is retried;
the next tier change triggers a fresh attempt.
"""
from __future__ import annotations

import logging
from contextlib import ExitStack, closing
from dataclasses import dataclass

from loyalty.core.errors import Failure, classify_failure, log_failure
from loyalty.core.tier_rules import Tier
from loyalty.schemas.loyalty import ChangeNotification, ClassificationInput
from loyalty.services.connection import ConnectionProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryOutcome:
    delivered: bool
    failure: Failure | None = None


class NotificationDispatcher:
    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def notify_if_changed(
        self,
        data: ClassificationInput,
        new_tier: Tier,
        caller_identity: str | None = None,
    ) -> None:
        if new_tier.value == data.previous_tier:
            return

        logger.debug("Change in loyalty level detected for %s: %s -> %s", data.owner, data.previous_tier, new_tier.value)
        notification = ChangeNotification(
            user_id=caller_identity or None,
            owner=data.owner,
            previous_tier=data.previous_tier,
            new_tier=new_tier.value,
        )

        outcome = self.dispatch(notification)
        if outcome.failure is not None:
            log_failure(logger, outcome.failure)

    def dispatch(self, notification: ChangeNotification) -> DeliveryOutcome:
        """Single delivery attempt. Never raises; failures come back classified."""
        try:
            self._send(notification)
        except Exception as e:
            return DeliveryOutcome(delivered=False, failure=classify_failure(e))
        return DeliveryOutcome(delivered=True)

    def _send(self, notification: ChangeNotification) -> None:
        handle = self.provider.ensure_ready()
        contents = notification.to_payload()

        with ExitStack() as stack:
            connection = stack.enter_context(closing(handle.connection_factory.create_connection()))
            session = stack.enter_context(closing(connection.create_session()))
            sender = stack.enter_context(closing(session.create_sender(handle.destination)))

            logger.debug("Sending %s to %s", contents, handle.destination.name)
            sender.send(contents)

        logger.info("Notification message sent successfully")
