from __future__ import annotations

import logging
from decimal import Decimal

from loyalty.core.config import Settings
from loyalty.core.tier_rules import tier_from_total
from loyalty.messaging.directory import SettingsDirectory
from loyalty.schemas.loyalty import ClassificationInput, LoyaltyOut
from loyalty.services.connection import ConnectionProvider
from loyalty.services.notifications import NotificationDispatcher

logger = logging.getLogger(__name__)


def build_dispatcher(config: Settings) -> NotificationDispatcher:
    provider = ConnectionProvider(
        SettingsDirectory(config),
        queue_name=config.NOTIFICATION_QUEUE_NAME,
        factory_name=config.NOTIFICATION_FACTORY_NAME,
    )
    return NotificationDispatcher(provider)


def get_loyalty(
    owner: str,
    previous_tier: str,
    total_value: Decimal | int | float,
    caller_identity: str | None,
    dispatcher: NotificationDispatcher,
) -> LoyaltyOut:
    data = ClassificationInput(owner=owner, previous_tier=previous_tier, total_value=total_value)
    tier = tier_from_total(data.total_value)
    logger.debug("Loyalty level = %s", tier.value)

    dispatcher.notify_if_changed(data, tier, caller_identity)

    return LoyaltyOut(owner=owner, loyalty=tier.value)
