from __future__ import annotations

from loyalty.core.config import Settings
from loyalty.core.errors import NotFound, Unavailable
from loyalty.messaging.redis_queue import QueueDestination, RedisQueueConnectionFactory


class SettingsDirectory:
    """
    Resolves the notification queue and connection factory names
    from application settings.

    An unknown name or an empty setting is NotFound; a broker URL that
    cannot be turned into a connection pool is Unavailable.
    """

    def __init__(self, config: Settings):
        self.config = config

    def lookup(self, name: str):
        if name == self.config.NOTIFICATION_QUEUE_NAME:
            return self._queue(name)
        if name == self.config.NOTIFICATION_FACTORY_NAME:
            return self._factory(name)
        raise NotFound(f"No resource bound to {name}")

    def _queue(self, name: str) -> QueueDestination:
        queue = (self.config.NOTIFICATION_QUEUE or "").strip()
        if not queue:
            raise NotFound(f"{name} is not configured (NOTIFICATION_QUEUE is empty)")
        return QueueDestination(queue)

    def _factory(self, name: str) -> RedisQueueConnectionFactory:
        url = (self.config.NOTIFICATION_BROKER_URL or "").strip()
        if not url:
            raise NotFound(f"{name} is not configured (NOTIFICATION_BROKER_URL is empty)")
        try:
            return RedisQueueConnectionFactory(url, socket_timeout=self.config.NOTIFICATION_SOCKET_TIMEOUT)
        except ValueError as e:
            raise Unavailable(f"{name}: invalid broker url ({e})") from e
