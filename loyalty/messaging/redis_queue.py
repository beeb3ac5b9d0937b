"""
Redis list transport for loyalty notifications.

A queue is a Redis list; sending is an RPUSH of the UTF-8 payload.
The connection factory owns one connection pool for the process.
Connections, sessions and senders are thin wrappers created per send.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import redis

from loyalty.core.errors import MessagingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueueDestination:
    name: str


class RedisQueueSender:
    def __init__(self, client: redis.Redis, destination: QueueDestination):
        self._client = client
        self._destination = destination
        self._closed = False

    @property
    def destination(self) -> QueueDestination:
        return self._destination

    def send(self, text: str) -> None:
        if self._closed:
            raise MessagingError("Sender is closed")
        try:
            self._client.rpush(self._destination.name, text.encode("utf-8"))
        except redis.RedisError as e:
            raise MessagingError(f"Failed to send to {self._destination.name}", linked_exception=e) from e

    def close(self) -> None:
        self._closed = True


class RedisQueueSession:
    def __init__(self, client: redis.Redis):
        self._client = client
        self._closed = False

    def create_sender(self, destination: QueueDestination) -> RedisQueueSender:
        if self._closed:
            raise MessagingError("Session is closed")
        return RedisQueueSender(self._client, destination)

    def close(self) -> None:
        self._closed = True


class RedisQueueConnection:
    def __init__(self, client: redis.Redis):
        self._client = client
        self._closed = False

    def create_session(self) -> RedisQueueSession:
        if self._closed:
            raise MessagingError("Connection is closed")
        return RedisQueueSession(self._client)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        # returns pooled sockets; the shared pool itself stays open
        self._client.close()


class RedisQueueConnectionFactory:
    def __init__(self, url: str, socket_timeout: float = 5.0):
        self.url = url
        self._pool = redis.ConnectionPool.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )

    def create_connection(self) -> RedisQueueConnection:
        client = redis.Redis(connection_pool=self._pool)
        try:
            client.ping()
        except redis.RedisError as e:
            client.close()
            raise MessagingError("Unable to connect to notification broker", linked_exception=e) from e
        return RedisQueueConnection(client)
