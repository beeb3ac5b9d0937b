from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any

from loyalty.core.errors import DirectoryError, LookupFailure
from loyalty.messaging.ports import ConnectionFactory, Destination, Directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessagingHandle:
    destination: Destination
    connection_factory: ConnectionFactory


class ConnectionProvider:
    """
    Lazily resolves the notification queue and its connection factory.

    The handle is looked up on the first ``ensure_ready()`` and kept for
    the lifetime of the provider; it is never re-validated or torn down.
    A failed lookup leaves the provider not ready so the next call starts
    over.
    """

    def __init__(self, directory: Directory, queue_name: str, factory_name: str):
        self.directory = directory
        self.queue_name = queue_name
        self.factory_name = factory_name
        self._handle: MessagingHandle | None = None
        self._lock = Lock()

    @property
    def ready(self) -> bool:
        return self._handle is not None

    def ensure_ready(self) -> MessagingHandle:
        handle = self._handle
        if handle is not None:
            return handle

        with self._lock:
            if self._handle is None:
                self._handle = self._acquire()
            return self._handle

    def _acquire(self) -> MessagingHandle:
        logger.debug("Looking up messaging resources")
        factory = self._lookup(self.factory_name)
        destination = self._lookup(self.queue_name)
        logger.debug("Messaging initialization completed successfully")
        return MessagingHandle(destination=destination, connection_factory=factory)

    def _lookup(self, name: str) -> Any:
        try:
            return self.directory.lookup(name)
        except DirectoryError as e:
            raise LookupFailure(name, str(e)) from e
