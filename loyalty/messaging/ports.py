"""Ports for the notification directory and message transport."""

from __future__ import annotations

from typing import Any, Protocol


class Destination(Protocol):
    name: str


class Sender(Protocol):
    def send(self, text: str) -> None:
        ...

    def close(self) -> None:
        ...


class Session(Protocol):
    def create_sender(self, destination: Destination) -> Sender:
        ...

    def close(self) -> None:
        ...


class Connection(Protocol):
    def create_session(self) -> Session:
        ...

    def close(self) -> None:
        ...


class ConnectionFactory(Protocol):
    """Must allow independent connections to be created from many threads."""

    def create_connection(self) -> Connection:
        ...


class Directory(Protocol):
    """Resolves a logical resource name; raises NotFound or Unavailable."""

    def lookup(self, name: str) -> Any:
        ...
