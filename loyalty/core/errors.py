"""
Error taxonomy for the notification path.

Directory and transport errors never reach the caller of the loyalty
query. They are mapped once to a ``Failure`` value and logged.
"""
from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from enum import Enum


class DirectoryError(Exception):
    """Base for directory lookup errors."""


class NotFound(DirectoryError):
    pass


class Unavailable(DirectoryError):
    pass


class LookupFailure(Exception):
    """The messaging destination or connection factory could not be resolved."""

    def __init__(self, name: str, message: str):
        super().__init__(f"{name}: {message}")
        self.name = name


class MessagingError(Exception):
    """The messaging transport rejected or could not deliver a payload."""

    def __init__(self, message: str, linked_exception: BaseException | None = None):
        super().__init__(message)
        self.linked_exception = linked_exception


class FailureKind(str, Enum):
    LOOKUP = "lookup"
    SEND = "send"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    error: BaseException


LOOKUP_HEADER = (
    "Unable to look up messaging resources from the directory. "
    "Check the notification settings."
)
SEND_HEADER = (
    "Unable to send message to messaging provider. "
    "Continuing without notification of change in loyalty level."
)


def classify_failure(exc: BaseException) -> Failure:
    if isinstance(exc, LookupFailure):
        return Failure(FailureKind.LOOKUP, exc)
    if isinstance(exc, MessagingError):
        return Failure(FailureKind.SEND, exc)
    return Failure(FailureKind.UNCLASSIFIED, exc)


def log_exception(logger: logging.Logger, exc: BaseException) -> None:
    logger.warning("%s: %s", type(exc).__name__, exc)

    # stack trace only when debug is on
    if logger.isEnabledFor(logging.DEBUG):
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.debug(trace)


def log_failure(logger: logging.Logger, failure: Failure) -> None:
    if failure.kind is FailureKind.LOOKUP:
        logger.warning(LOOKUP_HEADER)
        log_exception(logger, failure.error)
    elif failure.kind is FailureKind.SEND:
        logger.warning(SEND_HEADER)
        log_exception(logger, failure.error)
        linked = getattr(failure.error, "linked_exception", None)
        if linked is not None:
            log_exception(logger, linked)
    else:
        log_exception(logger, failure.error)
