from .connection import ConnectionProvider, MessagingHandle
from .notifications import DeliveryOutcome, NotificationDispatcher
from .loyalty import build_dispatcher, get_loyalty

__all__ = [
    "ConnectionProvider", "MessagingHandle",
    "DeliveryOutcome", "NotificationDispatcher",
    "build_dispatcher", "get_loyalty",
]
