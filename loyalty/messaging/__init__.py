from .ports import Connection, ConnectionFactory, Destination, Directory, Sender, Session
from .redis_queue import QueueDestination, RedisQueueConnectionFactory
from .directory import SettingsDirectory

__all__ = [
    "Connection", "ConnectionFactory", "Destination", "Directory", "Sender", "Session",
    "QueueDestination", "RedisQueueConnectionFactory",
    "SettingsDirectory",
]
