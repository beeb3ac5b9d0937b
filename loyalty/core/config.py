from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # --- Notification directory (logical names) ---
    NOTIFICATION_QUEUE_NAME: str = "jms/Portfolio/NotificationQueue"
    NOTIFICATION_FACTORY_NAME: str = "jms/Portfolio/NotificationQueueConnectionFactory"

    # --- Notification broker ---
    # Unset = messaging not configured: tier changes are only logged
    NOTIFICATION_QUEUE: str | None = None
    NOTIFICATION_BROKER_URL: str | None = None  # redis://host:6379/0
    NOTIFICATION_SOCKET_TIMEOUT: float = 5.0

    # --- Caller identity ---
    # Set by the fronting proxy after authentication
    REMOTE_USER_HEADER: str = "X-Remote-User"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
