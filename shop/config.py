# shop/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    PROJECT_NAME: str = "Shop Events"
    PROJECT_VERSION: str = "1.0.0"
    LOGGER_NAME: str = "ShopEvents"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EVENT_DISPATCHER_THREAD_SAFE: bool = False
    NOTIFICATION_EMAIL: str = "sales@shop.local"

    model_config = SettingsConfigDict(env_file=".env", extra="allow")
