from typing import Dict, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_PRODUCER_BINDING = "logProducer-out-0"
LOG_CONSUMER_BINDING = "logConsumer-in-0"


class Settings(BaseSettings):
    APP_NAME: str = Field("logging-svc", alias="APP_NAME")
    LOG_LEVEL: str = Field("INFO", alias="LOG_LEVEL")
    ALLOWED_CORS_ORIGINS: str = Field("*", alias="ALLOWED_CORS_ORIGINS")
    PORT: int = Field(8080, alias="PORT")

    # Binder selection
    BINDER_TYPE: Literal["memory", "http"] = Field("memory", alias="BINDER_TYPE")
    BINDER_HTTP_URL: Optional[str] = Field(None, alias="BINDER_HTTP_URL")
    BINDER_HTTP_TIMEOUT: float = Field(30.0, alias="BINDER_HTTP_TIMEOUT")

    # Binding name -> broker destination. With the memory binder, a producer
    # destination nobody consumes keeps every message queued in process.
    LOG_PRODUCER_DESTINATION: str = Field("logs", alias="LOG_PRODUCER_DESTINATION")
    LOG_CONSUMER_DESTINATION: str = Field("logs", alias="LOG_CONSUMER_DESTINATION")

    # Where the consumer writes received records: "log" or "console"
    CONSUMER_SINK: Literal["log", "console"] = Field("log", alias="CONSUMER_SINK")

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    @property
    def cors_origins_list(self) -> list[str]:
        if self.ALLOWED_CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_CORS_ORIGINS.split(",")]

    @property
    def bindings(self) -> Dict[str, str]:
        """Binding name to destination mapping used by the messaging layer."""
        return {
            LOG_PRODUCER_BINDING: self.LOG_PRODUCER_DESTINATION,
            LOG_CONSUMER_BINDING: self.LOG_CONSUMER_DESTINATION,
        }


settings = Settings()
