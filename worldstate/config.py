from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"
    # Optional cyber threat layer (synthetic + abuse.ch)
    ENABLE_CYBER_LAYER: bool = False
    # Endpoint override for the stream client
    WS_URL: str | None = Field(default=None, validation_alias=AliasChoices("WS_URL", "VITE_WS_URL"))
    METRICS_ENABLED: bool = False

    # Broadcast loop
    TICK_MIN_SECONDS: float = 2.0
    TICK_MAX_SECONDS: float = 5.0
    LIVE_DATA_RATIO: float = Field(default=0.6, ge=0.0, le=1.0)
    INIT_RECENT_EVENTS: int = 10

    # External APIs
    HTTP_TIMEOUT_SECONDS: float = 10.0
    EARTHQUAKE_MIN_MAGNITUDE: float = 2.5
    EARTHQUAKE_LIMIT: int = 50

    # Stream client
    RECONNECT_BASE_DELAY: float = 1.0
    RECONNECT_FACTOR: float = 1.5
    RECONNECT_MAX_DELAY: float = 15.0
    RECONNECT_MAX_ATTEMPTS: int = 20
    STORE_MAX_EVENTS: int = 500

    @model_validator(mode="after")
    def _check_tick_bounds(self):
        if self.TICK_MIN_SECONDS > self.TICK_MAX_SECONDS:
            raise ValueError("TICK_MIN_SECONDS must not exceed TICK_MAX_SECONDS")
        return self

    def stream_url(self) -> str:
        """Endpoint the stream client connects to."""
        return self.WS_URL or f"ws://localhost:{self.PORT}/"

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
