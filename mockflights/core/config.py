"""
Configuration settings for the application
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # App settings
    APP_NAME: str = "Mock Flights API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # API settings
    API_PREFIX: str = "/api"
    PING_MESSAGE: str = "ping"

    # Simulated upstream latency (in milliseconds)
    MOCK_DELAYS: bool = True
    MOCK_DELAY_MIN_MS: int = 500
    MOCK_DELAY_MAX_MS: int = 2000

    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True

    @model_validator(mode="after")
    def check_delay_range(self):
        if self.MOCK_DELAY_MIN_MS < 0 or self.MOCK_DELAY_MAX_MS < self.MOCK_DELAY_MIN_MS:
            raise ValueError(
                "MOCK_DELAY_MIN_MS must be non-negative and not exceed MOCK_DELAY_MAX_MS"
            )
        return self


settings = Settings()
