"""
Application configuration settings
"""

from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application settings"""

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    DEBUG: bool = False

    # "production" hides stack traces from error responses
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Reference data
    ZIP_DATA_PATH: str = "data/zip_purchasing_power.json"
    DEVICE_DATA_PATH: str = "data/device_value.json"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True

# Global settings instance
settings = Settings()
