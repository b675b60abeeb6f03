"""
Configuration management for flight booking service
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Server configuration"""
    model_config = SettingsConfigDict(env_prefix="SERVER_")

    port: int = Field(default=8000)
    host: str = Field(default="0.0.0.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)


class DemoDataConfig(BaseSettings):
    """Demo booking data seeded at startup"""
    model_config = SettingsConfigDict(env_prefix="DEMO_")

    enabled: bool = Field(default=True)
    random_seed: Optional[int] = Field(default=None)  # fixed seed gives reproducible airports/classes


class LoggingConfig(BaseSettings):
    """Logging configuration"""
    model_config = SettingsConfigDict(env_prefix="LOGGING_")

    level: str = Field(default="INFO")
    enable_audit: bool = Field(default=True)
    log_format: str = Field(default="json")  # json or text


class Config:
    """Main configuration class"""

    def __init__(self):
        self.server = ServerConfig()
        self.demo_data = DemoDataConfig()
        self.logging = LoggingConfig()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.server.environment.lower() == "development"


# Global configuration instance
config = Config()
