"""
Core configuration and settings for the Client Service
Values come from environment variables or a local .env file
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields to be ignored
    )

    # Service information
    service_name: str = Field(default="client-service")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=8094)
    host: str = Field(default="0.0.0.0")  # nosec B104

    # AWS configuration
    aws_region: str = Field(default="us-east-2")
    secrets_function_name: str = Field(default="fetchSecretsFunction_gr8")
    clients_table_name: str = Field(default="Clients_gr8")

    # RabbitMQ configuration
    rabbitmq_url: str = Field(default="amqp://3.136.72.14:5672/")
    client_events_queue: str = Field(default="client-events")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    # HTTP configuration
    correlation_id_header: str = Field(default="X-Correlation-ID")
    cors_origins: str = Field(default="*")

    @property
    def cors_origin_list(self) -> List[str]:
        """CORS origins as a list (comma-separated in the environment)"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global config instance
config = Config()
