from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Anthropic
    anthropic_api_key: str = Field(default="", validation_alias="ANTHROPIC_API_KEY")
    anthropic_version: str = Field(
        default="2023-06-01", validation_alias="ANTHROPIC_VERSION"
    )
    anthropic_mcp_beta: str = Field(
        default="mcp-client-2025-04-04", validation_alias="ANTHROPIC_MCP_BETA"
    )
    chat_model: str = Field(
        default="claude-sonnet-4-20250514", validation_alias="CHAT_MODEL"
    )
    hotel_model: str = Field(default="claude-sonnet-4-5", validation_alias="HOTEL_MODEL")
    max_tokens: int = Field(default=8192, validation_alias="MAX_TOKENS")

    # Hotel MCP server
    mcp_url: str = Field(
        default="https://mcp-hotel-server-336151914785.europe-west1.run.app/mcp/capcorn",
        validation_alias="MCP_URL",
    )
    mcp_server_name: str = Field(default="hotel-mcp", validation_alias="MCP_SERVER_NAME")

    # Analytics backend
    analytics_base_url: str = Field(
        default="https://lookingcom-backend.vercel.app",
        validation_alias="ANALYTICS_BASE_URL",
    )
    analytics_timeout_seconds: float = Field(
        default=30.0, validation_alias="ANALYTICS_TIMEOUT_SECONDS"
    )
    analytics_cache_ttl_seconds: int = Field(
        default=900, validation_alias="ANALYTICS_CACHE_TTL_SECONDS"
    )

    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379", validation_alias="REDIS_URL"
    )
    chat_storage_prefix: str = Field(
        default="looking-chats", validation_alias="CHAT_STORAGE_PREFIX"
    )

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
