"""
Configuration management for the Metaverse Realty API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

PRODUCTION_URL = "https://metaverse-realty.herokuapp.com/"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    # Hosting platforms hand the port over as a bare PORT variable
    api_port: int = Field(
        default=4000, validation_alias=AliasChoices("METAVERSE_API_PORT", "PORT")
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphql_path: str = "/graphql"

    # Mocking
    mock_max_depth: int = 4

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "METAVERSE_"
        case_sensitive = False
        populate_by_name = True

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def public_url(self) -> str:
        """Base URL shown to humans at start-up."""
        if self.is_production:
            return PRODUCTION_URL
        return f"http://localhost:{self.api_port}"


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
