"""Application configuration with validation."""

from enum import Enum
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class ConfigurationError(Exception):
    """Raised when application configuration is invalid for the environment."""
    pass


class Settings(BaseSettings):
    """
    Application settings with validation.

    Values come from environment variables or a ``.env`` file. Rendering
    limits live here so list views and the API agree on preview sizes.
    """

    # Environment
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production)"
    )

    # CORS Configuration
    cors_allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:3001",
        description="Allowed CORS origins (comma-separated)"
    )

    # Preview Configuration
    # PREVIEW_MAX_CHARS: visible characters kept by /preview when the caller
    # does not pass max_chars. Markup never counts toward the limit.
    preview_max_chars: int = Field(
        default=150,
        ge=0,
        description="Default visible-character limit for first-line previews"
    )
    # MAX_INPUT_CHARS: upper bound on text/html accepted by the API.
    # Parsing and traversal are linear but unbounded input still costs memory.
    max_input_chars: int = Field(
        default=100_000,
        ge=1,
        description="Maximum length of text or HTML accepted per request"
    )

    # Asciidoc Renderer
    # Dotted path "package.module:callable" taking (text, **context) -> html.
    # Empty string = asciidoc rendering disabled (requests get 501).
    asciidoc_renderer: str = Field(
        default="",
        description="Import path of the asciidoc renderer callable (empty = disabled)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: 'json' for structured, 'text' for human-readable"
    )

    def get_cors_origins(self) -> List[str]:
        """
        Get CORS origins as a list.

        Parses comma-separated string and validates no wildcards.
        """
        origins = [origin.strip() for origin in self.cors_allowed_origins.split(',') if origin.strip()]

        if "*" in origins:
            raise ValueError(
                "Wildcard CORS (*) not allowed. "
                "Specify explicit origins in CORS_ALLOWED_ORIGINS"
            )

        return origins

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ('json', 'text'):
            raise ValueError("Invalid log format. Must be 'json' or 'text'")
        return v_lower

    @field_validator('asciidoc_renderer')
    @classmethod
    def validate_asciidoc_renderer(cls, v: str) -> str:
        v = v.strip()
        if v and ':' not in v:
            raise ValueError("ASCIIDOC_RENDERER must look like 'package.module:callable'")
        return v

    def validate_production_config(self) -> None:
        """Validate configuration for production environment.

        In production, fails startup when the API would accept browser calls
        from a developer machine. In development, main.py logs warnings instead.

        Raises:
            ConfigurationError: If production config is insecure.
        """
        errors: list[str] = []

        origins = self.get_cors_origins()
        localhost_origins = [o for o in origins if "localhost" in o or "127.0.0.1" in o]
        if localhost_origins:
            errors.append(
                f"CORS allows localhost origins: {localhost_origins}. "
                "Remove localhost origins for production."
            )

        if errors and self.environment == Environment.PRODUCTION:
            raise ConfigurationError(
                "Production configuration is insecure:\n  - " + "\n  - ".join(errors)
            )

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
