"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with POSTBOARD_ prefix.
No YAML files, no file-based config — just env vars (12-factor app style).

Learn: The module-level `settings` object is only read at process startup
(create_app, the CLI, Alembic). Everything downstream receives a Settings
instance explicitly, so tests can build an isolated app with its own
database file and signing secret.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """All app configuration. Set via POSTBOARD_* env vars."""

    # Database
    database_url: str = "sqlite+aiosqlite:///blog.db"
    auto_create_tables: bool = True

    # Auth
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # CORS: the public API is readable from any origin
    cors_origins: list[str] = ["*"]

    # Listing
    default_page_size: int = 10

    model_config = {"env_prefix": "POSTBOARD_"}

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure sensitive defaults are changed in non-development environments."""
        if self.environment != "development" and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError(
                "POSTBOARD_JWT_SECRET must be set to a secure value in "
                "non-development environments. Generate one with: "
                'python -c "import secrets; print(secrets.token_urlsafe(32))"'
            )
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError("POSTBOARD_BCRYPT_ROUNDS must be between 4 and 31")
        return self


# Process-wide defaults. Below the app factory, pass Settings explicitly.
settings = Settings()
