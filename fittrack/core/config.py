"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "FitTrack API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "fitness_tracker"
    database_ssl_mode: str = "disable"

    # Full async DSN; when set it wins over the host/port fields (e.g. sqlite+aiosqlite:///./dev.db)
    database_dsn: str = ""

    # Pool (production tuning)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = "jwtsecret"  # Override in production
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    auth_cookie_name: str = "token"

    # CORS: SPA origin plus comma-separated extras
    client_url: str = "http://localhost:5173"
    cors_origins: str = ""

    def _build_db_url(self, scheme: str = "postgresql", query: str = "") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        url = f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}/{self.database_name}"
        return f"{url}?{query}" if query else url

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        if self.database_dsn:
            return self.database_dsn.replace("+asyncpg", "").replace("+aiosqlite", "")
        return self._build_db_url(scheme="postgresql", query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (asyncpg driver)."""
        if self.database_dsn:
            return self.database_dsn
        query = "ssl=require" if self.database_ssl_mode == "require" else ""
        return self._build_db_url(scheme="postgresql+asyncpg", query=query)

    @property
    def allowed_origins(self) -> list[str]:
        return [self.client_url, *[o.strip() for o in self.cors_origins.split(",") if o.strip()]]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
