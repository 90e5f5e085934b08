from pydantic_settings import BaseSettings
from functools import lru_cache
from pydantic import Field


class Settings(BaseSettings):
    app_name: str = "Card Studio"
    debug: bool = False
    env: str = "development"

    # Server
    backend_host: str = "0.0.0.0"
    backend_port: int = 8000
    cors_origins: list[str] = [
        "http://localhost:4321",
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # PostgreSQL
    postgres_user: str = "cardstudio"
    postgres_password: str = "changeme"
    postgres_db: str = "cardstudio"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")
    auto_migrate_on_startup: bool = False

    # Identity comes from the auth proxy; dev mode falls back to a fixed user.
    dev_mode: bool = False
    dev_user_id: str = "dev-user"

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def async_database_url(self) -> str:
        # Swap postgresql:// for postgresql+asyncpg://; other async URLs pass through
        return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
