from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "dev-secret-change-me-before-deploying-justai"


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    database_url: str = "sqlite:///./justai.db"
    # Postgres only, e.g. "require" for hosted databases with self-signed certs.
    database_sslmode: str | None = None
    db_pool_size: int = 5
    db_max_overflow: int = 10
    # Comma-separated list of allowed origins, or "*".
    frontend_url: str = "*"
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 24
    api_prefix: str = "/api"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, value: str) -> str:
        value = value.strip()
        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://"):]
        return value

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.frontend_url.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
