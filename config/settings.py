"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "postgresql+asyncpg://root:@localhost:5432/task_tracker_db"
    db_pool_size: int = 10          # max pooled connections
    db_max_overflow: int = 0        # fixed-size pool, extra callers wait
    db_pool_recycle: int = 3600
    db_echo: bool = False
    create_tables: bool = True      # create missing tables on startup

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret-key-at-least-32-bytes"  # HMAC secret for auth tokens
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 3600                      # 1 hour
    bcrypt_rounds: int = 10

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3001
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    def engine_options(self) -> dict:
        """Keyword arguments for ``create_async_engine``."""
        options = {"echo": self.db_echo}
        if not self.database_url.startswith("sqlite"):
            options.update(
                pool_size=self.db_pool_size,
                max_overflow=self.db_max_overflow,
                pool_recycle=self.db_pool_recycle,
                pool_pre_ping=True,
            )
        return options


config = Settings()
