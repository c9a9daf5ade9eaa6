import os
from dotenv import load_dotenv
from urllib.parse import quote_plus

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Environment setting
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    # Record store backend: "memory" or "database"
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")

    # Cookie session
    SESSION_SECRET = os.getenv("SESSION_SECRET", "fittrack-dev-session-secret")
    SESSION_COOKIE = os.getenv("SESSION_COOKIE", "fittrack_session")
    SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(7 * 24 * 60 * 60)))

    # Password hashing cost
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Demo data for the in-memory store
    SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA", "true")
    DEMO_USER_PASSWORD = os.getenv("DEMO_USER_PASSWORD", "demo-password")

    # Logging
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

    # db creds
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "fittrack")
    DB_PORT = os.getenv("DB_PORT", "5432")

    # Build URL with SSL requirement based on environment
    def _build_database_url(self):
        override = os.getenv("DATABASE_URL")
        if override:
            return override
        base_url = f"postgresql+asyncpg://{self.DB_USER}:{quote_plus(self.DB_PASSWORD)}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        if self.ENVIRONMENT == "development":
            return base_url
        return f"{base_url}?ssl=require"

    @property
    def DATABASE_URL(self):
        return self._build_database_url()

    @property
    def IS_DEVELOPMENT(self) -> bool:
        return self.ENVIRONMENT == "development"


settings = Settings()
