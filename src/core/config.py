from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )
    SECRET_KEY: str = EnvManager.get_env_variable("SECRET_KEY", "supersecretkey")

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Blog Admin")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Posts, markdown rendering and an admin editor"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "UTC")

    ADMIN_EMAIL: str = EnvManager.get_env_variable("ADMIN_EMAIL", "admin@example.com")
    SESSION_COOKIE: str = EnvManager.get_env_variable("SESSION_COOKIE", "__session")
    SESSION_MAX_AGE: int = int(
        EnvManager.get_env_variable("SESSION_MAX_AGE", str(60 * 60 * 24 * 7))
    )
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    MARKDOWN_EXTENSIONS: str = EnvManager.get_env_variable(
        "MARKDOWN_EXTENSIONS", "fenced_code,tables"
    )

    def get_now(self):
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)

    @property
    def markdown_extensions(self) -> list[str]:
        return [ext.strip() for ext in self.MARKDOWN_EXTENSIONS.split(",") if ext.strip()]

    def is_admin_email(self, email: str) -> bool:
        return email.strip().lower() == self.ADMIN_EMAIL.strip().lower()


settings = Settings()
