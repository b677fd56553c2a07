from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod|test
    PORT: int = Field(default=3000)

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://app:app@db:5432/app")
    DB_POOL_SIZE: int = Field(default=10)
    DB_POOL_TIMEOUT: float | None = Field(default=None)  # None = wait for a free connection
    CREATE_TABLES: bool = Field(default=True)

    # CORS
    CORS_ORIGINS: str = Field(default="")

    # Imports
    MAX_UPLOAD_BYTES: int = Field(default=5 * 1024 * 1024)

    # Comma separated, added on top of the default word list
    PROFANITY_EXTRA_WORDS: str = Field(default="")

    def profanity_extra_words(self) -> list[str]:
        return [w.strip() for w in self.PROFANITY_EXTRA_WORDS.split(",") if w.strip()]


settings = Settings()
