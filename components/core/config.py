from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database settings
    DB_URL: Optional[str] = None  # Optional full DB URL
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "kodbank"

    # Session tokens
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Origins allowed to send credentialed cross-site requests
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "https://kodnest-bank.vercel.app",
    ]

    # Chat provider
    HUGGINGFACE_ENDPOINT: str = "https://router.huggingface.co/v1/chat/completions"
    HUGGINGFACE_API_KEY: Optional[str] = None
    CHAT_MODEL: str = "Qwen/Qwen2.5-72B-Instruct"
    CHAT_MAX_TOKENS: int = 500
    CHAT_TIMEOUT_SECONDS: float = 30.0

    # API settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PORT: int = 3000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        validate_default = True
        frozen = True

    @property
    def async_db_url(self) -> str:
        """Get asynchronous database URL."""
        if self.DB_URL:
            return self.DB_URL
        return f"mysql+aiomysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def access_token_lifetime_seconds(self) -> int:
        return self.ACCESS_TOKEN_EXPIRE_MINUTES * 60


@lru_cache()
def get_settings() -> Settings:
    """
    Returns cached Settings instance to avoid reloading .env file on every access
    """
    return Settings()
