# app/config.py
from datetime import timedelta
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str
    MONGODB_DB_NAME: str = "employee_list"
    SEED_SAMPLE_DATA: bool = True

    # Auth settings
    TOKEN_SECRET: str
    TOKEN_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 12

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = True
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator("TOKEN_SECRET")
    @classmethod
    def validate_token_secret(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("TOKEN_SECRET cannot be empty")
        return v

    @property
    def access_token_lifetime(self) -> timedelta:
        return timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)

@lru_cache()
def get_settings():
    return Settings()
