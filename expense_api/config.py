"""
Application configuration, read once from the environment (.env supported).
"""

import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()


class Config:
    JWT_SECRET: Final[str] = os.getenv("JWT_SECRET", "change-this-in-production")
    JWT_ALGORITHM: Final[str] = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: Final[int] = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    DATABASE_URL: Final[str] = os.getenv("DATABASE_URL", "sqlite:///./expenses.db")
    CORS_ORIGINS: Final[list[str]] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]
    LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        if not cls.JWT_SECRET:
            raise ValueError("JWT_SECRET must not be empty")
        if cls.ACCESS_TOKEN_EXPIRE_MINUTES <= 0:
            raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
