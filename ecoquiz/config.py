"""
EcoQuiz configuration

Environment variables override defaults; a local .env file is loaded if present.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load environment variables from a .env file if present
load_dotenv()

DEV_TOKEN_SECRET = "ecoquiz-development-secret-change-me"


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Runtime settings for the API server."""
    token_secret: str = field(default_factory=lambda: os.getenv("ECOQUIZ_TOKEN_SECRET", DEV_TOKEN_SECRET))
    token_ttl_seconds: int = field(default_factory=lambda: int(os.getenv("ECOQUIZ_TOKEN_TTL", "86400")))  # 24h
    cors_allow_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE_PATH", ""))
    host: str = field(default_factory=lambda: os.getenv("ECOQUIZ_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("ECOQUIZ_PORT", "8000")))

    @property
    def uses_dev_secret(self) -> bool:
        return self.token_secret == DEV_TOKEN_SECRET

    def __post_init__(self) -> None:
        if not self.token_secret:
            raise ValueError("token_secret must not be empty")
        if self.token_ttl_seconds <= 0:
            raise ValueError("token_ttl_seconds must be a positive integer")
