from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = ""
    database_name: Optional[str] = None
    timeout_ms: int = 10000
    log_level: str = "INFO"
    bcrypt_rounds: int = 10


def get_settings() -> Settings:
    """Read settings from the environment (and .env, if present)."""
    return Settings(
        mongodb_uri=os.getenv("MONGODB_URI", "").strip(),
        database_name=os.getenv("DATABASE_NAME", "").strip() or None,
        timeout_ms=int(os.getenv("MONGODB_TIMEOUT_MS", "10000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
    )
