import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv


DEFAULT_SOLANA_RPC_URL = "https://api.mainnet-beta.solana.com"
SOLSCAN_API_URL = "https://api.solscan.io"
COINGECKO_API_URL = "https://api.coingecko.com/api/v3"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """A setting is present but cannot be parsed."""


def _env_number(name: str, default, cast):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    # Telegram
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_API_ID: int = 0
    TELEGRAM_API_HASH: str = ""

    # Solana RPC
    SOLANA_RPC_URL: str = DEFAULT_SOLANA_RPC_URL

    # External APIs
    SOLSCAN_API_KEY: str = ""
    SOLSCAN_API_URL: str = SOLSCAN_API_URL
    COINGECKO_API_URL: str = COINGECKO_API_URL

    # Logging
    LOG_FILE: str = "bot.log"
    LOG_LEVEL: str = "INFO"

    # Outbound calls
    RATE_LIMIT_MIN_TIME: float = 0.3  # seconds between call starts
    RATE_LIMIT_MAX_CONCURRENT: int = 5
    HTTP_TIMEOUT: float = 10.0

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build the configuration from the environment (and a .env file if present).

        Raises:
            ConfigError: if a numeric setting or LOG_LEVEL is malformed
        """
        load_dotenv()

        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            TELEGRAM_BOT_TOKEN=os.getenv("TELEGRAM_BOT_TOKEN") or os.getenv("BOT_TOKEN", ""),
            TELEGRAM_API_ID=_env_number("TELEGRAM_API_ID", 0, int),
            TELEGRAM_API_HASH=os.getenv("TELEGRAM_API_HASH", ""),
            SOLANA_RPC_URL=os.getenv("SOLANA_RPC_URL") or DEFAULT_SOLANA_RPC_URL,
            SOLSCAN_API_KEY=os.getenv("SOLSCAN_API_KEY", ""),
            LOG_FILE=os.getenv("LOG_FILE", "bot.log"),
            LOG_LEVEL=log_level,
            RATE_LIMIT_MIN_TIME=_env_number("RATE_LIMIT_MIN_TIME", 0.3, float),
            RATE_LIMIT_MAX_CONCURRENT=_env_number("RATE_LIMIT_MAX_CONCURRENT", 5, int),
            HTTP_TIMEOUT=_env_number("HTTP_TIMEOUT", 10.0, float),
        )

    def validate(self) -> List[str]:
        """Return the names of required settings that are missing."""
        missing = []
        if not self.TELEGRAM_BOT_TOKEN:
            missing.append("TELEGRAM_BOT_TOKEN")
        if not self.TELEGRAM_API_ID:
            missing.append("TELEGRAM_API_ID")
        if not self.TELEGRAM_API_HASH:
            missing.append("TELEGRAM_API_HASH")
        return missing
