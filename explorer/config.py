"""Configuration management for the explorer view helpers."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

QR_ERROR_LEVELS = ("L", "M", "Q", "H")


@dataclass(frozen=True)
class Config:
    """Explorer presentation configuration."""

    # Native coin settings
    coin_symbol: str = "POA"
    native_decimals: int = 18

    # Currency formatting
    usd_decimal_places: int = 6

    # QR code rendering
    qr_scale: int = 4
    qr_border: int = 4
    qr_error_level: str = "L"

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            coin_symbol=os.getenv("COIN_SYMBOL", "POA"),
            native_decimals=int(os.getenv("NATIVE_DECIMALS", "18")),
            usd_decimal_places=int(os.getenv("USD_DECIMAL_PLACES", "6")),
            qr_scale=int(os.getenv("QR_SCALE", "4")),
            qr_border=int(os.getenv("QR_BORDER", "4")),
            qr_error_level=os.getenv("QR_ERROR_LEVEL", "L").upper(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.coin_symbol:
            raise ValueError("coin_symbol is required")
        if self.native_decimals < 0:
            raise ValueError("native_decimals must be >= 0")
        if self.usd_decimal_places < 0:
            raise ValueError("usd_decimal_places must be >= 0")
        if self.qr_scale <= 0:
            raise ValueError("qr_scale must be > 0")
        if self.qr_border < 0:
            raise ValueError("qr_border must be >= 0")
        if self.qr_error_level not in QR_ERROR_LEVELS:
            raise ValueError(
                f"qr_error_level must be one of {', '.join(QR_ERROR_LEVELS)}"
            )


DEFAULT_CONFIG = Config()
