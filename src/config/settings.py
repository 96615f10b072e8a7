# src/config/settings.py

"""Central configuration for the market_catalog package."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the market_catalog package."""

    # --- Pricing ---
    PRICE_MICROS_FACTOR: int = 1_000_000   # Micros per currency unit

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = os.getenv("MARKET_CATALOG_LOG_LEVEL", "WARNING")

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
    CATALOG_PATH: Path = Path(
        os.getenv(
            "MARKET_CATALOG_PATH",
            str(BASE_DIR / "data" / "market_catalog.json"),
        )
    )
