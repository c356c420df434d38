from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class ThaliConfig:
    log_level: str = os.getenv("THALI_LOG_LEVEL", "WARNING")
    currency_prefix: str = "Rs."
    receipt_title: str = "THALI RECEIPT"
    veg_label: str = "Veg"
    non_veg_label: str = "Non-Veg"
    item_separator: str = ", "


DEFAULT_THALI_CONFIG = ThaliConfig()


def configure_logging(config: ThaliConfig = DEFAULT_THALI_CONFIG) -> None:
    """Apply the configured level to the package logger (the root logger is left alone)."""
    logging.getLogger("thali_combo").setLevel(
        getattr(logging, config.log_level.upper(), logging.WARNING)
    )
