"""
Thali combo platter toolkit.

Four pure operations over in-memory thali records:
- describe_thali: one-line menu description.
- compute_stats: counts, average and price range for a menu.
- search_menu: case-insensitive search by name or dish.
- build_receipt: plain-text receipt for an order.

None of them raise on bad input; they return "", None or [] instead.

Applications that want the package's log output call configure_logging(),
which applies ThaliConfig.log_level (THALI_LOG_LEVEL) to the "thali_combo"
logger. Importing the package never touches logging configuration.
"""
from .analytics.aggregator import compute_stats
from .config import DEFAULT_THALI_CONFIG, ThaliConfig, configure_logging
from .menu.describe import describe_thali
from .menu.models import Thali, ThaliStats
from .menu.search import search_menu
from .receipts.builder import build_receipt

__all__ = [
    "DEFAULT_THALI_CONFIG",
    "Thali",
    "ThaliConfig",
    "ThaliStats",
    "build_receipt",
    "compute_stats",
    "configure_logging",
    "describe_thali",
    "search_menu",
]
