"""Planner — производные калькуляторы для планирования сети.

Калькуляторы комбинируют таблицы конверсии единиц:
- Transfer time: время передачи файла по каналу
- Website bandwidth: bandwidth для профиля просмотров страниц
- Usage ↔ bandwidth: месячный трафик и эквивалентная скорость канала
"""

from .transfer_time import (
    TransferTimeCalculator,
    TransferTimeConfig,
    TransferTimeResult,
    transfer_time,
)
from .usage_bandwidth import (
    UsageBandwidthConverter,
    bandwidth_to_usage,
    usage_to_bandwidth,
)
from .website_bandwidth import (
    WebsiteBandwidth,
    WebsiteBandwidthCalculator,
    website_bandwidth,
)

__all__ = [
    # Transfer time
    "TransferTimeCalculator",
    "TransferTimeConfig",
    "TransferTimeResult",
    "transfer_time",
    # Website bandwidth
    "WebsiteBandwidth",
    "WebsiteBandwidthCalculator",
    "website_bandwidth",
    # Usage ↔ bandwidth
    "UsageBandwidthConverter",
    "usage_to_bandwidth",
    "bandwidth_to_usage",
]
