"""Usage ↔ Bandwidth — месячный трафик и эквивалентная скорость канала

Bandwidth unit сопоставляется битовой единице размера:
bit/s → b, иначе первые два символа в нижнем регистре (Mbit/s → mb).

    usage_to_bandwidth = convert(size_unit → bit_unit, usage / seconds_per_month)
    bandwidth_to_usage = convert(bit_unit → size_unit, bandwidth / months_per_second)
"""

import logging

from src.core.domain.units import DEFAULT_TABLES, ConversionTables

logger = logging.getLogger(__name__)


class UsageBandwidthConverter:
    """Конверсия месячного трафика в bandwidth и обратно."""

    def __init__(self, tables: ConversionTables | None = None):
        self.tables = tables or DEFAULT_TABLES

    def bandwidth_unit_as_size_unit(self, bandwidth_unit: str) -> str:
        """Битовая единица размера, соответствующая bandwidth unit.

        Raises:
            UnknownUnitError: bandwidth_unit нет в таблице bandwidth
        """
        self.tables.bandwidth.scale(bandwidth_unit)
        if bandwidth_unit == "bit/s":
            return "b"
        return bandwidth_unit[:2].lower()

    def usage_to_bandwidth(self, usage: float, size_unit: str, bandwidth_unit: str) -> float:
        """Месячный трафик (usage size_unit) → bandwidth в bandwidth_unit."""
        bit_unit = self.bandwidth_unit_as_size_unit(bandwidth_unit)
        usage /= self.tables.time.convert("months", "seconds", 1)
        bandwidth = self.tables.size.convert(size_unit, bit_unit, usage)

        logger.debug("Usage → bandwidth: %s %s", bandwidth, bandwidth_unit)
        return bandwidth

    def bandwidth_to_usage(self, bandwidth: float, bandwidth_unit: str, size_unit: str) -> float:
        """Bandwidth (bandwidth_unit) → месячный трафик в size_unit."""
        bit_unit = self.bandwidth_unit_as_size_unit(bandwidth_unit)
        bandwidth /= self.tables.time.convert("seconds", "months", 1)
        usage = self.tables.size.convert(bit_unit, size_unit, bandwidth)

        logger.debug("Bandwidth → usage: %s %s", usage, size_unit)
        return usage


def usage_to_bandwidth(
    usage: float,
    size_unit: str,
    bandwidth_unit: str,
    tables: ConversionTables | None = None,
) -> float:
    return UsageBandwidthConverter(tables).usage_to_bandwidth(usage, size_unit, bandwidth_unit)


def bandwidth_to_usage(
    bandwidth: float,
    bandwidth_unit: str,
    size_unit: str,
    tables: ConversionTables | None = None,
) -> float:
    return UsageBandwidthConverter(tables).bandwidth_to_usage(bandwidth, bandwidth_unit, size_unit)
