"""Website Bandwidth — bandwidth, необходимый сайту

По среднему числу просмотров за единицу времени, среднему размеру страницы
и коэффициенту резервирования (redundancy):

    views_per_month   = views / convert(time_unit → months, 1)
    bandwidth_months  = convert(size_unit → GB, page_size) * views_per_month
    bandwidth_seconds = convert(GB → mb, bandwidth_months) / seconds_per_month

bandwidth_months в GB в месяц, bandwidth_seconds в Mbit/s. Redundancy
умножает обе величины линейно.
"""

import logging

from pydantic import BaseModel, Field

from src.core.domain.units import DEFAULT_TABLES, ConversionTables

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class WebsiteBandwidth(BaseModel):
    """Результат расчёта bandwidth сайта."""

    bandwidth_seconds: float = Field(..., description="Необходимый bandwidth, Mbit/s")
    bandwidth_months: float = Field(..., description="Трафик, GB в месяц")
    redundancy: float = Field(..., description="Коэффициент резервирования")
    bandwidth_seconds_redundancy: float = Field(
        ..., description="Bandwidth с учётом резервирования, Mbit/s"
    )
    bandwidth_months_redundancy: float = Field(
        ..., description="Трафик с учётом резервирования, GB в месяц"
    )

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# CALCULATOR
# =============================================================================


class WebsiteBandwidthCalculator:
    """Расчёт bandwidth для заданного профиля трафика."""

    def __init__(self, tables: ConversionTables | None = None):
        self.tables = tables or DEFAULT_TABLES

    def calculate(
        self,
        views: float,
        time_unit: str,
        page_size: float,
        size_unit: str,
        redundancy: float,
    ) -> WebsiteBandwidth:
        """Расчёт bandwidth сайта.

        Args:
            views: среднее число просмотров за time_unit
            time_unit: единица времени ("seconds" ... "months")
            page_size: средний размер страницы
            size_unit: единица размера страницы
            redundancy: коэффициент резервирования

        Raises:
            UnknownUnitError: неизвестная единица
        """
        size = self.tables.size
        time = self.tables.time

        months = time.convert(time_unit, "months", 1)
        views_per_month = views / months
        bandwidth_months = size.convert(size_unit, "GB", page_size) * views_per_month
        bandwidth_seconds = size.convert("GB", "mb", bandwidth_months)
        seconds_in_month = time.convert("months", "seconds", 1)
        bandwidth_seconds /= seconds_in_month

        result = WebsiteBandwidth(
            bandwidth_seconds=bandwidth_seconds,
            bandwidth_months=bandwidth_months,
            redundancy=redundancy,
            bandwidth_seconds_redundancy=bandwidth_seconds * redundancy,
            bandwidth_months_redundancy=bandwidth_months * redundancy,
        )

        logger.debug(
            "Website bandwidth: %s Mbit/s or %s GB per month (redundancy %s)",
            result.bandwidth_seconds,
            result.bandwidth_months,
            redundancy,
        )
        return result


def website_bandwidth(
    views: float,
    time_unit: str,
    page_size: float,
    size_unit: str,
    redundancy: float,
    tables: ConversionTables | None = None,
) -> WebsiteBandwidth:
    return WebsiteBandwidthCalculator(tables).calculate(
        views, time_unit, page_size, size_unit, redundancy
    )
