"""Transfer Time — время загрузки/выгрузки файла

Размер переводится в MB, bandwidth в Mbit/s и затем в MB/s (mb → MB),
время в секундах = size_MB / bandwidth_MB_per_sec.

Разложение на компоненты (только если время >= 60 секунд):
- seconds = load_time % 60 (дробная часть сохраняется)
- minutes = int(load_time / 60 % 60)
- hours   = int(load_time / 3600)
- days    = int(hours / 24), при наличии дней часы берутся по модулю 24
  (в отличие от прежнего вывода, где показывались все часы целиком)

В текст попадают только ненулевые компоненты, от больших к меньшим.
Время меньше минуты даёт пустую строку, если в конфигурации не включён
sub_minute_seconds.
"""

import logging
import math
from dataclasses import dataclass

from src.core.domain.units import (
    DEFAULT_TABLES,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    ConversionTables,
    format_number,
)
from src.core.errors import DivisionByZeroError, InvalidArgumentError

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TransferTimeResult:
    """Результат расчёта времени передачи."""

    total_seconds: float

    # Компоненты (нули, если время меньше минуты)
    days: int
    hours: int
    minutes: int
    seconds: float

    # Текст вида "8 hours 43 minutes 37.5 seconds"
    text: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TransferTimeConfig:
    """Конфигурация расчёта времени передачи.

    sub_minute_seconds: выводить "<n> seconds" для времени меньше минуты
    вместо пустой строки.
    """

    sub_minute_seconds: bool = False


# =============================================================================
# CALCULATOR
# =============================================================================


class TransferTimeCalculator:
    """Расчёт времени передачи данных заданного размера."""

    def __init__(
        self,
        tables: ConversionTables | None = None,
        config: TransferTimeConfig | None = None,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.config = config or TransferTimeConfig()

    def calculate(
        self,
        size: float,
        size_unit: str,
        bandwidth: float,
        bandwidth_unit: str,
    ) -> TransferTimeResult:
        """Расчёт времени передачи.

        Args:
            size: размер данных
            size_unit: единица размера ("b" ... "TB")
            bandwidth: скорость канала
            bandwidth_unit: единица скорости ("bit/s" ... "Tbit/s")

        Returns:
            TransferTimeResult с компонентами и текстом

        Raises:
            UnknownUnitError: неизвестная единица
            DivisionByZeroError: bandwidth равен нулю
            InvalidArgumentError: время передачи не является конечным числом
        """
        size_mb = self.tables.size.convert(size_unit, "MB", size)
        bandwidth_mbit = self.tables.bandwidth.convert(bandwidth_unit, "Mbit/s", bandwidth)
        bandwidth_mb_per_sec = self.tables.size.convert("mb", "MB", bandwidth_mbit)

        if bandwidth_mb_per_sec == 0:
            raise DivisionByZeroError(f"Bandwidth cannot be zero: {bandwidth} {bandwidth_unit}")

        load_time = size_mb / bandwidth_mb_per_sec
        if not math.isfinite(load_time):
            raise InvalidArgumentError(
                f"Transfer time is not finite: {size} {size_unit} at {bandwidth} {bandwidth_unit}"
            )

        if load_time < SECONDS_PER_MINUTE:
            text = ""
            if self.config.sub_minute_seconds:
                text = f"{format_number(load_time)} seconds"
            result = TransferTimeResult(
                total_seconds=load_time,
                days=0,
                hours=0,
                minutes=0,
                seconds=load_time,
                text=text,
            )
        else:
            result = self._decompose(load_time)

        logger.debug(
            "Transfer time for %s %s at %s %s: %r",
            size,
            size_unit,
            bandwidth,
            bandwidth_unit,
            result.text,
        )
        return result

    def _decompose(self, load_time: float) -> TransferTimeResult:
        seconds = load_time % SECONDS_PER_MINUTE
        remaining = load_time / SECONDS_PER_MINUTE  # минуты
        minutes = int(remaining % MINUTES_PER_HOUR)
        remaining /= MINUTES_PER_HOUR  # часы
        hours = int(remaining)
        days = int(remaining / HOURS_PER_DAY)
        if days > 0:
            hours %= HOURS_PER_DAY

        parts = []
        if days:
            parts.append(f"{days} days")
        if hours:
            parts.append(f"{hours} hours")
        if minutes:
            parts.append(f"{minutes} minutes")
        if seconds:
            parts.append(f"{format_number(seconds)} seconds")

        return TransferTimeResult(
            total_seconds=load_time,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            text=" ".join(parts),
        )


def transfer_time(
    size: float,
    size_unit: str,
    bandwidth: float,
    bandwidth_unit: str,
    tables: ConversionTables | None = None,
) -> str:
    """Время передачи в виде текста, например "8 hours 43 minutes 37.5 seconds"."""
    return TransferTimeCalculator(tables).calculate(size, size_unit, bandwidth, bandwidth_unit).text
