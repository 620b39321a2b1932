"""
Unit Conversion Tables — размер данных, bandwidth, время

Единственный допустимый способ преобразований между единицами:
- size: b, kb, mb, gb, tb (биты) и B, KB, MB, GB, TB (байты), шаг 1000 (SI)
- bandwidth: bit/s, Kbit/s, Mbit/s, Gbit/s, Tbit/s
- time: seconds, minutes, hours, days, months (средний григорианский месяц)

Каждая таблица хранит scale единицы относительно опорной единицы таблицы
(TB, Tbit/s, months = 1). Больший scale соответствует МЕНЬШЕЙ физической
единице (scale["B"] >> scale["TB"]).

ФОРМУЛА:
    convert(value, from, to) = value * (scale[to] / scale[from])

ЗАПРЕЩЕНО смешивать единицы разных таблиц.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.radix import TableKind
from src.core.errors import InvalidArgumentError, UnknownUnitError


# =============================================================================
# КОНСТАНТЫ ПОСТРОЕНИЯ ТАБЛИЦ
# =============================================================================

# Десятичный (SI) шаг между соседними единицами размера и bandwidth
DECIMAL_STEP: Final[int] = 1000

BITS_PER_BYTE: Final[int] = 8

# Средний григорианский год
DAYS_PER_YEAR: Final[float] = 365.25

MONTHS_PER_YEAR: Final[float] = 12.0

HOURS_PER_DAY: Final[int] = 24

MINUTES_PER_HOUR: Final[int] = 60

SECONDS_PER_MINUTE: Final[int] = 60

# Порядок перечисления: от меньшей единицы к большей
SIZE_UNITS: Final[tuple[str, ...]] = ("b", "kb", "mb", "gb", "tb", "B", "KB", "MB", "GB", "TB")
BYTE_SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")
BANDWIDTH_UNITS: Final[tuple[str, ...]] = ("bit/s", "Kbit/s", "Mbit/s", "Gbit/s", "Tbit/s")
TIME_UNITS: Final[tuple[str, ...]] = ("seconds", "minutes", "hours", "days", "months")


# =============================================================================
# UNIT TABLE
# =============================================================================


@dataclass(frozen=True)
class UnitTable:
    """
    Immutable таблица конверсии: unit → scale.

    Scale хранится как int там, где он целый (size, bandwidth), чтобы
    отношение scale[to] / scale[from] считалось одним делением.
    """

    kind: TableKind
    reference_unit: str
    scales: Mapping[str, float]
    units: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Read-only view, чтобы таблицу нельзя было изменить после построения
        object.__setattr__(self, "scales", MappingProxyType(dict(self.scales)))
        if not self.units:
            object.__setattr__(self, "units", tuple(self.scales))

    def __contains__(self, unit: object) -> bool:
        return unit in self.scales

    def scale(self, unit: str) -> float:
        """
        Scale единицы относительно опорной.

        Raises:
            UnknownUnitError: если единицы нет в таблице
        """
        try:
            return self.scales[unit]
        except (KeyError, TypeError):
            raise UnknownUnitError(unit, self.kind.value) from None

    def ratio(self, from_unit: str, to_unit: str) -> float:
        """Множитель перевода from_unit → to_unit."""
        return self.scale(to_unit) / self.scale(from_unit)

    def convert(self, from_unit: str, to_unit: str, value: float) -> float:
        """
        Перевод value из from_unit в to_unit.

        Examples:
            >>> SIZE_TABLE.convert("MB", "GB", 500)
            0.5
            >>> BANDWIDTH_TABLE.convert("Gbit/s", "Mbit/s", 1)
            1000.0
        """
        return value * self.ratio(from_unit, to_unit)


@dataclass(frozen=True)
class ConversionTables:
    """Три независимые таблицы, передаются калькуляторам по ссылке."""

    size: UnitTable
    bandwidth: UnitTable
    time: UnitTable

    def table(self, kind: TableKind | str) -> UnitTable:
        kind = TableKind.parse(kind)
        if kind is TableKind.SIZE:
            return self.size
        if kind is TableKind.BANDWIDTH:
            return self.bandwidth
        return self.time


# =============================================================================
# ПОСТРОЕНИЕ ТАБЛИЦ
# =============================================================================


def build_size_table() -> UnitTable:
    """
    Таблица размеров данных (опорная единица TB).

    TB=1, GB=1000, MB=10**6, KB=10**9, B=10**12; битовые единицы в 8 раз
    больше соответствующих байтовых.
    """
    scales: dict[str, int] = {"TB": 1}
    scales["GB"] = DECIMAL_STEP * scales["TB"]
    scales["MB"] = DECIMAL_STEP * scales["GB"]
    scales["KB"] = DECIMAL_STEP * scales["MB"]
    scales["B"] = DECIMAL_STEP * scales["KB"]
    for byte_unit in BYTE_SIZE_UNITS:
        scales[byte_unit.lower()] = BITS_PER_BYTE * scales[byte_unit]

    return UnitTable(kind=TableKind.SIZE, reference_unit="TB", scales=scales, units=SIZE_UNITS)


def build_bandwidth_table() -> UnitTable:
    """Таблица bandwidth (опорная единица Tbit/s)."""
    scales: dict[str, int] = {"Tbit/s": 1}
    scales["Gbit/s"] = DECIMAL_STEP * scales["Tbit/s"]
    scales["Mbit/s"] = DECIMAL_STEP * scales["Gbit/s"]
    scales["Kbit/s"] = DECIMAL_STEP * scales["Mbit/s"]
    scales["bit/s"] = DECIMAL_STEP * scales["Kbit/s"]

    return UnitTable(
        kind=TableKind.BANDWIDTH,
        reference_unit="Tbit/s",
        scales=scales,
        units=BANDWIDTH_UNITS,
    )


def build_time_table() -> UnitTable:
    """
    Таблица времени (опорная единица months = 1.0).

    Месяц — средний григорианский: 365.25 / 12 дней.
    """
    scales: dict[str, float] = {"months": 1.0}
    scales["days"] = DAYS_PER_YEAR / MONTHS_PER_YEAR
    scales["hours"] = HOURS_PER_DAY * scales["days"]
    scales["minutes"] = MINUTES_PER_HOUR * scales["hours"]
    scales["seconds"] = SECONDS_PER_MINUTE * scales["minutes"]

    return UnitTable(kind=TableKind.TIME, reference_unit="months", scales=scales, units=TIME_UNITS)


def build_conversion_tables() -> ConversionTables:
    return ConversionTables(
        size=build_size_table(),
        bandwidth=build_bandwidth_table(),
        time=build_time_table(),
    )


# Таблицы строятся один раз при импорте и далее только читаются
DEFAULT_TABLES: Final[ConversionTables] = build_conversion_tables()

SIZE_TABLE: Final[UnitTable] = DEFAULT_TABLES.size
BANDWIDTH_TABLE: Final[UnitTable] = DEFAULT_TABLES.bandwidth
TIME_TABLE: Final[UnitTable] = DEFAULT_TABLES.time


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def convert_unit(
    table: UnitTable | TableKind | str,
    from_unit: str,
    to_unit: str,
    value: float,
    tables: ConversionTables = DEFAULT_TABLES,
) -> float:
    """
    Конверсия значения внутри одной таблицы.

    Args:
        table: UnitTable или имя таблицы ("size", "bandwidth", "time")
        from_unit: Исходная единица
        to_unit: Целевая единица
        value: Значение
        tables: Набор таблиц для разрешения имени (default: DEFAULT_TABLES)

    Returns:
        value * (scale[to_unit] / scale[from_unit])

    Raises:
        UnknownUnitError: если единицы нет в таблице
        InvalidArgumentError: если имя таблицы неизвестно
    """
    if table is None:
        raise InvalidArgumentError("Table cannot be None")
    if not isinstance(table, UnitTable):
        table = tables.table(table)

    return table.convert(from_unit, to_unit, value)


def convert_all_size_units(
    value: float,
    unit: str,
    tables: ConversionTables = DEFAULT_TABLES,
) -> list[tuple[str, float]]:
    """
    Перевод размера во все остальные единицы размера.

    Порядок фиксирован: b, kb, mb, gb, tb, B, KB, MB, GB, TB
    (исходная единица пропускается).

    Raises:
        UnknownUnitError: если unit не является единицей размера

    Examples:
        >>> convert_all_size_units(500, "MB")[:2]
        [('b', 4000000000.0), ('kb', 4000000.0)]
    """
    size = tables.size
    size.scale(unit)

    return [(u, size.convert(unit, u, value)) for u in size.units if u != unit]


def describe_size_conversions(
    value: float,
    unit: str,
    tables: ConversionTables = DEFAULT_TABLES,
) -> list[str]:
    """
    То же, что convert_all_size_units, но в виде "<value> <unit>".

    Examples:
        >>> describe_size_conversions(500, "MB")[-2:]
        ['0.5 GB', '0.0005 TB']
    """
    return [f"{format_number(v)} {u}" for u, v in convert_all_size_units(value, unit, tables)]


def format_number(value: float) -> str:
    """
    Форматирование результата конверсии.

    Целое значение выводится без дробной части, иначе с полной точностью
    float (repr, без округления).

    Examples:
        >>> format_number(4000.0)
        '4000'
        >>> format_number(0.004)
        '0.004'
        >>> format_number(37.5)
        '37.5'
    """
    if math.isfinite(value) and value == math.floor(value):
        return str(int(value))
    return repr(float(value))
