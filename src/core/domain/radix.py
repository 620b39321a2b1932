"""
Radix — tagged variants для базы, оператора и таблицы единиц

Строковые значения совпадают с тем, что передаёт UI слой ("binary", "+",
"size"), поэтому вызывающий код может передавать как enum, так и строку.
Разбор строки выполняется только здесь: неизвестное значение →
InvalidArgumentError.
"""

from enum import Enum

from src.core.errors import InvalidArgumentError


# =============================================================================
# ENUMS
# =============================================================================


class Base(str, Enum):
    """Система счисления digit string"""

    BINARY = "binary"
    HEXADECIMAL = "hexadecimal"

    @property
    def radix(self) -> int:
        """Основание системы счисления (2 или 16)."""
        return 2 if self is Base.BINARY else 16

    @property
    def alphabet(self) -> str:
        """Допустимые цифры (без знака)."""
        return "01" if self is Base.BINARY else "0123456789ABCDEF"

    @property
    def signed(self) -> bool:
        """Допускает ли формат ведущий '-'."""
        return self is Base.HEXADECIMAL

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "Base | str | None") -> "Base":
        """
        Разбор базы из enum или строкового значения.

        Raises:
            InvalidArgumentError: если value is None или не является базой
        """
        if value is None:
            raise InvalidArgumentError("Base cannot be None")
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Not a valid value type: {value!r}") from None


class Operator(str, Enum):
    """Арифметический оператор"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "Operator | str | None") -> "Operator":
        """
        Разбор оператора из enum или символа.

        Raises:
            InvalidArgumentError: если value is None или не является оператором
        """
        if value is None:
            raise InvalidArgumentError("Operator cannot be None")
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Not a valid operation: {value!r}") from None


class TableKind(str, Enum):
    """Таблица конверсии единиц"""

    SIZE = "size"
    BANDWIDTH = "bandwidth"
    TIME = "time"

    @classmethod
    def parse(cls, value: "TableKind | str | None") -> "TableKind":
        if value is None:
            raise InvalidArgumentError("Table cannot be None")
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Not a valid conversion table: {value!r}") from None
