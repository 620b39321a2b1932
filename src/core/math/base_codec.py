"""
Base Codec — Binary / Hexadecimal Digit Strings

Конверсия между целым числом и его digit string представлением:
- binary: алфавит {0, 1}, только неотрицательные значения
- hexadecimal: алфавит {0-9, A-F} (только верхний регистр), опциональный
  ведущий '-'

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decode(base, encode(base, n)) == n для всех n >= 0 в диапазоне int32
2. Пустая строка и строка из одного '-' невалидны
3. Строчные hex-цифры отклоняются, а не нормализуются
4. validate() выбрасывает InvalidFormatError только для None,
   некорректное содержимое → False
5. decode() насыщает модуль значения на INT32_MAX
"""

from typing import Final

from src.core.domain.radix import Base
from src.core.errors import InvalidArgumentError, InvalidFormatError
from src.core.math.int32 import saturate_int32

HEX_DIGITS: Final[str] = "0123456789ABCDEF"

ZERO: Final[str] = "0"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _split_sign(base: Base, s: str) -> tuple[bool, str]:
    """Отделение ведущего '-' (только для знаковых баз)."""
    if base.signed and s.startswith("-"):
        return True, s[1:]
    return False, s


def validate(base: Base | str, s: str | None) -> bool:
    """
    Проверка синтаксиса digit string без конверсии.

    Используется вызывающим кодом, которому нужно переспросить ввод, а не
    упасть. Асимметрия сохраняется намеренно: None → исключение,
    некорректное содержимое → False.

    Args:
        base: Система счисления
        s: Проверяемая строка

    Returns:
        True если строка является корректной digit string для base

    Raises:
        InvalidFormatError: если s is None
        InvalidArgumentError: если base не поддерживается

    Examples:
        >>> validate(Base.BINARY, "1010")
        True
        >>> validate(Base.BINARY, "012X")
        False
        >>> validate(Base.HEXADECIMAL, "-2CD")
        True
        >>> validate(Base.HEXADECIMAL, "ff")
        False
    """
    base = Base.parse(base)
    if s is None:
        raise InvalidFormatError("Cannot be null")

    _, digits = _split_sign(base, s)
    if not digits:
        return False

    alphabet = base.alphabet
    return all(c in alphabet for c in digits)


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def decode(base: Base | str, s: str | None) -> int:
    """
    Разбор digit string в целое значение.

    Значение вычисляется позиционно (старший разряд первым). Модуль выше
    INT32_MAX насыщается, затем ведущий '-' меняет знак.

    Args:
        base: Система счисления
        s: Digit string

    Returns:
        Целое значение в диапазоне int32

    Raises:
        InvalidFormatError: если s is None, пустая или содержит
            недопустимые символы

    Examples:
        >>> decode(Base.BINARY, "10101010")
        170
        >>> decode(Base.HEXADECIMAL, "DAD")
        3501
        >>> decode(Base.HEXADECIMAL, "-2CD")
        -717
    """
    base = Base.parse(base)
    if not validate(base, s):
        raise InvalidFormatError(f"Not a valid {base.value} value: {s!r}")

    negative, digits = _split_sign(base, s)
    value = saturate_int32(int(digits, base.radix))

    return -value if negative else value


def encode(base: Base | str, n: int) -> str:
    """
    Форматирование целого значения в digit string.

    Binary определён только для n >= 0. Hexadecimal кодирует abs(n) и
    добавляет '-' для отрицательных значений. Ноль всегда "0", ведущих
    нулей нет.

    Raises:
        InvalidArgumentError: если base == BINARY и n < 0

    Examples:
        >>> encode(Base.BINARY, 170)
        '10101010'
        >>> encode(Base.HEXADECIMAL, 170)
        'AA'
        >>> encode(Base.HEXADECIMAL, -717)
        '-2CD'
    """
    base = Base.parse(base)
    if n == 0:
        return ZERO

    if n < 0 and not base.signed:
        raise InvalidArgumentError(
            f"{base.label} encoding is defined only for non-negative values, got {n}"
        )

    negative = n < 0
    n = abs(n)
    digits = []
    while n != 0:
        n, digit = divmod(n, base.radix)
        digits.append(HEX_DIGITS[digit])

    result = "".join(reversed(digits))
    return "-" + result if negative else result


def convert_base(s: str | None, from_base: Base | str, to_base: Base | str) -> str:
    """
    Перевод digit string из одной системы счисления в другую.

    Examples:
        >>> convert_base("10101010", Base.BINARY, Base.HEXADECIMAL)
        'AA'
        >>> convert_base("DAD", "hexadecimal", "binary")
        '110110101101'
    """
    return encode(to_base, decode(from_base, s))
