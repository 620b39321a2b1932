"""
Int32 — Fixed-width Signed Integer Primitives

Арифметика калькулятора определена над диапазоном 32-битного знакового
целого. Python int не ограничен, поэтому поведение переполнения
эмулируется явно:

- +, -, * → wrap по модулю 2**32 (two's complement)
- / → усечение к нулю (truncating), INT32_MIN / -1 → INT32_MIN
- % → остаток с усечением к нулю, знак совпадает со знаком делимого
- decode digit string → насыщение (saturation) на INT32_MAX

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции лежит в [INT32_MIN, INT32_MAX]
2. a == trunc_div(a, b) * b + trunc_mod(a, b) (для b != 0, без переполнения)
3. Деление на ноль → DivisionByZeroError (не ZeroDivisionError без контекста)

Переполнение — унаследованное поведение, а не гарантия. Произвольная
точность изменила бы наблюдаемые результаты для больших входов.
"""

from typing import Final

from src.core.errors import DivisionByZeroError

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

INT32_BITS: Final[int] = 32

INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))

INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1

_INT32_MODULUS: Final[int] = 2**INT32_BITS


# =============================================================================
# ПРИВЕДЕНИЕ К ДИАПАЗОНУ
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Приведение к int32 с переполнением (two's complement wrap).

    Examples:
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(-1)
        -1
        >>> wrap_int32(2**32 + 5)
        5
    """
    value %= _INT32_MODULUS
    if value > INT32_MAX:
        value -= _INT32_MODULUS
    return value


def saturate_int32(value: int) -> int:
    """
    Приведение к int32 с насыщением на границах.

    Так ведёт себя сужение double → int: значения вне диапазона
    прижимаются к INT32_MIN / INT32_MAX.

    Examples:
        >>> saturate_int32(2**40)
        2147483647
        >>> saturate_int32(-(2**40))
        -2147483648
    """
    if value > INT32_MAX:
        return INT32_MAX
    if value < INT32_MIN:
        return INT32_MIN
    return value


def is_int32(value: int) -> bool:
    """Проверка, что value помещается в int32 без переполнения."""
    return INT32_MIN <= value <= INT32_MAX


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add_int32(a: int, b: int) -> int:
    return wrap_int32(a + b)


def sub_int32(a: int, b: int) -> int:
    return wrap_int32(a - b)


def mul_int32(a: int, b: int) -> int:
    return wrap_int32(a * b)


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности, поэтому частное
    вычисляется по модулям и знак восстанавливается отдельно.

    Raises:
        DivisionByZeroError: если b == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(INT32_MIN, -1)
        -2147483648
    """
    if b == 0:
        raise DivisionByZeroError(f"Division by zero: {a} / {b}")

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient

    return wrap_int32(quotient)


def trunc_mod(a: int, b: int) -> int:
    """
    Остаток от деления с усечением к нулю.

    Знак остатка совпадает со знаком делимого:
    a == trunc_div(a, b) * b + trunc_mod(a, b)

    Raises:
        DivisionByZeroError: если b == 0

    Examples:
        >>> trunc_mod(7, 2)
        1
        >>> trunc_mod(-7, 2)
        -1
        >>> trunc_mod(7, -2)
        1
    """
    if b == 0:
        raise DivisionByZeroError(f"Remainder by zero: {a} % {b}")

    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder

    return wrap_int32(remainder)
