"""
Arithmetic Engine — операции над binary / hexadecimal операндами

Стратегия "decimal intermediate": оба операнда декодируются в int32,
операция выполняется над целыми, результат и остаток кодируются обратно.

ФОРМУЛЫ:
    remainder = trunc_mod(a, b)          (вычисляется для ЛЮБОГО оператора)
    result    = a + b | a - b | a * b    (wrap int32)
              | trunc_div(a, b)          (усечение к нулю)

ЗНАК (только binary):
    Binary кодирует только модуль, поэтому результат кодируется как
    encode(abs(result)), а для '-' при a < b добавляется ведущий '-'.
    Hexadecimal кодирует знак сам.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. b == 0 → DivisionByZeroError для любого оператора (остаток всегда нужен)
2. None в любом аргументе → InvalidArgumentError
3. Операнд не проходит validate → InvalidFormatError
4. Никаких побочных эффектов: на выходе только OperationRecord
"""

import logging
from typing import Callable, Final

from src.core.domain.operation import OperationRecord
from src.core.domain.radix import Base, Operator
from src.core.errors import InvalidArgumentError, InvalidFormatError
from src.core.math.base_codec import decode, encode, validate
from src.core.math.int32 import add_int32, mul_int32, sub_int32, trunc_div, trunc_mod

logger = logging.getLogger(__name__)

_OPERATIONS: Final[dict[Operator, Callable[[int, int], int]]] = {
    Operator.ADD: add_int32,
    Operator.SUBTRACT: sub_int32,
    Operator.MULTIPLY: mul_int32,
    Operator.DIVIDE: trunc_div,
}


def apply_operation(
    operator: Operator | str,
    a: str,
    b: str,
    base: Base | str,
) -> OperationRecord:
    """
    Выполнение арифметической операции над двумя digit strings.

    Args:
        operator: Оператор (Operator или символ "+", "-", "*", "/")
        a: Левый операнд
        b: Правый операнд
        base: Система счисления операндов (Base или "binary"/"hexadecimal")

    Returns:
        OperationRecord с результатом и остатком (digit string и int)

    Raises:
        InvalidArgumentError: None в аргументах, неизвестный оператор или база
        InvalidFormatError: операнд не является корректной digit string
        DivisionByZeroError: правый операнд равен нулю

    Examples:
        >>> apply_operation("+", "10101010", "11001100", "binary").result
        '101110110'
        >>> apply_operation("-", "10101010", "11001100", "binary").result
        '-100010'
        >>> apply_operation("/", "DAC", "23", "hexadecimal").primary_text()
        '64 Remainder: 0'
    """
    if operator is None or a is None or b is None or base is None:
        raise InvalidArgumentError("Cannot be null")

    operator = Operator.parse(operator)
    base = Base.parse(base)

    for operand in (a, b):
        if not validate(base, operand):
            raise InvalidFormatError(f"Not a valid {base.value} value: {operand!r}")

    a_dec = decode(base, a)
    b_dec = decode(base, b)

    remainder_dec = trunc_mod(a_dec, b_dec)
    result_dec = _OPERATIONS[operator](a_dec, b_dec)

    if base is Base.BINARY:
        result = encode(base, abs(result_dec))
        if operator is Operator.SUBTRACT and a_dec < b_dec:
            result = "-" + result
    else:
        result = encode(base, result_dec)

    record = OperationRecord(
        operator=operator,
        base=base,
        left=a,
        right=b,
        left_decimal=a_dec,
        right_decimal=b_dec,
        result=result,
        remainder=encode(base, remainder_dec),
        decimal_result=result_dec,
        decimal_remainder=remainder_dec,
    )

    logger.debug("%s: %s", base.label, record.expression())
    logger.debug("Decimal: %s", record.decimal_expression())

    return record


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def add(a: str, b: str, base: Base | str) -> OperationRecord:
    """Сумма a + b."""
    return apply_operation(Operator.ADD, a, b, base)


def subtract(a: str, b: str, base: Base | str) -> OperationRecord:
    """Разность a - b."""
    return apply_operation(Operator.SUBTRACT, a, b, base)


def multiply(a: str, b: str, base: Base | str) -> OperationRecord:
    """Произведение a * b (wrap int32)."""
    return apply_operation(Operator.MULTIPLY, a, b, base)


def divide(a: str, b: str, base: Base | str) -> OperationRecord:
    """Частное a / b с усечением к нулю, остаток в record.remainder."""
    return apply_operation(Operator.DIVIDE, a, b, base)
