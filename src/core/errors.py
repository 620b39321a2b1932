"""
Ошибки калькулятора

Все ошибки локальные и синхронные: ни одна операция не изменяет общее
состояние до того, как выбросить исключение. Повторный ввод (re-prompt)
полностью на стороне вызывающего UI слоя.

Иерархия:
- CalculatorError — базовый класс
  - InvalidFormatError   — некорректная digit string или None
  - InvalidArgumentError — неподдерживаемый оператор / база / значение
  - DivisionByZeroError  — правый операнд равен нулю (деление или остаток)
  - UnknownUnitError     — единица отсутствует в таблице конверсии
"""


class CalculatorError(Exception):
    """Базовое исключение для всех ошибок ядра калькулятора."""

    pass


class InvalidFormatError(CalculatorError, ValueError):
    """Digit string не соответствует алфавиту базы (или None)."""

    pass


class InvalidArgumentError(CalculatorError, ValueError):
    """Неподдерживаемый оператор, база или комбинация значений."""

    pass


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """
    Правый операнд численно равен нулю.

    Остаток вычисляется для любого оператора, поэтому ошибка возникает
    и для +, -, * если правый операнд равен нулю.
    """

    pass


class UnknownUnitError(CalculatorError, LookupError):
    """Единица измерения отсутствует в таблице конверсии."""

    def __init__(self, unit: str, table: str):
        self.unit = unit
        self.table = table
        super().__init__(f"Unknown {table} unit: {unit!r}")
