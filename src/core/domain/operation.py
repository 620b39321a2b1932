"""
OperationRecord — результат арифметической операции над digit strings

Immutable Pydantic модель. Создаётся на каждый вызов apply_operation,
возвращается вызывающему коду и никуда не сохраняется.
"""

from pydantic import BaseModel, Field

from src.core.domain.radix import Base, Operator


# =============================================================================
# OPERATION RECORD
# =============================================================================


class OperationRecord(BaseModel):
    """
    Запись об операции: операнды, база, результат и остаток.

    Результат и остаток хранятся в двух видах: digit string в базе
    операндов и десятичное значение (int32).
    """

    operator: Operator = Field(..., description="Оператор (+, -, *, /)")
    base: Base = Field(..., description="Система счисления операндов")
    left: str = Field(..., min_length=1, description="Левый операнд (digit string)")
    right: str = Field(..., min_length=1, description="Правый операнд (digit string)")

    left_decimal: int = Field(..., description="Десятичное значение левого операнда")
    right_decimal: int = Field(..., description="Десятичное значение правого операнда")

    result: str = Field(..., min_length=1, description="Результат в базе операндов")
    remainder: str = Field(..., min_length=1, description="Остаток в базе операндов")
    decimal_result: int = Field(..., description="Результат (int32)")
    decimal_remainder: int = Field(..., description="Остаток left mod right (truncating)")

    model_config = {"frozen": True}  # Immutable

    @property
    def is_division(self) -> bool:
        return self.operator is Operator.DIVIDE

    def primary_text(self) -> str:
        """
        Основной текст результата.

        Остаток показывается только для деления.

        Returns:
            "<result>" или "<result> Remainder: <remainder>"
        """
        if self.is_division:
            return f"{self.result} Remainder: {self.remainder}"
        return self.result

    def expression(self) -> str:
        """Выражение в базе операндов: "<a> <op> <b> = <result>[ Remainder: <r>]"."""
        return f"{self.left} {self.operator.symbol} {self.right} = {self.primary_text()}"

    def decimal_expression(self) -> str:
        """Выражение в десятичном виде."""
        text = (
            f"{self.left_decimal} {self.operator.symbol} {self.right_decimal} "
            f"= {self.decimal_result}"
        )
        if self.is_division:
            text += f" Remainder: {self.decimal_remainder}"
        return text
