"""
Тесты для модуля Base Codec

Проверяет:
1. decode / encode для binary и hexadecimal
2. Round-trip decode(encode(n)) == n
3. Асимметрию validate: None → исключение, мусор → False
4. Отклонение строчных hex-цифр и пустых строк
5. Насыщение при декодировании больших значений
"""

import pytest

from src.core.domain.radix import Base
from src.core.errors import InvalidArgumentError, InvalidFormatError
from src.core.math.base_codec import convert_base, decode, encode, validate
from src.core.math.int32 import INT32_MAX


# =============================================================================
# DECODE
# =============================================================================


class TestDecode:
    """Тесты для decode"""

    def test_binary(self) -> None:
        assert decode(Base.BINARY, "10101010") == 170
        assert decode(Base.BINARY, "0") == 0
        assert decode(Base.BINARY, "0001") == 1

    def test_hexadecimal(self) -> None:
        assert decode(Base.HEXADECIMAL, "DAD") == 3501
        assert decode(Base.HEXADECIMAL, "AA") == 170
        assert decode(Base.HEXADECIMAL, "0") == 0

    def test_negative_hexadecimal(self) -> None:
        """Ведущий '-' меняет знак"""
        assert decode(Base.HEXADECIMAL, "-2CD") == -717

    def test_accepts_string_base(self) -> None:
        """База может быть передана строкой"""
        assert decode("binary", "11") == 3
        assert decode("hexadecimal", "FF") == 255

    def test_invalid_binary_raises(self) -> None:
        with pytest.raises(InvalidFormatError):
            decode(Base.BINARY, "012X")

    def test_binary_rejects_minus(self) -> None:
        """Binary не поддерживает знак"""
        with pytest.raises(InvalidFormatError):
            decode(Base.BINARY, "-101")

    def test_lowercase_hex_rejected(self) -> None:
        """Строчные hex-цифры отклоняются, а не нормализуются"""
        with pytest.raises(InvalidFormatError):
            decode(Base.HEXADECIMAL, "dad")

    @pytest.mark.parametrize("base", [Base.BINARY, Base.HEXADECIMAL])
    def test_empty_raises(self, base: Base) -> None:
        with pytest.raises(InvalidFormatError):
            decode(base, "")

    def test_bare_minus_raises(self) -> None:
        with pytest.raises(InvalidFormatError):
            decode(Base.HEXADECIMAL, "-")

    @pytest.mark.parametrize("base", [Base.BINARY, Base.HEXADECIMAL])
    def test_none_raises(self, base: Base) -> None:
        with pytest.raises(InvalidFormatError, match="Cannot be null"):
            decode(base, None)

    def test_unknown_base_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Not a valid value type"):
            decode("octal", "17")

    def test_large_values_saturate(self) -> None:
        """Модуль выше INT32_MAX насыщается"""
        assert decode(Base.BINARY, "1" * 40) == INT32_MAX
        assert decode(Base.HEXADECIMAL, "FFFFFFFFFF") == INT32_MAX
        assert decode(Base.HEXADECIMAL, "-FFFFFFFFFF") == -INT32_MAX


# =============================================================================
# ENCODE
# =============================================================================


class TestEncode:
    """Тесты для encode"""

    def test_binary(self) -> None:
        assert encode(Base.BINARY, 170) == "10101010"
        assert encode(Base.BINARY, 1) == "1"

    def test_hexadecimal(self) -> None:
        assert encode(Base.HEXADECIMAL, 170) == "AA"
        assert encode(Base.HEXADECIMAL, 3501) == "DAD"

    @pytest.mark.parametrize("base", [Base.BINARY, Base.HEXADECIMAL])
    def test_zero_is_single_digit(self, base: Base) -> None:
        """Ноль кодируется как "0" без ведущих нулей"""
        assert encode(base, 0) == "0"

    def test_negative_hexadecimal(self) -> None:
        assert encode(Base.HEXADECIMAL, -717) == "-2CD"

    def test_negative_binary_raises(self) -> None:
        """Binary определён только для n >= 0"""
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            encode(Base.BINARY, -1)

    @pytest.mark.parametrize("base", [Base.BINARY, Base.HEXADECIMAL])
    @pytest.mark.parametrize("n", [0, 1, 2, 15, 16, 170, 3501, 65535, INT32_MAX])
    def test_roundtrip(self, base: Base, n: int) -> None:
        """Инвариант: decode(encode(n)) == n"""
        assert decode(base, encode(base, n)) == n


# =============================================================================
# VALIDATE
# =============================================================================


class TestValidate:
    """Тесты для validate"""

    def test_valid_strings(self) -> None:
        assert validate(Base.BINARY, "1010")
        assert validate(Base.HEXADECIMAL, "8AB")
        assert validate(Base.HEXADECIMAL, "-2CD")

    def test_malformed_returns_false(self) -> None:
        """Некорректное содержимое → False, без исключения"""
        assert validate(Base.BINARY, "012X") is False
        assert validate(Base.BINARY, "2") is False
        assert validate(Base.HEXADECIMAL, "ff") is False
        assert validate(Base.HEXADECIMAL, "G") is False
        assert validate(Base.HEXADECIMAL, "1-2") is False

    def test_empty_returns_false(self) -> None:
        assert validate(Base.BINARY, "") is False
        assert validate(Base.HEXADECIMAL, "") is False
        assert validate(Base.HEXADECIMAL, "-") is False

    def test_none_raises(self) -> None:
        """None → InvalidFormatError (асимметрия сохраняется)"""
        with pytest.raises(InvalidFormatError):
            validate(Base.BINARY, None)
        with pytest.raises(InvalidFormatError):
            validate(Base.HEXADECIMAL, None)


# =============================================================================
# CONVERT BASE
# =============================================================================


class TestConvertBase:
    """Тесты для convert_base"""

    def test_binary_to_hex(self) -> None:
        assert convert_base("10101010", Base.BINARY, Base.HEXADECIMAL) == "AA"

    def test_hex_to_binary(self) -> None:
        assert convert_base("DAD", "hexadecimal", "binary") == "110110101101"

    def test_negative_hex_to_binary_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            convert_base("-1", Base.HEXADECIMAL, Base.BINARY)
