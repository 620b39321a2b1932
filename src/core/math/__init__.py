"""
Core math modules

Int32 примитивы, кодек binary/hexadecimal и арифметика над digit strings.
"""

# Int32 primitives
from src.core.math.int32 import (
    INT32_BITS,
    INT32_MAX,
    INT32_MIN,
    add_int32,
    is_int32,
    mul_int32,
    saturate_int32,
    sub_int32,
    trunc_div,
    trunc_mod,
    wrap_int32,
)

# Base Codec
from src.core.math.base_codec import (
    HEX_DIGITS,
    convert_base,
    decode,
    encode,
    validate,
)

# Arithmetic Engine
from src.core.math.arithmetic import (
    add,
    apply_operation,
    divide,
    multiply,
    subtract,
)

__all__ = [
    # Int32 constants
    "INT32_BITS",
    "INT32_MAX",
    "INT32_MIN",
    # Int32 functions
    "add_int32",
    "is_int32",
    "mul_int32",
    "saturate_int32",
    "sub_int32",
    "trunc_div",
    "trunc_mod",
    "wrap_int32",
    # Base Codec
    "HEX_DIGITS",
    "convert_base",
    "decode",
    "encode",
    "validate",
    # Arithmetic Engine
    "add",
    "apply_operation",
    "divide",
    "multiply",
    "subtract",
]
