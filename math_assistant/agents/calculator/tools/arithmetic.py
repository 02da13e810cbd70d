"""Arithmetic tools exposed to the model."""

import math

from langchain_core.tools import BaseTool, StructuredTool
from pydantic import BaseModel, ConfigDict, Field

# Integral floats at or beyond this magnitude are rendered in exponent form.
_PLAIN_INTEGER_LIMIT = 1e21


class OperandPair(BaseModel):
    # Numeric strings and booleans are rejected, not coerced.
    model_config = ConfigDict(strict=True)

    a: int | float = Field(description="first")
    b: int | float = Field(description="second")


def format_number(value: int | float) -> str:
    """Render a numeric result as text.

    Integers print exactly. Integral floats print without a fractional part
    so ``25.0 + 35.0`` reads ``"60"`` rather than ``"60.0"``.
    """
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def add(a: int | float, b: int | float) -> str:
    """Add two numbers."""
    return format_number(a + b)


def multiply(a: int | float, b: int | float) -> str:
    """Multiply two numbers."""
    return format_number(a * b)


def create_arithmetic_tools() -> list[BaseTool]:
    """Create the add and multiply tools.

    Returns:
        StructuredTools validating both operands as numbers
    """
    return [
        StructuredTool.from_function(
            func=add,
            name="add",
            description="Add two numbers",
            args_schema=OperandPair,
        ),
        StructuredTool.from_function(
            func=multiply,
            name="multiply",
            description="Multiply two numbers",
            args_schema=OperandPair,
        ),
    ]
