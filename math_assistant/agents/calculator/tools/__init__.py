"""Tools available to the calculator agent."""

from math_assistant.agents.calculator.tools.arithmetic import (
    OperandPair,
    add,
    create_arithmetic_tools,
    format_number,
    multiply,
)

__all__ = [
    "OperandPair",
    "add",
    "create_arithmetic_tools",
    "format_number",
    "multiply",
]
