"""Unit tests for the arithmetic tools.

This module tests the add/multiply functions, result formatting, and the
StructuredTool wrappers including argument validation.
"""

import math

import pytest
from pydantic import ValidationError

from math_assistant.agents.calculator.tools.arithmetic import (
    OperandPair,
    add,
    create_arithmetic_tools,
    format_number,
    multiply,
)


class TestFormatNumber:
    """Tests for format_number."""

    def test_integral_float_has_no_fraction(self):
        """Whole numbers print without '.0'."""
        assert format_number(60.0) == "60"

    def test_negative_integral(self):
        """Negative whole numbers keep their sign."""
        assert format_number(-12.0) == "-12"

    def test_zero(self):
        """Zero prints as '0'."""
        assert format_number(0.0) == "0"

    def test_fractional_value(self):
        """Fractions use the shortest float repr."""
        assert format_number(2.5) == "2.5"

    def test_float_rounding_is_not_hidden(self):
        """Binary float artefacts are reported as computed."""
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_large_integral_uses_exponent(self):
        """Very large whole numbers keep exponent notation."""
        assert format_number(1e21) == "1e+21"

    def test_just_below_exponent_limit(self):
        """Whole numbers below the limit print every digit."""
        assert format_number(1e20) == "100000000000000000000"

    def test_infinity(self):
        """Overflow to infinity is rendered as 'inf'."""
        assert format_number(math.inf) == "inf"

    def test_nan(self):
        """NaN is rendered as 'nan'."""
        assert format_number(math.nan) == "nan"

    def test_accepts_int(self):
        """Plain ints print as written."""
        assert format_number(7) == "7"

    def test_large_int_prints_every_digit(self):
        """Integers are not routed through float."""
        assert format_number(10**22) == "1" + "0" * 22


class TestArithmeticFunctions:
    """Tests for add and multiply."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (25, 35, "60"),
            (-4, 4, "0"),
            (1.5, 2.25, "3.75"),
            (10, -20, "-10"),
        ],
    )
    def test_add(self, a, b, expected):
        """add returns a+b as text."""
        assert add(a, b) == expected

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (60, 2, "120"),
            (4, 6, "24"),
            (0.5, 3, "1.5"),
            (-3, 5, "-15"),
            (7, 0, "0"),
        ],
    )
    def test_multiply(self, a, b, expected):
        """multiply returns a*b as text."""
        assert multiply(a, b) == expected

    def test_integer_product_is_exact(self):
        """Integer operands keep exact integer arithmetic."""
        assert multiply(123456789, 987654321) == "121932631112635269"

    def test_results_are_strings(self):
        """Both tools return text, never numbers."""
        assert isinstance(add(1, 2), str)
        assert isinstance(multiply(1, 2), str)


class TestOperandPair:
    """Tests for the tool argument schema."""

    def test_accepts_numbers(self):
        """Ints and floats are accepted as operands."""
        pair = OperandPair(a=1, b=2.5)
        assert pair.a == 1
        assert isinstance(pair.a, int)
        assert pair.b == 2.5

    @pytest.mark.parametrize("value", ["5", True, None])
    def test_rejects_strings_booleans_and_null(self, value):
        """Values that only look numeric are not coerced."""
        with pytest.raises(ValidationError):
            OperandPair(a=value, b=2)  # type: ignore[arg-type]

    def test_rejects_non_numeric(self):
        """Words are not numbers."""
        with pytest.raises(ValidationError):
            OperandPair(a="five", b=2)  # type: ignore[arg-type]

    def test_requires_both_operands(self):
        """Both operands are required."""
        with pytest.raises(ValidationError):
            OperandPair(a=1)  # type: ignore[call-arg]

    def test_field_descriptions(self):
        """Operands are described to the model as first and second."""
        schema = OperandPair.model_json_schema()
        assert schema["properties"]["a"]["description"] == "first"
        assert schema["properties"]["b"]["description"] == "second"
        assert set(schema["required"]) == {"a", "b"}


class TestCreateArithmeticTools:
    """Tests for the StructuredTool wrappers."""

    @pytest.fixture
    def tools_by_name(self):
        return {tool.name: tool for tool in create_arithmetic_tools()}

    def test_tool_names(self, tools_by_name):
        """Exactly add and multiply are exposed."""
        assert set(tools_by_name) == {"add", "multiply"}

    def test_tool_descriptions(self, tools_by_name):
        """Descriptions are short and literal."""
        assert tools_by_name["add"].description == "Add two numbers"
        assert tools_by_name["multiply"].description == "Multiply two numbers"

    async def test_add_tool_invocation(self, tools_by_name):
        """Async invocation with an argument mapping returns text."""
        assert await tools_by_name["add"].ainvoke({"a": 25, "b": 35}) == "60"

    async def test_multiply_tool_invocation(self, tools_by_name):
        """Multiply tool returns the product as text."""
        assert await tools_by_name["multiply"].ainvoke({"a": 60, "b": 2}) == "120"

    def test_sync_invocation(self, tools_by_name):
        """Sync invocation works too."""
        assert tools_by_name["add"].invoke({"a": 0.5, "b": 0.25}) == "0.75"

    async def test_malformed_arguments_rejected(self, tools_by_name):
        """Non-numeric operands fail at the invocation boundary."""
        with pytest.raises(ValidationError):
            await tools_by_name["add"].ainvoke({"a": "lots", "b": 1})

    async def test_missing_argument_rejected(self, tools_by_name):
        """A missing operand fails at the invocation boundary."""
        with pytest.raises(ValidationError):
            await tools_by_name["multiply"].ainvoke({"a": 3})

    @pytest.mark.parametrize("args", [{"a": "5", "b": 2}, {"a": True, "b": 2}])
    async def test_coercible_arguments_rejected(self, tools_by_name, args):
        """Numeric strings and booleans fail at the invocation boundary."""
        with pytest.raises(ValidationError):
            await tools_by_name["add"].ainvoke(args)
