"""Calculator agent: a consult/tools graph over the arithmetic tools."""

from math_assistant.agents.calculator.agent import CalculatorAgentBuilder

__all__ = ["CalculatorAgentBuilder"]
