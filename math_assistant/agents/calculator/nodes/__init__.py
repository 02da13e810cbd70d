"""LangGraph nodes."""

from math_assistant.agents.calculator.nodes.base import Node
from math_assistant.agents.calculator.nodes.consult import ConsultNode
from math_assistant.agents.calculator.nodes.tools import ToolExecutorNode

__all__ = [
    "ConsultNode",
    "Node",
    "ToolExecutorNode",
]
