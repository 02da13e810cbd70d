"""Base protocol for agent nodes."""

from typing import Protocol, runtime_checkable

from math_assistant.agents.calculator.state import AgentState


@runtime_checkable
class Node(Protocol):
    """Protocol for agent graph nodes.

    Nodes are callable objects that transform AgentState.
    They are used as nodes in the LangGraph StateGraph.
    """

    async def __call__(self, state: AgentState) -> AgentState:
        """Process state and return a state update.

        Args:
            state: Current agent state

        Returns:
            Partial agent state with the messages to append
        """
        ...
