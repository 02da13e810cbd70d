"""Agent protocol definitions.

This module defines the framework-agnostic Agent protocol that the
interactive session talks to, so a stub agent can stand in for the
LangGraph implementation.
"""

from typing import Protocol

from math_assistant.platform.agent.config import AgentIdentity
from math_assistant.platform.agent.messages import ExecutionResult


class Agent(Protocol):
    """Protocol for an agent."""

    @property
    def identity(self) -> AgentIdentity:
        """The identity of the agent."""
        ...

    @property
    def name(self) -> str:
        """The name of the agent."""
        ...

    @property
    def slug(self) -> str:
        """The slug of the agent."""
        ...

    async def run(self, message: str, thread_id: str) -> ExecutionResult:
        """Execute the agent with a user message and return the execution result.

        Args:
            message: User's input message
            thread_id: Identifier for this query's transcript
        """
        ...
