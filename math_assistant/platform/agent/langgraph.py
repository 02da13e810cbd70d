"""LangGraph integration components.

This module provides LangGraph-specific implementations including:
- LangGraphMessageParser: Converts LangGraph messages to framework-agnostic types
- LangGraphAgent: A runnable agent that implements the Agent protocol
"""

import logging
from typing import Any, Protocol

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage
from langgraph.graph.state import CompiledStateGraph

from math_assistant.platform.agent.config import AgentIdentity
from math_assistant.platform.agent.messages import ExecutionResult, Message
from math_assistant.platform.agent.metrics import AgentMetricsLabels, collect_agent_metrics
from math_assistant.platform.agent.protocol import Agent

logger = logging.getLogger(__name__)


class LangGraphMessageParser:
    """Parser that converts LangGraph messages to framework-agnostic types.

    Transforms the final LangGraph state dictionary into the common
    ExecutionResult used by the interactive session.
    """

    def to_execution_result(
        self,
        langgraph_result: dict[str, Any],
        thread_id: str,
    ) -> ExecutionResult:
        """Convert LangGraph state to ExecutionResult.

        Args:
            langgraph_result: Final state dict from the compiled graph
            thread_id: The thread ID used

        Returns:
            Framework-agnostic ExecutionResult
        """
        messages = langgraph_result.get("messages", [])
        reasoning_steps = langgraph_result.get("reasoning_steps", 0)
        step_limit_reached = langgraph_result.get("step_limit_reached", False)

        # A run cut off at its step limit has no answer, only intermediate results.
        final_result = None if step_limit_reached else self._extract_final_result(messages)

        return ExecutionResult(
            response=self._extract_response(messages),
            final_result=final_result,
            messages=self._convert_messages(messages),
            reasoning_steps=reasoning_steps,
            thread_id=thread_id,
            metadata={"framework": "langgraph"},
        )

    def _extract_response(self, messages: list[BaseMessage]) -> str:
        """Extract the text of the last assistant message.

        Args:
            messages: List of LangChain messages

        Returns:
            The explanation text, or an empty string if the model never answered
        """
        for msg in reversed(messages):
            if isinstance(msg, AIMessage):
                return self._extract_content(msg)
        return ""

    def _extract_final_result(self, messages: list[BaseMessage]) -> str | None:
        """Extract the text of the last tool result, if any tool ran."""
        for msg in reversed(messages):
            if isinstance(msg, ToolMessage):
                return self._extract_content(msg)
        return None

    def _convert_messages(self, messages: list[BaseMessage]) -> list[Message]:
        """Convert LangChain messages to framework-agnostic Messages.

        Args:
            messages: List of LangChain BaseMessage instances

        Returns:
            List of framework-agnostic Message instances
        """
        converted = []
        for msg in messages:
            tool_calls = None
            tool_call_id = None

            if isinstance(msg, AIMessage) and msg.tool_calls:
                tool_calls = [
                    {
                        "id": tc.get("id", ""),
                        "name": tc.get("name", ""),
                        "args": tc.get("args", {}),
                    }
                    for tc in msg.tool_calls
                ]

            if isinstance(msg, ToolMessage):
                tool_call_id = msg.tool_call_id

            converted.append(
                Message(
                    role=self._get_role(msg),
                    content=self._extract_content(msg),
                    tool_calls=tool_calls,
                    tool_call_id=tool_call_id,
                    name=msg.name,
                )
            )

        return converted

    @staticmethod
    def _get_role(msg: BaseMessage) -> str:
        """Get the role string for a message.

        Args:
            msg: LangChain message

        Returns:
            Role string ("system", "user", "assistant", "tool")
        """
        if isinstance(msg, SystemMessage):
            return "system"
        elif isinstance(msg, HumanMessage):
            return "user"
        elif isinstance(msg, AIMessage):
            return "assistant"
        else:
            return "tool"

    @staticmethod
    def _extract_content(msg: BaseMessage) -> str:
        """Extract string content from a message.

        Gemini may answer with a list of content parts; text parts are joined.

        Args:
            msg: LangChain message

        Returns:
            Message content as string
        """
        content = msg.content
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            text_parts = [p.get("text", "") if isinstance(p, dict) else str(p) for p in content]
            return " ".join(part for part in text_parts if part)
        return str(content)


class InitialStateBuilder(Protocol):
    """Protocol for building the initial state for an agent."""

    def __call__(self, message: str, thread_id: str) -> dict[str, Any]:
        """Build the initial state for an agent.

        Args:
            message: User's input message
            thread_id: Identifier for this query's transcript

        Returns:
            Initial state for the agent
        """
        ...


class LangGraphAgent(Agent):
    """A configured, runnable LangGraph agent instance."""

    def __init__(
        self,
        graph: CompiledStateGraph,
        identity: AgentIdentity,
        initial_state_builder: InitialStateBuilder,
        message_parser: LangGraphMessageParser | None = None,
    ) -> None:
        """Initialize the agent.

        Args:
            graph: Compiled LangGraph ready for execution
            identity: Agent identity information
            initial_state_builder: Initial state builder
            message_parser: Optional custom message parser
        """
        self._graph = graph
        self._identity = identity
        self._initial_state_builder = initial_state_builder
        self._message_parser = message_parser or LangGraphMessageParser()

    @property
    def identity(self) -> AgentIdentity:
        return self._identity

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def slug(self) -> str:
        return self._identity.slug

    async def run(self, message: str, thread_id: str) -> ExecutionResult:
        """Run the agent on a fresh transcript holding only the user message.

        Args:
            message: User's input message
            thread_id: Identifier for this query's transcript

        Returns:
            Framework-agnostic ExecutionResult
        """
        init_state = self._initial_state_builder(message=message, thread_id=thread_id)

        logger.debug("Running agent %s for thread %s", self.slug, thread_id)
        async with collect_agent_metrics(AgentMetricsLabels(self.slug)):
            result = await self._graph.ainvoke(init_state)

        return self._message_parser.to_execution_result(
            langgraph_result=result,
            thread_id=thread_id,
        )
