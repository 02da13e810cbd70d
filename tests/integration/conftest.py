"""Integration test fixtures.

This module provides shared fixtures for integration tests including:
- A scripted stand-in for the hosted model
- Agent configuration and identity fixtures
- Builders producing a real compiled graph around the scripted model
"""

import asyncio
from collections.abc import Callable, Sequence
from typing import Any

import pytest
from langchain_core.messages import AIMessage, BaseMessage

from math_assistant.agents.calculator.agent import CalculatorAgentBuilder
from math_assistant.platform.agent.config import AgentConfig, AgentIdentity, LlmConfig
from math_assistant.platform.agent.langgraph import LangGraphAgent


class ScriptedModel:
    """Deterministic model stub replaying canned replies in order.

    Each reply is an AIMessage to return, an exception to raise, or a
    number of seconds to stall (to exercise the call timeout).
    """

    def __init__(self, replies: Sequence[AIMessage | BaseException | float]):
        self.replies = list(replies)
        self.calls: list[list[BaseMessage]] = []

    async def ainvoke(self, messages, config=None, **kwargs) -> AIMessage:
        self.calls.append(list(messages))
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, (int, float)):
            await asyncio.sleep(reply)
            return AIMessage(content="too late")
        return reply


def tool_request(*calls: tuple[str, dict[str, Any], str], content: str = "") -> AIMessage:
    """Build an assistant message requesting the given (name, args, id) tool calls."""
    return AIMessage(
        content=content,
        tool_calls=[{"name": name, "args": args, "id": call_id} for name, args, call_id in calls],
    )


@pytest.fixture
def agent_config() -> AgentConfig:
    """Create a test agent config."""
    return AgentConfig(max_reasoning_steps=5, llm_timeout_seconds=1.0)


@pytest.fixture
def llm_config() -> LlmConfig:
    """Create a test LLM config."""
    return LlmConfig(model="test-model", api_key="test-key")


@pytest.fixture
def stub_identity() -> AgentIdentity:
    """Create a stub agent identity with canned test data."""
    return AgentIdentity(
        name="Test Calculator",
        description="A calculator agent for integration tests",
        slug="test-calculator",
    )


@pytest.fixture
def build_agent(
    agent_config: AgentConfig,
    llm_config: LlmConfig,
    stub_identity: AgentIdentity,
) -> Callable[..., LangGraphAgent]:
    """Return a factory compiling the real graph around a scripted model."""

    def factory(model: ScriptedModel, config: AgentConfig | None = None) -> LangGraphAgent:
        builder = CalculatorAgentBuilder(
            agent_config=config or agent_config,
            llm_config=llm_config,
            identity=stub_identity,
            llm=model,  # type: ignore[arg-type]
        )
        return builder.build()

    return factory


@pytest.fixture
def scripted_model() -> type[ScriptedModel]:
    """Expose the scripted model class to tests."""
    return ScriptedModel


@pytest.fixture
def make_tool_request() -> Callable[..., AIMessage]:
    """Expose the tool request message factory to tests."""
    return tool_request
