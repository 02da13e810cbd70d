"""Agent infrastructure module.

This module provides the core abstractions and integrations for building agents:
- Agent protocol definition
- Configuration dataclasses
- LangGraph integration
- LiteLLM client
- Agent-specific metrics
"""

from math_assistant.platform.agent.config import AgentConfig, AgentIdentity, LlmConfig
from math_assistant.platform.agent.langgraph import LangGraphAgent, LangGraphMessageParser
from math_assistant.platform.agent.llm_client import LlmClient
from math_assistant.platform.agent.messages import ExecutionResult, Message
from math_assistant.platform.agent.protocol import Agent

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentIdentity",
    "LlmConfig",
    "ExecutionResult",
    "Message",
    "LangGraphAgent",
    "LangGraphMessageParser",
    "LlmClient",
]
