"""Platform infrastructure module.

This module provides the infrastructure the calculator agent is built on:
- Agent protocol and base classes
- LangGraph integration
- LiteLLM client
- Settings and observability utilities
"""

from math_assistant.platform.agent.config import AgentConfig, AgentIdentity, LlmConfig
from math_assistant.platform.agent.langgraph import LangGraphAgent
from math_assistant.platform.agent.messages import ExecutionResult, Message
from math_assistant.platform.agent.protocol import Agent
from math_assistant.platform.settings import Settings

__all__ = [
    # Core protocols
    "Agent",
    # Configuration
    "AgentConfig",
    "AgentIdentity",
    "LlmConfig",
    "Settings",
    # LangGraph integration
    "LangGraphAgent",
    # Message types
    "ExecutionResult",
    "Message",
]
