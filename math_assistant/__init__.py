"""math-assistant - A natural-language calculator with LangGraph orchestration and arithmetic tools."""

from .agents.calculator.agent import CalculatorAgentBuilder
from .platform.agent.langgraph import LangGraphAgent
from .platform.settings import Settings


def create_agent(settings: Settings) -> LangGraphAgent:
    """Create the calculator agent from application settings."""
    builder = CalculatorAgentBuilder.default_builder(
        llm_config=settings.llm_config,
        agent_config=settings.agent_config,
    )
    return builder.build()
