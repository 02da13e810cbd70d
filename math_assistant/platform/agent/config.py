"""Configuration dataclasses for agent components.

This module provides immutable configuration objects for LLM clients
and agent behavior settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LlmConfig:
    """Configuration for language model clients.

    Attributes:
        model: LiteLLM model identifier (e.g., "gemini/gemini-2.5-pro")
        api_key: API key for the LLM provider
        base_url: Optional base URL for the API (e.g., a LiteLLM proxy URL)
        temperature: Sampling temperature (0.0 to 1.0)
        max_output_tokens: Upper bound on tokens generated per call
    """

    model: str
    api_key: str | None = None
    base_url: str | None = None
    temperature: float = 0.0
    max_output_tokens: int = 1024


@dataclass(frozen=True)
class AgentConfig:
    """Configuration for agent behavior.

    Attributes:
        max_reasoning_steps: Maximum model consultations per query before the
            turn is stopped with a fixed message
        llm_timeout_seconds: Upper bound for a single model call
        report_unknown_tools: Emit an error tool result for tool names the agent
            does not know instead of skipping them
    """

    max_reasoning_steps: int = 10
    llm_timeout_seconds: float = 15.0
    report_unknown_tools: bool = False

    @property
    def recursion_limit(self) -> int:
        """LangGraph recursion limit derived from the reasoning step ceiling.

        Each round visits two nodes; the final consult visit and the
        ceiling stop message need headroom on top.
        """
        return 2 * self.max_reasoning_steps + 4


@dataclass(frozen=True)
class AgentIdentity:
    """Identity information for an agent.

    Attributes:
        name: Human-readable display name for the agent
        description: Brief description of the agent's capabilities
        slug: Identifier used for metrics labels and log context
    """

    name: str
    description: str
    slug: str
