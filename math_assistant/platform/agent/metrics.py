"""Agent-level Prometheus metrics.

Tracks agent run durations, LLM token usage per model, and tool call
counts and durations.
"""

from time import monotonic
from typing import NamedTuple

import prometheus_client

from math_assistant.platform.observability.metrics import setup_metrics_factory


class AgentMetricsLabels(NamedTuple):
    agent: str


class ToolMetricsLabels(NamedTuple):
    agent: str
    tool_name: str


agent_run_histogram = setup_metrics_factory(
    prometheus_client.REGISTRY,
    name="agent_run_duration_seconds",
    documentation="Agent run duration (seconds)",
    labelnames=(*AgentMetricsLabels._fields, "status"),
)

tool_call_histogram = setup_metrics_factory(
    prometheus_client.REGISTRY,
    name="agent_tool_call_duration_seconds",
    documentation="Tool call duration (seconds)",
    labelnames=(*ToolMetricsLabels._fields, "status"),
)

agent_tokens_counter = prometheus_client.Counter(
    name="agent_llm_tokens",
    documentation="LLM tokens consumed by agents",
    labelnames=("agent", "model", "direction"),
    registry=prometheus_client.REGISTRY,
)


def _status(error: bool) -> str:
    return "error" if error else "success"


def record_tool_call(labels: ToolMetricsLabels, duration: float, error: bool = False) -> None:
    """Record a single tool invocation.

    Args:
        labels: Agent and tool name labels
        duration: Time spent in the tool (seconds)
        error: Whether the invocation failed
    """
    tool_call_histogram.labels(*labels, _status(error)).observe(duration)


def record_agent_tokens(agent: str, model: str, input_tokens: int, output_tokens: int) -> None:
    """Record token usage reported by one LLM call.

    Zero counts are skipped so models that do not report usage leave no series.
    """
    if input_tokens > 0:
        agent_tokens_counter.labels(agent, model, "input").inc(input_tokens)
    if output_tokens > 0:
        agent_tokens_counter.labels(agent, model, "output").inc(output_tokens)


class collect_agent_metrics:  # noqa: N801
    """Async context manager that times an agent run.

    Usage:
        ```
        async with collect_agent_metrics(AgentMetricsLabels("calculator")):
            await graph.ainvoke(...)
        ```
    """

    def __init__(self, labels: AgentMetricsLabels):
        self.labels = labels
        self._start = 0.0

    async def __aenter__(self) -> "collect_agent_metrics":
        self._start = monotonic()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        agent_run_histogram.labels(*self.labels, _status(exc_type is not None)).observe(
            monotonic() - self._start
        )
        return False
