"""Tool node executing the model's tool requests one at a time."""

import logging
from time import monotonic

from langchain_core.messages import AIMessage, ToolCall, ToolMessage
from langchain_core.tools import BaseTool

from math_assistant.agents.calculator.state import AgentState
from math_assistant.platform.agent.config import AgentConfig
from math_assistant.platform.agent.metrics import ToolMetricsLabels, record_tool_call

from .base import Node

logger = logging.getLogger(__name__)

TOOL_ERROR_MESSAGE = "I encountered an error in the calculation. Let me try a different approach."


class ToolExecutorNode(Node):
    """Node that runs every tool call of the latest assistant message.

    Calls run sequentially in request order. Each recognised call yields
    exactly one ToolMessage; failures become a fixed error phrase. Unknown
    tool names are skipped unless ``report_unknown_tools`` is enabled.
    """

    def __init__(self, tools: list[BaseTool], config: AgentConfig, agent_slug: str):
        """Initialize the tool node.

        Args:
            tools: Tools the model may call
            config: Agent configuration
            agent_slug: The agent's slug for metrics labeling
        """
        self.tools_by_name = {tool.name: tool for tool in tools}
        self.config = config
        self.agent_slug = agent_slug

    async def _invoke(self, tool: BaseTool, tool_call: ToolCall) -> ToolMessage:
        labels = ToolMetricsLabels(self.agent_slug, tool.name)
        start_time = monotonic()
        try:
            observation = await tool.ainvoke(tool_call["args"])
        except Exception as e:
            record_tool_call(labels, duration=monotonic() - start_time, error=True)
            logger.warning(f"Tool '{tool.name}' failed: {e!s}")
            return ToolMessage(
                content=TOOL_ERROR_MESSAGE,
                tool_call_id=tool_call["id"] or "",
                name=tool.name,
                status="error",
            )

        record_tool_call(labels, duration=monotonic() - start_time)
        return ToolMessage(
            content=str(observation),
            tool_call_id=tool_call["id"] or "",
            name=tool.name,
        )

    def _unknown_tool(self, tool_call: ToolCall) -> ToolMessage | None:
        name = tool_call["name"]
        logger.warning(f"Model requested unknown tool '{name}'")
        if not self.config.report_unknown_tools:
            return None
        return ToolMessage(
            content=f"Error: unknown tool '{name}'",
            tool_call_id=tool_call["id"] or "",
            name=name,
            status="error",
        )

    async def __call__(self, state: AgentState) -> AgentState:
        """Execute the pending tool calls.

        Args:
            state: Current agent state

        Returns:
            State update appending one ToolMessage per executed call
        """
        messages = state["messages"]
        last_message = messages[-1] if messages else None
        if not isinstance(last_message, AIMessage) or not last_message.tool_calls:
            return {"messages": []}  # type: ignore

        results: list[ToolMessage] = []
        for tool_call in last_message.tool_calls:
            tool = self.tools_by_name.get(tool_call["name"])
            if tool is None:
                unknown = self._unknown_tool(tool_call)
                if unknown is not None:
                    results.append(unknown)
                continue
            results.append(await self._invoke(tool, tool_call))

        return {"messages": results}  # type: ignore
