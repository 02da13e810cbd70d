"""LangGraph calculator agent builder module.

This module provides the builder class for constructing the two-node
consult/tools graph that answers natural-language arithmetic questions.
"""

from typing import Self

from langchain_core.messages import AIMessage, HumanMessage
from langchain_core.runnables import Runnable
from langchain_core.tools import BaseTool
from langgraph.graph import END, START, StateGraph

from math_assistant.agents.calculator.nodes import ConsultNode, ToolExecutorNode
from math_assistant.agents.calculator.prompt import build_system_prompt
from math_assistant.agents.calculator.state import AgentState
from math_assistant.agents.calculator.tools import create_arithmetic_tools
from math_assistant.platform.agent.config import AgentConfig, AgentIdentity, LlmConfig
from math_assistant.platform.agent.langgraph import LangGraphAgent
from math_assistant.platform.agent.llm_client import LlmClient

CONSULT_NODE = "consult"
TOOLS_NODE = "tools"


def route_after_consult(state: AgentState) -> str:
    """Go to the tools node while the latest reply requests tools, else finish."""
    messages = state["messages"]
    last_message = messages[-1] if messages else None
    if isinstance(last_message, AIMessage) and last_message.tool_calls:
        return TOOLS_NODE
    return END


class CalculatorAgentBuilder:
    """Builder for constructing the LangGraph-based calculator agent.

    This builder assembles all components needed for the agent:
    - LLM client with the arithmetic tools bound
    - Consult node for the model call
    - Tool node for sequential tool execution
    """

    SLUG = "calculator"

    def __init__(
        self,
        agent_config: AgentConfig,
        llm_config: LlmConfig,
        identity: AgentIdentity,
        tools: list[BaseTool] | None = None,
        llm: Runnable | None = None,
    ) -> None:
        """Initialize the builder with configuration.

        Args:
            agent_config: Configuration for agent behavior (steps, timeout, etc.)
            llm_config: Configuration for the LLM client
            identity: Agent identity (name, description, slug)
            tools: Optional tool list. Defaults to the arithmetic tools.
            llm: Optional runnable already bound to the tools. Defaults to an
                LlmClient built from llm_config. Inject for testing.
        """
        self.agent_config = agent_config
        self.llm_config = llm_config
        self.identity = identity
        self.tools = tools if tools is not None else create_arithmetic_tools()
        self._llm = llm

    def _build_llm(self) -> Runnable:
        if self._llm is not None:
            return self._llm
        llm_client = LlmClient.from_config(self.identity.slug, self.llm_config)
        return llm_client.bind_tools(self.tools)

    def build(self) -> LangGraphAgent:
        """Build and return a configured LangGraphAgent.

        Returns:
            A fully configured LangGraphAgent ready for execution.
        """
        consult_node = ConsultNode(
            self._build_llm(),
            self.agent_config,
            system_prompt=build_system_prompt(),
        )
        tool_node = ToolExecutorNode(self.tools, self.agent_config, self.identity.slug)

        workflow = StateGraph(AgentState)

        workflow.add_node(CONSULT_NODE, consult_node)  # type: ignore
        workflow.add_node(TOOLS_NODE, tool_node)  # type: ignore

        workflow.add_edge(START, CONSULT_NODE)
        workflow.add_conditional_edges(CONSULT_NODE, route_after_consult, [TOOLS_NODE, END])
        workflow.add_edge(TOOLS_NODE, CONSULT_NODE)

        compiled = workflow.compile()
        return LangGraphAgent(
            graph=compiled.with_config({"recursion_limit": self.agent_config.recursion_limit}),  # type: ignore
            identity=self.identity,
            initial_state_builder=self.build_initial_state,  # type: ignore
        )

    @classmethod
    def default_builder(
        cls,
        llm_config: LlmConfig,
        agent_config: AgentConfig | None = None,
        identity: AgentIdentity | None = None,
    ) -> Self:
        """Create a builder with default configuration for the calculator agent.

        Args:
            llm_config: Configuration for the LLM client
            agent_config: Optional agent behavior configuration
            identity: Optional agent identity. Defaults to the Math Assistant.

        Returns:
            A configured CalculatorAgentBuilder instance.
        """
        default_identity = AgentIdentity(
            name="Math Assistant",
            description="A friendly assistant that adds and multiplies numbers described in plain English",
            slug=cls.SLUG,
        )
        return cls(
            agent_config=agent_config or AgentConfig(),
            llm_config=llm_config,
            identity=identity or default_identity,
        )

    @classmethod
    def build_initial_state(cls, message: str, thread_id: str) -> AgentState:
        """Get the initial state for the agent.

        Args:
            message: User's input message
            thread_id: Identifier for this query's transcript

        Returns:
            Initial agent state holding a single human message
        """
        return AgentState(
            messages=[HumanMessage(content=message)],
            reasoning_steps=0,
            step_limit_reached=False,
            thread_id=thread_id,
            agent_slug=cls.SLUG,
        )
