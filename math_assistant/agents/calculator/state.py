"""LangGraph state definition for the calculator agent."""

from math_assistant.platform.agent.state import BaseAgentState


class AgentState(BaseAgentState):
    """LangGraph state for the calculator agent.

    Inherits from BaseAgentState and adds:
        reasoning_steps: Number of model consultations so far
        step_limit_reached: Set when the round ceiling stopped the run
    """

    reasoning_steps: int
    step_limit_reached: bool
