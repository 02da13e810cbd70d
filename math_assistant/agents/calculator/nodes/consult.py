"""Consult node for LLM-based reasoning."""

import asyncio
import logging

from langchain_core.messages import AIMessage, SystemMessage
from langchain_core.runnables import Runnable

from math_assistant.agents.calculator.state import AgentState
from math_assistant.platform.agent.config import AgentConfig

from .base import Node

logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = (
    "I apologize, but I ran into a small issue with the calculation. Could you please try again?"
)
STEP_LIMIT_MESSAGE = (
    "I had to stop after {steps} calculation rounds without reaching an answer. "
    "Please try a simpler question."
)


class ConsultNode(Node):
    """Node that asks the LLM for the next action or the final answer.

    Model failures and timeouts are absorbed into a fixed apology, and the
    number of consultations per query is capped.
    """

    def __init__(
        self,
        llm_with_tools: Runnable,
        config: AgentConfig,
        system_prompt: str,
    ):
        """Initialize the consult node.

        Args:
            llm_with_tools: LLM with tools bound
            config: Agent configuration
            system_prompt: Instruction prepended to every model call
        """
        self.llm = llm_with_tools
        self.config = config
        self.system_prompt = system_prompt

    async def _ask_model(self, state: AgentState) -> AIMessage:
        messages = [SystemMessage(content=self.system_prompt), *state["messages"]]
        try:
            async with asyncio.timeout(self.config.llm_timeout_seconds):
                return await self.llm.ainvoke(messages)
        except TimeoutError:
            logger.warning(f"LLM call timed out after {self.config.llm_timeout_seconds}s")
        except Exception:
            logger.exception("LLM call failed")
        return AIMessage(content=APOLOGY_MESSAGE)

    async def __call__(self, state: AgentState) -> AgentState:
        """Consult the model with the full transcript.

        Args:
            state: Current agent state

        Returns:
            State update appending the model reply
        """
        steps = state.get("reasoning_steps", 0)
        logger.debug(f"Step {steps}, messages count: {len(state['messages'])}")

        if steps >= self.config.max_reasoning_steps:
            logger.warning(f"Stopping after {steps} reasoning steps without a final answer")
            return {  # type: ignore
                "messages": [AIMessage(content=STEP_LIMIT_MESSAGE.format(steps=steps))],
                "reasoning_steps": steps,
                "step_limit_reached": True,
            }

        result = await self._ask_model(state)
        return {  # type: ignore
            "messages": [result],
            "reasoning_steps": steps + 1,
        }
