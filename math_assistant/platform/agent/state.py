"""Base LangGraph state definition for all agents."""

from typing import Annotated, TypedDict

from langchain_core.messages import AnyMessage
from langgraph.graph.message import add_messages


class BaseAgentState(TypedDict):
    """Base LangGraph state shared across all agents.

    Attributes:
        messages: Transcript of the current query, appended via add_messages
        thread_id: Unique identifier for the query, used as log correlation id
        agent_slug: Identifier for the agent type that owns this transcript
    """

    messages: Annotated[list[AnyMessage], add_messages]
    thread_id: str
    agent_slug: str
