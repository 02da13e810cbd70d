"""System prompt template for the calculator agent."""


def build_system_prompt() -> str:
    """Build the system prompt for the agent.

    Returns:
        Complete system prompt string
    """
    return (
        "You are a friendly and helpful math assistant. "
        "After performing calculations, explain the steps clearly and provide "
        "the final result in a conversational way. Be concise but friendly."
    )
