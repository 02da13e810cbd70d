"""Interactive command-line front end."""

from math_assistant.cli.session import Command, InteractiveSession

__all__ = ["Command", "InteractiveSession"]
