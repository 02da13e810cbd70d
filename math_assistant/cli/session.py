"""Line-oriented interactive session around the calculator agent."""

import asyncio
import logging
import uuid
from collections.abc import Callable
from enum import StrEnum

import click

from math_assistant.cli.manual import (
    EMPTY_INPUT_HINT,
    FAREWELL,
    MANUAL,
    NOTHING_CALCULATED,
    PROMPT,
    RETRY_HINT,
)
from math_assistant.platform.agent.messages import ExecutionResult
from math_assistant.platform.agent.protocol import Agent
from math_assistant.platform.observability.logging import correlation_id_ctx

logger = logging.getLogger(__name__)


class Command(StrEnum):
    """Literal inputs handled without consulting the agent."""

    EXIT = "exit"
    HELP = "help"
    CLEAR = "clear"


def prompt_line() -> str:
    """Read one line from the terminal; blank input yields an empty string."""
    return click.prompt(PROMPT, default="", show_default=False, prompt_suffix="")


class InteractiveSession:
    """Read-evaluate-print loop feeding each question to a fresh agent run.

    Every question gets its own transcript and thread id; nothing carries
    over between questions. Errors while answering are reported and the
    loop continues. The loop ends on ``exit``, end of input, or Ctrl-C.
    """

    def __init__(
        self,
        agent: Agent,
        read_line: Callable[[], str] = prompt_line,
        echo: Callable[..., None] = click.echo,
        clear: Callable[[], None] = click.clear,
        new_thread_id: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        """Initialize the session.

        Args:
            agent: Agent answering the questions
            read_line: Callable returning the next input line; raises
                click.Abort on end of input or interrupt
            echo: Output function with click.echo's signature
            clear: Function clearing the terminal
            new_thread_id: Factory for per-question thread ids
        """
        self._agent = agent
        self._read_line = read_line
        self._echo = echo
        self._clear = clear
        self._new_thread_id = new_thread_id
        self._runner: asyncio.Runner | None = None

    def show_manual(self) -> None:
        self._echo(MANUAL)

    def farewell(self) -> None:
        self._echo(FAREWELL)

    def run(self) -> int:
        """Run the loop until the user leaves.

        Returns:
            Process exit status (always 0)
        """
        self.show_manual()
        with asyncio.Runner() as runner:
            self._runner = runner
            try:
                while self.handle_line(self._read_line()):
                    pass
            except (click.Abort, EOFError, KeyboardInterrupt):
                self.farewell()
            finally:
                self._runner = None
        return 0

    def handle_line(self, line: str) -> bool:
        """Handle one input line.

        Args:
            line: Raw text typed by the user

        Returns:
            False when the session should end
        """
        command = line.strip().lower()

        if command == Command.EXIT:
            self.farewell()
            return False
        if command == Command.HELP:
            self.show_manual()
            return True
        if command == Command.CLEAR:
            self._clear()
            return True
        if not command:
            self._echo(EMPTY_INPUT_HINT)
            return True

        self.ask(line.strip())
        return True

    def ask(self, question: str) -> None:
        """Send a question to the agent and print the outcome."""
        thread_id = self._new_thread_id()
        token = correlation_id_ctx.set(thread_id)
        try:
            result = self._run_agent(question, thread_id)
        except Exception as e:
            logger.exception("Failed to answer question")
            self._echo(f"\nI apologize, but I encountered an error: {e}", err=True)
            self._echo(RETRY_HINT)
            return
        finally:
            correlation_id_ctx.reset(token)

        self.render(result)

    def _run_agent(self, question: str, thread_id: str) -> ExecutionResult:
        coro = self._agent.run(message=question, thread_id=thread_id)
        if self._runner is None:
            return asyncio.run(coro)
        return self._runner.run(coro)

    def render(self, result: ExecutionResult) -> None:
        """Print the explanation and the final result of an agent run."""
        explanation = result.response
        final_result = result.final_result

        if explanation and final_result:
            self._echo(f"\n{explanation}")
            self._echo(f"\nFinal result: {final_result}")
        elif final_result:
            self._echo(f"\nHere's what I calculated: {final_result}")
        elif explanation:
            self._echo(f"\n{explanation}")
        else:
            self._echo(NOTHING_CALCULATED)
