"""Unit tests for framework-agnostic message types.

This module tests the Message and ExecutionResult dataclasses.
"""

import pytest

from math_assistant.platform.agent.messages import ExecutionResult, Message


class TestMessage:
    """Tests for Message dataclass."""

    def test_create_with_required_fields(self):
        """Can create message with role and content."""
        msg = Message(role="user", content="add 1 and 2")
        assert msg.role == "user"
        assert msg.content == "add 1 and 2"

    def test_optional_fields_default_to_none(self):
        """Tool-related fields default to None."""
        msg = Message(role="assistant", content="Response")
        assert msg.tool_calls is None
        assert msg.tool_call_id is None
        assert msg.name is None

    def test_can_set_tool_calls(self):
        """tool_calls can be explicitly set."""
        tool_calls = [{"id": "call_1", "name": "add", "args": {"a": 1, "b": 2}}]
        msg = Message(role="assistant", content="", tool_calls=tool_calls)
        assert msg.tool_calls == tool_calls

    def test_tool_result(self):
        """Tool results carry the originating call id and tool name."""
        msg = Message(role="tool", content="3", tool_call_id="call_1", name="add")
        assert msg.tool_call_id == "call_1"
        assert msg.name == "add"

    def test_is_frozen(self):
        """Message is immutable (frozen)."""
        msg = Message(role="user", content="Hello")
        with pytest.raises(AttributeError):
            msg.content = "Changed"  # type: ignore[misc]


class TestExecutionResult:
    """Tests for ExecutionResult dataclass."""

    def test_create(self):
        """All fields are stored."""
        messages = [Message(role="user", content="add 1 and 2")]
        result = ExecutionResult(
            response="1 plus 2 is 3.",
            final_result="3",
            messages=messages,
            reasoning_steps=2,
            thread_id="thread-1",
        )
        assert result.response == "1 plus 2 is 3."
        assert result.final_result == "3"
        assert result.messages == messages
        assert result.reasoning_steps == 2
        assert result.thread_id == "thread-1"

    def test_metadata_defaults_to_empty_dict(self):
        """metadata defaults to a fresh empty dict per instance."""
        first = ExecutionResult(
            response="", final_result=None, messages=[], reasoning_steps=0, thread_id="a"
        )
        second = ExecutionResult(
            response="", final_result=None, messages=[], reasoning_steps=0, thread_id="b"
        )
        assert first.metadata == {}
        assert first.metadata is not second.metadata

    def test_is_frozen(self):
        """ExecutionResult is immutable."""
        result = ExecutionResult(
            response="", final_result=None, messages=[], reasoning_steps=0, thread_id="a"
        )
        with pytest.raises(AttributeError):
            result.response = "changed"  # type: ignore[misc]
