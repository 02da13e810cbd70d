"""Application settings and configuration.

This module provides Pydantic settings classes for application configuration,
loaded from environment variables (and an optional .env file) with support
for nested configuration.
"""

import logging

import pydantic_settings
from pydantic import BaseModel, Field, field_validator

from math_assistant.platform.agent.config import AgentConfig, LlmConfig


class AppSettings(BaseModel):
    log_level: str = Field("WARNING")
    log_json: bool = Field(False, description="True=JSON log records, False=console")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v):
        v_upper = v.upper()
        if v_upper not in logging._nameToLevel:
            raise ValueError(f'invalid value "{v}"')
        return v_upper


class LlmSettings(BaseModel):
    """Model selection and per-query limits.

    Attributes:
        model: LiteLLM model identifier
        base_url: Optional LiteLLM proxy base URL
        temperature: Sampling temperature
        max_output_tokens: Maximum tokens generated per model call
        timeout_seconds: Upper bound for a single model call
        max_rounds: Maximum model consultations per query
        report_unknown_tools: Answer unknown tool requests with an error result
    """

    model: str = Field("gemini/gemini-2.5-pro")
    base_url: str | None = None
    temperature: float = Field(0.0, ge=0.0, le=2.0)
    max_output_tokens: int = Field(1024, gt=0)
    timeout_seconds: float = Field(15.0, gt=0)
    max_rounds: int = Field(10, gt=0)
    report_unknown_tools: bool = False


class MetricsSettings(BaseModel):
    port: int | None = Field(None, description="Expose Prometheus metrics on this port when set")


class Settings(pydantic_settings.BaseSettings):
    model_config = pydantic_settings.SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    # Credential for the hosted model; required
    google_api_key: str = Field(min_length=1)

    app: AppSettings = AppSettings()
    llm: LlmSettings = LlmSettings()
    metrics: MetricsSettings = MetricsSettings()

    @property
    def llm_config(self) -> LlmConfig:
        """Build the LLM client configuration."""
        return LlmConfig(
            model=self.llm.model,
            api_key=self.google_api_key,
            base_url=self.llm.base_url,
            temperature=self.llm.temperature,
            max_output_tokens=self.llm.max_output_tokens,
        )

    @property
    def agent_config(self) -> AgentConfig:
        """Build the agent behavior configuration."""
        return AgentConfig(
            max_reasoning_steps=self.llm.max_rounds,
            llm_timeout_seconds=self.llm.timeout_seconds,
            report_unknown_tools=self.llm.report_unknown_tools,
        )
