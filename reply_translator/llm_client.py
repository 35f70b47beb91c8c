"""Single-shot OpenAI Chat Completions calls."""

from __future__ import annotations

import os
from dataclasses import dataclass


class LLMClientError(RuntimeError):
    """Raised when an LLM call fails."""


@dataclass(frozen=True)
class LLMConfig:
    model: str = "gpt-4o-mini"
    temperature: float = 0.3
    timeout_seconds: int = 60


class OpenAIChatClient:
    def __init__(self, *, api_key: str | None = None, base_url: str | None = None):
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise LLMClientError("Missing OPENAI_API_KEY")

        try:
            from openai import OpenAI
        except ImportError as exc:  # pragma: no cover - import guard
            raise LLMClientError(
                "openai package is not installed. Run: pip install -e ."
            ) from exc

        client_kwargs = {"api_key": api_key}
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = OpenAI(**client_kwargs)

    def complete(self, *, system_prompt: str, user_prompt: str, config: LLMConfig) -> str:
        """Send one system/user exchange and return the stripped reply text.

        No retry: a failed request raises ``LLMClientError`` chained to the
        provider's exception.
        """
        try:
            response = self._client.chat.completions.create(
                model=config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=config.temperature,
                timeout=config.timeout_seconds,
            )
            content = response.choices[0].message.content
        except Exception as exc:
            raise LLMClientError(f"LLM call failed: {exc}") from exc

        if content is None:
            raise LLMClientError("LLM returned no content")
        return content.strip()
