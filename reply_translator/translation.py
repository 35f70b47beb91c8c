"""Markdown-preserving translation through the chat completions API."""

from __future__ import annotations

import logging

from reply_translator.llm_client import LLMConfig, OpenAIChatClient
from reply_translator.prompts import translation_prompt

logger = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """Raised when the translation call fails."""


def translate_text(
    text: str,
    target_language: str,
    api_key: str,
    *,
    config: LLMConfig | None = None,
    client: OpenAIChatClient | None = None,
) -> str:
    """Translate ``text`` into ``target_language``, keeping Markdown intact."""
    cfg = config or LLMConfig()
    try:
        llm = client or OpenAIChatClient(api_key=api_key)
        translated = llm.complete(
            system_prompt=translation_prompt(target_language),
            user_prompt=text,
            config=cfg,
        )
    except Exception as exc:
        cause = exc.__cause__ or exc
        logger.error("Translation error: %s", cause)
        raise TranslationError(f"Error occurred during translation: {cause}") from exc

    return translated.strip()
