"""Target-language inference for translation requests.

Detection runs cheapest first: keyword lookup, then a model classification
call, then the static default. ``detect_language`` always returns a language.
"""

from __future__ import annotations

import logging

from reply_translator.languages import DEFAULT_LANGUAGE, LANGUAGE_KEYWORDS, is_supported_language
from reply_translator.llm_client import LLMConfig, OpenAIChatClient
from reply_translator.prompts import language_detection_prompt

logger = logging.getLogger(__name__)

_REPLY_PUNCTUATION = "'\"`.!。"


def detect_language_by_keywords(text: str) -> str | None:
    """Return the first language whose keyword appears in ``text``."""
    lowered = text.lower()
    for language, keywords in LANGUAGE_KEYWORDS.items():
        if any(keyword.lower() in lowered for keyword in keywords):
            return language
    return None


def detect_language_by_prompt(
    text: str,
    api_key: str,
    *,
    config: LLMConfig | None = None,
    client: OpenAIChatClient | None = None,
) -> str | None:
    """Ask the model which supported language ``text`` is written in.

    Failures are logged and reported as ``None`` so the caller can fall back.
    """
    cfg = config or LLMConfig()
    try:
        llm = client or OpenAIChatClient(api_key=api_key)
        reply = llm.complete(
            system_prompt=language_detection_prompt(),
            user_prompt=text,
            config=cfg,
        )
    except Exception as exc:
        logger.error("Prompt language detection error: %s", exc)
        return None

    detected = reply.strip().strip(_REPLY_PUNCTUATION).strip().lower()
    if not detected:
        return None
    if not is_supported_language(detected):
        logger.warning("Ignoring unsupported detected language: %r", detected)
        return None
    return detected


def detect_language(
    text: str,
    api_key: str,
    *,
    config: LLMConfig | None = None,
    client: OpenAIChatClient | None = None,
) -> str:
    keyword_result = detect_language_by_keywords(text)
    if keyword_result:
        logger.debug("Language matched by keyword: %s", keyword_result)
        return keyword_result

    prompt_result = detect_language_by_prompt(text, api_key, config=config, client=client)
    if prompt_result:
        logger.debug("Language detected by model: %s", prompt_result)
        return prompt_result

    logger.debug("Falling back to default language: %s", DEFAULT_LANGUAGE)
    return DEFAULT_LANGUAGE
