"""Reply translator package."""

from reply_translator.action import ActionResult, ConversationMessage, handle_translate
from reply_translator.detection import detect_language, detect_language_by_keywords, detect_language_by_prompt
from reply_translator.languages import (
    DEFAULT_LANGUAGE,
    LANGUAGE_CODES,
    LANGUAGE_KEYWORDS,
    get_language_code,
    get_supported_languages,
)
from reply_translator.llm_client import LLMClientError, LLMConfig, OpenAIChatClient
from reply_translator.translation import TranslationError, translate_text

__all__ = [
    "ActionResult",
    "ConversationMessage",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_CODES",
    "LANGUAGE_KEYWORDS",
    "LLMClientError",
    "LLMConfig",
    "OpenAIChatClient",
    "TranslationError",
    "detect_language",
    "detect_language_by_keywords",
    "detect_language_by_prompt",
    "get_language_code",
    "get_supported_languages",
    "handle_translate",
    "translate_text",
]
