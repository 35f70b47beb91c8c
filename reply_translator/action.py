"""TRANSLATE action: translate the agent's last reply on request."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from reply_translator.detection import detect_language
from reply_translator.llm_client import LLMConfig, OpenAIChatClient
from reply_translator.translation import TranslationError, translate_text

logger = logging.getLogger(__name__)

ACTION_DESCRIPTION = "Translate text to a different language"

MISSING_API_KEY_MESSAGE = "OpenAI API key is not configured"
NO_PREVIOUS_MESSAGE = "No previous message to translate"
NO_AGENT_MESSAGE = "No agent message found to translate"
TRANSLATION_FAILED_TEMPLATE = "Error during translation: {message}"


@dataclass(frozen=True)
class ConversationMessage:
    user_id: str
    text: str | None


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    text: str


def find_last_agent_message(
    recent_messages: Sequence[ConversationMessage], agent_id: str
) -> ConversationMessage | None:
    for message in reversed(recent_messages):
        if message.user_id == agent_id:
            return message
    return None


def handle_translate(
    instruction: str,
    recent_messages: Sequence[ConversationMessage],
    *,
    agent_id: str,
    api_key: str | None,
    config: LLMConfig | None = None,
    client: OpenAIChatClient | None = None,
) -> ActionResult:
    """Translate the newest agent message into the language the user asked for.

    ``recent_messages`` is ordered oldest first and includes the instruction
    itself. Failures come back as ``ActionResult(ok=False)`` carrying the
    user-facing message; nothing is raised.
    """
    if not api_key:
        return ActionResult(ok=False, text=MISSING_API_KEY_MESSAGE)

    if len(recent_messages) < 2:
        return ActionResult(ok=False, text=NO_PREVIOUS_MESSAGE)

    agent_message = find_last_agent_message(recent_messages, agent_id)
    if agent_message is None or not agent_message.text:
        return ActionResult(ok=False, text=NO_AGENT_MESSAGE)

    target_language = detect_language(instruction or "", api_key, config=config, client=client)
    logger.info("Detected target language: %s", target_language)

    try:
        translated = translate_text(
            agent_message.text,
            target_language,
            api_key,
            config=config,
            client=client,
        )
    except TranslationError as exc:
        logger.error("Translation action error: %s", exc)
        return ActionResult(ok=False, text=TRANSLATION_FAILED_TEMPLATE.format(message=exc))

    return ActionResult(ok=True, text=translated)
