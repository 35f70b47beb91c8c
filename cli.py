from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from reply_translator import (
    ConversationMessage,
    LLMClientError,
    LLMConfig,
    OpenAIChatClient,
    detect_language,
    handle_translate,
)
from reply_translator.action import ACTION_DESCRIPTION

AGENT_ID = "agent"
USER_ID = "user"


def _read_text(text: str | None, text_path: str | None) -> str | None:
    if text_path:
        return Path(text_path).read_text(encoding="utf-8")
    return text


def _log_level(verbose: bool, env_value: str | None) -> int:
    if verbose:
        return logging.DEBUG
    return logging.getLevelNamesMapping().get((env_value or "").strip().upper(), logging.WARNING)


def main() -> int:
    parser = argparse.ArgumentParser(description=ACTION_DESCRIPTION)
    parser.add_argument("--instruction", required=True, help="User instruction, e.g. 'translate to Japanese'")
    parser.add_argument("--text", help="Agent message to translate", default=None)
    parser.add_argument("--text-file", help="Path to a file holding the agent message", default=None)
    parser.add_argument("--model", help="Model name", default=os.getenv("OPENAI_MODEL", "gpt-4o-mini"))
    parser.add_argument("--base-url", help="OpenAI-compatible endpoint", default=os.getenv("OPENAI_BASE_URL"))
    parser.add_argument("--detect-only", action="store_true", help="Print the detected language and exit")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=_log_level(args.verbose, os.getenv("LOG_LEVEL")),
        format="%(asctime)s | %(levelname)s | %(name)s: %(message)s",
    )

    api_key = os.getenv("OPENAI_API_KEY")
    config = LLMConfig(model=args.model)
    client = OpenAIChatClient(api_key=api_key, base_url=args.base_url) if api_key else None

    if args.detect_only:
        if not api_key:
            raise SystemExit("OPENAI_API_KEY is not set")
        print(detect_language(args.instruction, api_key, config=config, client=client))
        return 0

    agent_text = _read_text(args.text, args.text_file)
    messages = [ConversationMessage(user_id=USER_ID, text=args.instruction)]
    if agent_text:
        messages.insert(0, ConversationMessage(user_id=AGENT_ID, text=agent_text))

    result = handle_translate(
        args.instruction,
        messages,
        agent_id=AGENT_ID,
        api_key=api_key,
        config=config,
        client=client,
    )
    print(result.text)
    return 0 if result.ok else 1


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except LLMClientError as exc:
        raise SystemExit(str(exc))
