"""System prompts for language classification and translation."""

from __future__ import annotations

from reply_translator.languages import get_supported_languages


def _quoted_choices(languages: list[str]) -> str:
    quoted = [f"'{language}'" for language in languages]
    if len(quoted) == 1:
        return quoted[0]
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"


def language_detection_prompt() -> str:
    choices = _quoted_choices(get_supported_languages())
    return (
        "Detect the language of the user's message and respond with only "
        f"{choices}."
    )


def translation_prompt(target_language: str) -> str:
    return f"""You are a high-quality translator. Your task is to translate the given text to {target_language}.
IMPORTANT: Preserve all Markdown formatting. DO NOT add ANY explanations or comments.
ONLY provide the direct translation of the text. No introductions, no questions, no additional text."""
