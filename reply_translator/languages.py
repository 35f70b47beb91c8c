"""Supported target languages and the keywords that name them."""

from __future__ import annotations

from types import MappingProxyType

# Table order decides precedence when an instruction names several languages.
LANGUAGE_KEYWORDS = MappingProxyType(
    {
        "japanese": (
            "日本語",
            "にほんご",
            "和訳",
            "nihongo",
            "japanese",
            "japan",
            "일본어",
            "일본",
            "니혼고",
        ),
        "english": (
            "英語",
            "えいご",
            "英訳",
            "eigo",
            "english",
            "eng",
            "영어",
            "잉글리시",
            "영국어",
        ),
        "korean": (
            "韓国語",
            "かんこくご",
            "ハングル",
            "kankokugo",
            "korean",
            "korea",
            "hangul",
            "한국어",
            "한글",
            "조선말",
        ),
    }
)

LANGUAGE_CODES = MappingProxyType(
    {
        "japanese": "ja",
        "english": "en",
        "korean": "ko",
    }
)

DEFAULT_LANGUAGE = "english"


def get_supported_languages() -> list[str]:
    return list(LANGUAGE_KEYWORDS)


def is_supported_language(language: str) -> bool:
    return language in LANGUAGE_KEYWORDS


def get_language_code(language: str) -> str:
    """Return the ISO 639-1 code for a language, 'en' when unknown."""
    return LANGUAGE_CODES.get(language, "en")
