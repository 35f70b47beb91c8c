import pytest

from fakes import FakeChatClient
from reply_translator import detection
from reply_translator.detection import (
    detect_language,
    detect_language_by_keywords,
    detect_language_by_prompt,
)
from reply_translator.languages import DEFAULT_LANGUAGE, LANGUAGE_KEYWORDS
from reply_translator.llm_client import LLMClientError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("日本語に翻訳してください", "japanese"),
        ("translate to english please", "english"),
        ("한국어로 번역해주세요", "korean"),
        ("TRANSLATE TO ENGLISH", "english"),
        ("これを英語に翻訳してください", "english"),
        ("韓国語で表示してください", "korean"),
    ],
)
def test_detect_language_by_keywords(text: str, expected: str) -> None:
    assert detect_language_by_keywords(text) == expected


def test_every_keyword_maps_to_its_language() -> None:
    for language, keywords in LANGUAGE_KEYWORDS.items():
        for keyword in keywords:
            assert detect_language_by_keywords(f"xx {keyword.upper()} xx") == language


def test_detect_language_by_keywords_no_match() -> None:
    assert detect_language_by_keywords("please translate this") is None
    assert detect_language_by_keywords("翻訳してください") is None
    assert detect_language_by_keywords("") is None


def test_table_order_wins_over_position() -> None:
    # "english" appears first in the text, but japanese is defined first.
    assert detect_language_by_keywords("english to japanese") == "japanese"
    assert detect_language_by_keywords("한국어 english") == "english"


def test_detect_language_by_prompt_uses_model() -> None:
    client = FakeChatClient(replies=["japanese"])
    assert detect_language_by_prompt("翻訳してください", "key", client=client) == "japanese"

    call = client.calls[0]
    assert call["user_prompt"] == "翻訳してください"
    assert "'japanese', 'english', or 'korean'" in call["system_prompt"]
    assert call["config"].temperature == 0.3


def test_detect_language_by_prompt_normalizes_reply() -> None:
    client = FakeChatClient(replies=["  Korean \n"])
    assert detect_language_by_prompt("번역", "key", client=client) == "korean"


@pytest.mark.parametrize("reply", ["'japanese'", "Japanese.", "\"japanese\"", " `Japanese` \n"])
def test_detect_language_by_prompt_strips_quotes_and_punctuation(reply: str) -> None:
    client = FakeChatClient(replies=[reply])
    assert detect_language_by_prompt("翻訳してください", "key", client=client) == "japanese"


def test_detect_language_uses_quoted_model_reply() -> None:
    client = FakeChatClient(replies=["'korean'"])
    assert detect_language("번역해 주세요", "key", client=client) == "korean"


def test_detect_language_by_prompt_swallows_errors() -> None:
    client = FakeChatClient(error=LLMClientError("boom"))
    assert detect_language_by_prompt("hola", "key", client=client) is None


def test_detect_language_by_prompt_handles_client_construction_failure(monkeypatch) -> None:
    def broken_client(**kwargs):
        raise LLMClientError("Missing OPENAI_API_KEY")

    monkeypatch.setattr(detection, "OpenAIChatClient", broken_client)
    assert detect_language_by_prompt("hola", "") is None


def test_detect_language_by_prompt_rejects_empty_and_unsupported() -> None:
    assert detect_language_by_prompt("x", "key", client=FakeChatClient(replies=["   "])) is None
    assert detect_language_by_prompt("x", "key", client=FakeChatClient(replies=["french"])) is None


def test_detect_language_keyword_match_skips_model() -> None:
    client = FakeChatClient(replies=["korean"])
    assert detect_language("translate to Japanese", "key", client=client) == "japanese"
    assert client.calls == []


def test_detect_language_falls_back_to_model() -> None:
    client = FakeChatClient(replies=["japanese"])
    assert detect_language("翻訳してください", "key", client=client) == "japanese"
    assert len(client.calls) == 1


def test_detect_language_defaults_when_model_fails() -> None:
    client = FakeChatClient(error=RuntimeError("network down"))
    assert detect_language("please translate", "key", client=client) == DEFAULT_LANGUAGE


def test_detect_language_defaults_when_model_returns_nothing() -> None:
    client = FakeChatClient(replies=[""])
    assert detect_language("please translate", "key", client=client) == DEFAULT_LANGUAGE
