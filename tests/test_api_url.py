import pytest

from summary_image.utils.api_url import normalize_chat_completions_url


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://api.example.com", "https://api.example.com/v1/chat/completions"),
        ("https://api.example.com/", "https://api.example.com/v1/chat/completions"),
        ("https://api.example.com/v1", "https://api.example.com/v1/chat/completions"),
        ("https://api.example.com/v1/", "https://api.example.com/v1/chat/completions"),
        (
            "https://generativelanguage.googleapis.com/v1beta/openai",
            "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions",
        ),
        (
            "https://generativelanguage.googleapis.com/v1beta",
            "https://generativelanguage.googleapis.com/v1beta/chat/completions",
        ),
        (
            "  https://api.example.com/v1/chat/completions  ",
            "https://api.example.com/v1/chat/completions",
        ),
        ("http://127.0.0.1:8080", "http://127.0.0.1:8080/v1/chat/completions"),
        (
            "https://openrouter.ai/api/v1",
            "https://openrouter.ai/api/v1/chat/completions",
        ),
    ],
)
def test_normalizes_to_chat_completions(raw, expected):
    assert normalize_chat_completions_url(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "/", "api.example.com", "ftp://host/v1", "https://"])
def test_unusable_urls_normalize_to_empty(raw):
    assert normalize_chat_completions_url(raw) == ""


def test_unversioned_path_gets_default_version():
    assert normalize_chat_completions_url("https://proxy.example.com/openai") == (
        "https://proxy.example.com/openai/v1/chat/completions"
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://host/v1?key=abc", "https://host/v1/chat/completions?key=abc"),
        ("https://host/v1/?key=abc", "https://host/v1/chat/completions?key=abc"),
        ("https://host?key=abc", "https://host/v1/chat/completions?key=abc"),
        (
            "https://host/v1/chat/completions?api-version=2024#frag",
            "https://host/v1/chat/completions?api-version=2024#frag",
        ),
    ],
)
def test_query_and_fragment_stay_after_the_path(raw, expected):
    assert normalize_chat_completions_url(raw) == expected
