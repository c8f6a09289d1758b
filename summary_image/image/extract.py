"""Extraction of embedded image data URIs from chat-completion responses.

Providers are expected to answer with Markdown image syntax such as
`![image](data:image/png;base64,....)`. Only the data-URI portion is returned;
the surrounding Markdown is discarded. The match ends at the first `)`, which
never occurs in the base64 alphabet.
"""

import re

DATA_URI_PATTERN = re.compile(r"data:image/[^;]+;base64,[^)]+")


def get_message_content(data) -> str:
    """Return `choices[0].message.content` or `""` when any level is missing."""
    if not isinstance(data, dict):
        return ""

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""

    choice = choices[0]
    if not isinstance(choice, dict):
        return ""

    message = choice.get("message")
    if not isinstance(message, dict):
        return ""

    content = message.get("content")
    return content if isinstance(content, str) else ""


def find_data_uri(text: str) -> str | None:
    """Return the first image data URI in `text`, or `None`."""
    if not text:
        return None
    match = DATA_URI_PATTERN.search(text)
    return match.group(0) if match else None
