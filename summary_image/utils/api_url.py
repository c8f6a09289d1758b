"""Normalization of user-supplied provider URLs to chat-completions endpoints.

Accepted inputs (all resolve to `https://host/v1/chat/completions`):
    - `https://host`
    - `https://host/v1`
    - `https://host/v1/chat/completions`

Anything that is not an absolute HTTP(S) URL normalizes to the empty string so
callers can treat it the same way as a missing value.
"""

import re
from urllib.parse import urlparse

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"

_VERSION_SEGMENT = re.compile(r"/v\d+[a-z0-9]*(/|$)", re.IGNORECASE)


def normalize_chat_completions_url(raw_url) -> str:
    """Return a chat-completions endpoint for `raw_url`, or `""` when unusable.

    Rules:
        - Surrounding whitespace and trailing path slashes are stripped.
        - The suffix goes on the path; query string and fragment are kept.
        - URLs already ending in `/chat/completions` are kept.
        - URLs whose path holds a version segment (`/v1`, `/v1beta/openai`)
          get only the suffix.
        - Bare hosts and unversioned paths get `/v1/chat/completions`.
    """
    if not raw_url:
        return ""

    url = str(raw_url).strip().rstrip("/")
    if not url:
        return ""

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return ""

    path = parsed.path.rstrip("/")
    if not path.endswith(CHAT_COMPLETIONS_SUFFIX):
        if not _VERSION_SEGMENT.search(path):
            path += "/v1"
        path += CHAT_COMPLETIONS_SUFFIX

    return parsed._replace(path=path).geturl()
