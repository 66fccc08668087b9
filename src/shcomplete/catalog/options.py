from __future__ import annotations

OPTION_PREFIX = "--"


def format_option_label(key: str) -> str:
    return f"{OPTION_PREFIX}{key}"


def option_label_matches_prefix(key: str, prefix_filter: str) -> bool:
    """Match ``--key`` against what the user typed.

    A prefix without leading dashes is matched against the bare key, so
    ``op`` offers ``--option1``.
    """
    if not prefix_filter:
        return True
    if format_option_label(key).startswith(prefix_filter):
        return True
    return not prefix_filter.startswith("-") and key.startswith(prefix_filter)


def option_key_from_token(token_text: str) -> str | None:
    """Return the key named by an option token, or None for other tokens."""
    if not token_text.startswith(OPTION_PREFIX) or token_text == OPTION_PREFIX:
        return None
    return token_text[len(OPTION_PREFIX) :]
