"""Printable-text checks shared by usernames and post content."""

from __future__ import annotations

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126


def is_printable_ascii(value: str | None) -> bool:
    """
    True when every character is printable ASCII (code points 32-126).

    The empty string and None pass; callers that need non-empty input check
    that separately.
    """
    if not value:
        return True
    return all(PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX for ch in value)
