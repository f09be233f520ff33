"""
Shared helpers for the fragment generators — input checks and trimming.
"""

from __future__ import annotations

import re

# Trailing comma plus any whitespace after it
_TRAILING_COMMA_RE = re.compile(r",\s*$")


class InvalidInput(ValueError):
    """Raised when a generator receives input it cannot template."""


def check_file_types(file_types: list[str], *, forbidden: str | None = None) -> None:
    """Validate a file-type identifier list before templating.

    Args:
        file_types: File-type identifiers.
        forbidden: Separator token no identifier may contain.

    Raises:
        InvalidInput: If the list is empty, an identifier is not a
            non-empty string, or an identifier contains ``forbidden``.
    """
    if not file_types:
        raise InvalidInput("At least one file type is required")

    for ft in file_types:
        if not isinstance(ft, str) or not ft:
            raise InvalidInput(f"File type must be a non-empty string, got {ft!r}")
        if forbidden and forbidden in ft:
            raise InvalidInput(f"File type {ft!r} contains separator {forbidden!r}")


def strip_trailing_comma(fragments: list[str]) -> list[str]:
    """Drop the comma trailing the last fragment, if any."""
    if fragments:
        fragments[-1] = _TRAILING_COMMA_RE.sub("", fragments[-1])
    return fragments
