"""
Text Normalization
===================

Prepares user-supplied passphrases and messages for the cipher core,
which only accepts uppercase ``A``-``Z``.  Normalization is the caller's
job; the core validates but never rewrites its input.

Two policies are offered:

* strict (default): uppercase and drop spaces only, so anything else
  reaches the core and is rejected there with :class:`InvalidCharacterError`;
* lenient: uppercase, then drop every character that is not a letter
  ``A``-``Z`` (spaces, digits, punctuation, line breaks).
"""

from __future__ import annotations

import re

_NON_LETTERS = re.compile(r"[^A-Z]+")
_SPACES = re.compile(r" +")


def normalize(
    text: str,
    *,
    strict: bool = True,
    uppercase: bool = True,
    strip_spaces: bool = True,
) -> str:
    """Normalize *text* for the cipher core.

    Args:
        text:         Raw user input.
        strict:       Keep non-space, non-letter characters so the core
                      rejects them.  ``False`` drops them instead.
        uppercase:    Fold lowercase letters to uppercase first.
        strip_spaces: Remove spaces (block separators in cipher text).

    Returns:
        The normalized string.
    """
    if uppercase:
        text = text.upper()
    if strict:
        return _SPACES.sub("", text) if strip_spaces else text
    if not strip_spaces:
        # Keep the spaces, drop everything else.
        return "".join(ch for ch in text if ch == " " or "A" <= ch <= "Z")
    return _NON_LETTERS.sub("", text)


def strip_groups(text: str) -> str:
    """Remove the block separators from grouped cipher output."""
    return text.replace(" ", "")
