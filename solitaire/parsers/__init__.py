"""
Solitaire Parsers
==================

Input normalization utilities for the Solitaire cipher.
"""

from solitaire.parsers.text import normalize, strip_groups

__all__ = ["normalize", "strip_groups"]
