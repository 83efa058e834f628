"""Case- and accent-insensitive text folding for suggestion matching.

``normalize("  Équipe ")`` → ``"equipe"``.  The folded form is only ever used
for comparison; display always uses the original string.
"""

from __future__ import annotations

import unicodedata

# Combining Diacritical Marks block
_COMBINING_LOW = 0x0300
_COMBINING_HIGH = 0x036F


def normalize(text: str | None) -> str:
    """Lower-case, decompose (NFD), drop combining accents, trim whitespace."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(
        ch for ch in decomposed if not (_COMBINING_LOW <= ord(ch) <= _COMBINING_HIGH)
    )
    return stripped.strip()
