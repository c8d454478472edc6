"""Query tokenization."""

import string
from typing import List

from ..constants import MIN_TOKEN_LENGTH

# Hyphens carry meaning in compounds ("hip-hop", "e-sports")
EDGE_PUNCTUATION = "".join(ch for ch in string.punctuation if ch != "-")


def normalize_word(word: str) -> str:
    """Lowercase a word and strip surrounding punctuation."""
    return word.lower().strip(EDGE_PUNCTUATION)


def tokenize(query: str) -> List[str]:
    """Split a raw query into keyword tokens.

    Tokens are lowercased, stripped of surrounding punctuation and kept only
    when longer than two characters, which drops "in", "at", "is" and similar
    noise. Repeated tokens are kept once, in first-seen order.

    Args:
        query: Raw query text.

    Returns:
        Ordered list of tokens.
    """
    tokens: List[str] = []
    for word in (query or "").split():
        token = normalize_word(word)
        if len(token) > MIN_TOKEN_LENGTH and token not in tokens:
            tokens.append(token)
    return tokens
