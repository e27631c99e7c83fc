"""Word tokenizer shared by keyword ranking and the match engine."""

import re
from collections.abc import Iterator

# Common English / job-posting filler excluded from keyword analysis
STOPWORDS: frozenset[str] = frozenset({
    "the", "and", "a", "an", "of", "to", "in", "on", "for", "with",
    "at", "by", "from", "is", "are", "was", "were", "be", "this", "that",
    "as", "it", "or", "you", "your", "we", "our", "they", "their", "i",
    "have", "has", "will", "can", "should", "include", "including",
    "job", "role", "position", "responsibilities", "requirements", "skills",
})

# Anything outside [a-z0-9+] separates tokens; "+" is kept so "c++" survives
_TOKEN_RE = re.compile(r"[a-z0-9+]+")


def iter_tokens(text: str) -> Iterator[str]:
    """Yield lowercase word tokens from text, skipping stop words and 1-char tokens."""
    for match in _TOKEN_RE.finditer(text.lower()):
        token = match.group()
        if len(token) > 1 and token not in STOPWORDS:
            yield token


def tokenize(text: str) -> list[str]:
    return list(iter_tokens(text))
