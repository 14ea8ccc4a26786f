from __future__ import annotations

import re

_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_MULTISPACE_RE = re.compile(r"\s{2,}")


def normalize_text(text: str) -> str:
    """Lowercase, drop punctuation and collapse runs of whitespace.

    Apostrophes survive so contractions like "don't" stay intact.
    """
    value = _PUNCTUATION_RE.sub("", text.lower())
    return _MULTISPACE_RE.sub(" ", value).strip()


def tokenize(text: str) -> list[str]:
    return [part for part in text.split() if part]
