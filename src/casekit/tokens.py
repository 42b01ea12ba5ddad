from __future__ import annotations

import re

from .errors import InvalidInputType

# Anything that is not an ASCII letter or digit separates words: the explicit
# delimiters (whitespace, "-", "_", ".") as well as punctuation noise.
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_SPLIT_CAMEL = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_ident(segment: str) -> list[str]:
    """Split a delimiter-free run on camel boundaries, keeping uppercase runs whole."""
    return _SPLIT_CAMEL.sub(" ", segment).split()


def tokenize(text: str) -> list[str]:
    """
    Break ``text`` into word tokens in left-to-right order.

    Tokens keep the case they had in the input; callers decide casing when
    rendering. Empty, whitespace-only and all-punctuation strings yield ``[]``.
    """
    if not isinstance(text, str):
        raise InvalidInputType(text)
    text = text.strip()
    if not text:
        return []
    toks: list[str] = []
    for seg in _SEPARATORS.split(text):
        if not seg:
            continue
        toks.extend(split_ident(seg))
    return [t for t in toks if t]


__all__ = ["split_ident", "tokenize"]
