"""Filename wildcard expansion.

Words containing ``*``, ``?``, ``[`` or ``~`` are matched against the
filesystem, tilde first. A pattern that matches nothing is kept as typed.

Matches are joined with spaces and split again, so a filename that itself
contains whitespace comes back as several words. This is a known limitation.
"""

import glob
import logging
import os
from collections.abc import Sequence

from .tokenizer import tokenize

logger = logging.getLogger(__name__)

WILDCARD_CHARS = frozenset("*?[~")


def has_wildcards(word: str) -> bool:
    """Return True if ``word`` contains any wildcard character."""
    return any(char in WILDCARD_CHARS for char in word)


def expand_word(pattern: str) -> list[str]:
    """Expand one pattern to its sorted matches, or ``[pattern]`` if none."""
    matches = sorted(glob.glob(os.path.expanduser(pattern)))
    if not matches:
        return [pattern]
    return matches


def expand(tokens: Sequence[str]) -> list[str] | None:
    """Expand wildcards across a token sequence.

    Returns:
        A new token list with every pattern replaced by its matches, in the
        original word order; or None if no token contains a wildcard, in
        which case the caller keeps its tokens.
    """
    if not any(has_wildcards(token) for token in tokens):
        return None

    words: list[str] = []
    for token in tokens:
        if has_wildcards(token):
            words.extend(expand_word(token))
        else:
            words.append(token)

    expanded = tokenize(" ".join(words))
    logger.debug("Expanded %r -> %r", list(tokens), expanded)
    return expanded
