"""Split command lines into words."""

from .config import TOKEN_SEPARATORS


def trim(line: str) -> str:
    """Return ``line`` without leading or trailing whitespace."""
    return line.strip()


def tokenize(line: str, separators: str = TOKEN_SEPARATORS) -> list[str]:
    """Split ``line`` on any character in ``separators``.

    Runs of separators collapse, so no empty words are produced. An empty
    or separator-only line yields an empty list. The input is not modified.

        >>> tokenize("ls  -l   /tmp")
        ['ls', '-l', '/tmp']
    """
    words: list[str] = []
    current: list[str] = []
    for char in line:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words
