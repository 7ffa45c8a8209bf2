"""Split a command string into an argument vector.

Whitespace (space, tab) separates tokens. A token that starts with a single
or double quote runs up to the next occurrence of the same quote, which is
stripped; an unterminated quote runs to the end of the string. There are
no escape sequences.
"""

from typing import List

from .context import DEFAULT_MAX_TOKENS

WHITESPACE = " \t"
QUOTES = "'\""


def tokenize(command: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> List[str]:
    """Tokenize ``command``.

    Args:
        command: Raw command string from a node
        max_tokens: Tokens beyond this count are dropped

    Returns:
        Argument vector, empty for blank input

    Examples:
        >>> tokenize('ab "c d" \\'e f\\' g')
        ['ab', 'c d', 'e f', 'g']
    """
    tokens: List[str] = []
    length = len(command)
    pos = 0

    while pos < length and len(tokens) < max_tokens:
        while pos < length and command[pos] in WHITESPACE:
            pos += 1
        if pos >= length:
            break

        quote = command[pos]
        if quote in QUOTES:
            end = command.find(quote, pos + 1)
            if end == -1:
                end = length
            tokens.append(command[pos + 1 : end])
        else:
            end = pos
            while end < length and command[end] not in WHITESPACE:
                end += 1
            tokens.append(command[pos:end])

        # Skip the closing quote or the separator
        pos = end + 1

    return tokens


__all__ = ["tokenize"]
