"""
Tokenizer for turboshell command lines.

Words are separated by runs of whitespace. There is no quoting, escaping,
globbing or variable substitution: every non-whitespace run is a word,
taken literally.
"""

import re
from typing import Iterator, List

_WORD = re.compile(r'\S+')


def iter_words(line: str) -> Iterator[str]:
    """
    Lazily yield the whitespace-delimited words of a line.

    Examples:
        >>> list(iter_words('  ls   -l /tmp '))
        ['ls', '-l', '/tmp']
    """
    for match in _WORD.finditer(line):
        yield match.group(0)


def split_line(line: str) -> List[str]:
    """
    Split a raw input line into a command.

    Args:
        line: Input line, with or without its terminator

    Returns:
        Ordered list of words; empty for an empty or all-whitespace line

    Examples:
        >>> split_line('cd /tmp')
        ['cd', '/tmp']
        >>> split_line('   \\t ')
        []
    """
    return list(iter_words(line))
