"""
Lexical Scanner
===============
Extracts candidate words from source lines.

String literal content and trailing single-line comments are removed before
words are matched. Stripping is line-local and textual: multi-line strings
and block comments are not recognized, and escaped quotes are not handled.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

# Quoted string literals on a single line (no escape handling)
DOUBLE_QUOTED = re.compile(r'"[^"]*"')
SINGLE_QUOTED = re.compile(r"'[^']*'")

# Single-line comment openers, up to end of line
SLASH_COMMENT = re.compile(r'//.*$')
HASH_COMMENT = re.compile(r'#.*$')

# Candidate words: ASCII letters only, at least two of them
WORD_PATTERN = re.compile(r'[a-zA-Z]{2,}')


@dataclass(frozen=True)
class Token:
    """A candidate word and its 0-based starting column on its line."""
    word: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.word)


def _blank_literal(match) -> str:
    literal = match.group(0)
    # Keep the quotes and the width so later columns don't shift
    return literal[0] + ' ' * (len(literal) - 2) + literal[-1]


def strip_line(line: str) -> str:
    """
    Remove string literal content and trailing comments from a line.

    The result has the same length as the input up to the comment opener,
    so token offsets can be reported against the original line.
    """
    clean = DOUBLE_QUOTED.sub(_blank_literal, line)
    clean = SINGLE_QUOTED.sub(_blank_literal, clean)
    clean = SLASH_COMMENT.sub('', clean)
    clean = HASH_COMMENT.sub('', clean)
    return clean


def scan_line(line: str) -> List[Token]:
    """Return the candidate tokens of one line, in order."""
    return [
        Token(match.group(0), match.start())
        for match in WORD_PATTERN.finditer(strip_line(line))
    ]


def scan_text(text: str) -> Iterator[Tuple[int, List[Token]]]:
    """Yield (1-based line number, tokens) for every line of text."""
    if not text:
        return
    for line_index, line in enumerate(text.split('\n')):
        # Editors on Windows hand us CRLF text
        yield line_index + 1, scan_line(line.rstrip('\r'))
