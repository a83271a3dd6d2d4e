"""
Token Classifier
================
Decides whether a scanned token is acceptable as written or should be
flagged as a likely misspelling.

Rules are tried in order and the first one that accepts wins:

1. dictionary    - case-insensitive member of the dictionary store
2. numeric       - integer or decimal-fraction literal
3. identifier    - lower camelCase / snake_case of length 3..20
4. constant      - ALL_CAPS with digits and underscores
5. type_name     - PascalCase

Identifier-shaped tokens of length 1-2 or above 20 are not accepted by
rule 3; very short or very long identifier-looking words are more often
typos than real names.

An all-lower-case token that is a keyword of the active language with two
neighbouring letters swapped ("retrun", "whiel") is also left to fall
through rule 3.
This transposed-keyword check is an addition of this engine; earlier
versions accepted such tokens as identifiers.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .dictionary import DictionarySnapshot
from .profiles import LanguageProfile

INTEGER_PATTERN = re.compile(r'^\d+$')
DECIMAL_PATTERN = re.compile(r'^\d*\.\d+$')
CAMEL_CASE_PATTERN = re.compile(r'^[a-z][a-zA-Z0-9]*$')
SNAKE_CASE_PATTERN = re.compile(r'^[a-z][a-z0-9_]*$')
CONSTANT_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')
PASCAL_CASE_PATTERN = re.compile(r'^[A-Z][a-zA-Z0-9]*$')

DEFAULT_MIN_IDENTIFIER_LENGTH = 3
DEFAULT_MAX_IDENTIFIER_LENGTH = 20


@dataclass(frozen=True)
class Classification:
    """Outcome for one token: accepted or not, and which rule decided."""
    word: str
    accepted: bool
    rule: Optional[str] = None  # None when flagged


def is_adjacent_transposition(word: str, target: str) -> bool:
    """True if word equals target with exactly one pair of neighbours swapped."""
    if len(word) != len(target) or word == target:
        return False
    diffs = [i for i, (a, b) in enumerate(zip(word, target)) if a != b]
    return (
        len(diffs) == 2
        and diffs[1] == diffs[0] + 1
        and word[diffs[0]] == target[diffs[1]]
        and word[diffs[1]] == target[diffs[0]]
    )


class TokenClassifier:
    """Applies the acceptance rules for one language profile."""

    def __init__(
        self,
        profile: LanguageProfile,
        min_identifier_length: int = DEFAULT_MIN_IDENTIFIER_LENGTH,
        max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
    ):
        self.profile = profile
        self.min_identifier_length = min_identifier_length
        self.max_identifier_length = max_identifier_length

    def classify(self, word: str, store: DictionarySnapshot) -> Classification:
        if word.lower() in store:
            return Classification(word, True, 'dictionary')

        if INTEGER_PATTERN.match(word) or DECIMAL_PATTERN.match(word):
            return Classification(word, True, 'numeric')

        if self._is_identifier(word):
            return Classification(word, True, 'identifier')

        if CONSTANT_PATTERN.match(word):
            return Classification(word, True, 'constant')

        if PASCAL_CASE_PATTERN.match(word):
            return Classification(word, True, 'type_name')

        return Classification(word, False)

    def is_valid(self, word: str, store: DictionarySnapshot) -> bool:
        return self.classify(word, store).accepted

    def _is_identifier(self, word: str) -> bool:
        if not (CAMEL_CASE_PATTERN.match(word) or SNAKE_CASE_PATTERN.match(word)):
            return False
        if not self.min_identifier_length <= len(word) <= self.max_identifier_length:
            return False
        return not self.is_mistyped_keyword(word)

    def is_mistyped_keyword(self, word: str) -> bool:
        """True if word is a keyword of this language with two letters swapped."""
        if not word.islower():
            return False
        return any(is_adjacent_transposition(word, keyword) for keyword in self.profile.keywords)
