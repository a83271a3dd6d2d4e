"""
Suggestion Ranker
=================
Ranks dictionary words as replacements for a flagged token.

Every dictionary word within edit distance 3 of the lower-cased token is a
candidate. Candidates are scored

    1 / (distance + 1)
    + 0.5  same length as the token
    + 0.3  same first character
    + 0.2  part of the active language's vocabulary

and the top five by score are returned. Equal scores keep dictionary
insertion order (language vocabulary first, then common words, synthesized
identifiers, user dictionary, ignored words).

Scoring runs on lower-cased words; the returned suggestions use the
dictionary's display casing ("True", "String") when one is given.

Cost is O(D * L^2) per token for a dictionary of D words; callers throttle
how often a full check runs.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from .profiles import LanguageProfile

DEFAULT_MAX_SUGGESTIONS = 5
DEFAULT_MAX_DISTANCE = 3

SAME_LENGTH_BONUS = 0.5
SAME_FIRST_CHAR_BONUS = 0.3
LANGUAGE_VOCABULARY_BONUS = 0.2


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance with unit cost for insertion, deletion and
    substitution.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Two rolling rows of the DP matrix
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current[j] = previous[j - 1]
            else:
                current[j] = min(
                    previous[j - 1] + 1,  # substitution
                    current[j - 1] + 1,   # insertion
                    previous[j] + 1       # deletion
                )
        previous = current
    return previous[-1]


@dataclass(frozen=True)
class ScoredSuggestion:
    """A candidate replacement with its distance and score."""
    word: str
    distance: int
    score: float


class SuggestionRanker:
    """Scores dictionary words against a flagged token."""

    def __init__(
        self,
        profile: LanguageProfile,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        max_distance: int = DEFAULT_MAX_DISTANCE
    ):
        self.profile = profile
        self.max_suggestions = max_suggestions
        self.max_distance = max_distance

    def score(self, word: str, candidate: str, distance: int) -> float:
        score = 1 / (distance + 1)
        if len(candidate) == len(word):
            score += SAME_LENGTH_BONUS
        if candidate[:1] == word[:1]:
            score += SAME_FIRST_CHAR_BONUS
        if candidate in self.profile.vocabulary_set:
            score += LANGUAGE_VOCABULARY_BONUS
        return score

    def rank(self, word: str, dictionary: Iterable[str]) -> List[ScoredSuggestion]:
        """All candidates within max_distance, best first."""
        lower_word = word.lower()
        scored = []
        for candidate in dictionary:
            # Length gap alone already exceeds the threshold
            if abs(len(candidate) - len(lower_word)) > self.max_distance:
                continue
            distance = edit_distance(lower_word, candidate)
            if distance > self.max_distance:
                continue
            scored.append(ScoredSuggestion(
                word=candidate,
                distance=distance,
                score=self.score(lower_word, candidate, distance)
            ))

        # sorted() is stable, so ties keep dictionary order
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def suggest(
        self,
        word: str,
        dictionary: Iterable[str],
        display: Optional[Mapping[str, str]] = None
    ) -> List[str]:
        """
        Top replacement words for a flagged token.

        Args:
            word: The flagged token
            dictionary: Lower-cased candidate words, in tie-break order
            display: Lower-cased word -> casing to return (e.g. a
                     DictionarySnapshot.display); missing words are
                     returned as they appear in dictionary
        """
        display = display or {}
        return [
            display.get(s.word, s.word)
            for s in self.rank(word, dictionary)[:self.max_suggestions]
        ]
