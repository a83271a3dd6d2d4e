"""
Dictionary Store
================
Union of every word source currently considered correctly spelled:
language vocabulary, common words, synthesized identifier names, the user
dictionary and the ignore set.

Words are normalized to lower case for lookup. The shipped casing of
vocabulary and synthesized names ("True", "ArrayList", "getName") is kept
alongside so suggestions can be inserted into code as-is. Each mutation
rebuilds the union and publishes it as a new immutable snapshot under a
single-writer lock, so a reader holding a snapshot never observes a
half-applied mutation.
"""

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from config_logging import get_logger, ValidationError
from .profiles import LanguageProfile, common_words, common_identifier_names

logger = get_logger('code_spell')


@dataclass(frozen=True)
class DictionarySnapshot:
    """
    Immutable view of the store at one point in time.

    Attributes:
        words: All valid words, insertion order (profile, common,
               synthesized, user, ignored), duplicates removed
        lookup: Same words as a frozenset for membership tests
        version: Incremented on every published mutation
        display: Lower-cased word -> casing to show in suggestions, for
                 words whose shipped casing differs
    """
    words: Tuple[str, ...]
    lookup: frozenset
    version: int
    display: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def display_form(self, word: str) -> str:
        """Casing of a dictionary word as it should be inserted into code."""
        return self.display.get(word, word)


def normalize_word(word: str) -> str:
    """Lower-case and trim a word supplied by the user."""
    if not isinstance(word, str) or not word.strip():
        raise ValidationError("Word must be a non-empty string", field='word')
    return word.strip().lower()


class DictionaryStore:
    """Mutable user dictionary and ignore set over a static base vocabulary."""

    def __init__(self, profile: LanguageProfile):
        self.profile = profile
        # Static part, computed once per store
        self._base: Tuple[str, ...] = tuple(dict.fromkeys(
            profile.vocabulary
            + common_words()
            + tuple(w.lower() for w in common_identifier_names())
        ))
        # First-seen casing wins, so the language profile beats synthesized names
        display: Dict[str, str] = {}
        for normalized, shown in profile.display_forms.items():
            display.setdefault(normalized, shown)
        for name in common_identifier_names():
            display.setdefault(name.lower(), name)
        self._display = MappingProxyType(
            {normalized: shown for normalized, shown in display.items() if normalized != shown}
        )
        # dicts used as insertion-ordered sets
        self._user: Dict[str, None] = {}
        self._ignored: Dict[str, None] = {}
        self._lock = threading.Lock()
        self._snapshot = self._build(version=0)

    def _build(self, version: int) -> DictionarySnapshot:
        words = tuple(dict.fromkeys(self._base + tuple(self._user) + tuple(self._ignored)))
        return DictionarySnapshot(
            words=words,
            lookup=frozenset(words),
            version=version,
            display=self._display,
        )

    def _publish(self):
        # Caller holds self._lock
        self._snapshot = self._build(self._snapshot.version + 1)

    def snapshot(self) -> DictionarySnapshot:
        """Current published snapshot (safe to hold across a whole check)."""
        return self._snapshot

    def contains(self, word: str) -> bool:
        """Case-insensitive membership in the current union."""
        return word.lower() in self._snapshot.lookup

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._snapshot)

    @property
    def version(self) -> int:
        return self._snapshot.version

    def add(self, word: str) -> bool:
        """
        Add a word to the user dictionary.

        Returns True if the word was new; adding an existing word is a no-op.
        """
        normalized = normalize_word(word)
        with self._lock:
            if normalized in self._user:
                return False
            self._user[normalized] = None
            self._publish()
        logger.info("Word added to user dictionary", word=normalized,
                    language=self.profile.language)
        return True

    def remove(self, word: str) -> bool:
        """Remove a word from the user dictionary. Absent words are a no-op."""
        normalized = normalize_word(word)
        with self._lock:
            if normalized not in self._user:
                return False
            del self._user[normalized]
            self._publish()
        logger.info("Word removed from user dictionary", word=normalized,
                    language=self.profile.language)
        return True

    def ignore(self, word: str) -> bool:
        """Accept a word for the rest of the session. Idempotent."""
        normalized = normalize_word(word)
        with self._lock:
            if normalized in self._ignored:
                return False
            self._ignored[normalized] = None
            self._publish()
        logger.info("Word ignored", word=normalized, language=self.profile.language)
        return True

    def clear_user_dictionary(self) -> int:
        """
        Remove every user dictionary word; the ignore set is kept.

        Returns the number of words removed.
        """
        with self._lock:
            removed = len(self._user)
            if not removed:
                return 0
            self._user.clear()
            self._publish()
        logger.info("User dictionary cleared", removed=removed,
                    language=self.profile.language)
        return removed

    def user_words(self) -> List[str]:
        """User dictionary words in the order they were added."""
        with self._lock:
            return list(self._user)

    def ignored_words(self) -> List[str]:
        """Ignored words in the order they were ignored."""
        with self._lock:
            return list(self._ignored)
