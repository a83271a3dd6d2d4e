"""
Spell-Check Session
===================
Per-language facade over the scanner, classifier, ranker and dictionary
store. The session is the only stateful object: it owns the user dictionary
and the ignore set, and every check sees their state as of the moment the
check started.

Switching language means building a new session; nothing carries over.
"""

import threading
import time
from typing import Any, Dict, List, Optional

from config_logging import get_logger, handle_errors
from . import config as spell_config
from .classifier import TokenClassifier
from .dictionary import DictionaryStore
from .models import CheckResult, SpellError
from .profiles import get_profile, validate_language
from .ranker import SuggestionRanker
from .scanner import scan_text

logger = get_logger('code_spell')


class SpellCheckSession:
    """
    Spell checker state for one active language.

    Args:
        language: One of SUPPORTED_LANGUAGES
        settings: SpellingConfig to use (defaults to the global config)

    Raises:
        UnsupportedLanguageError: language is not supported
    """

    def __init__(self, language: str, settings: Optional[spell_config.SpellingConfig] = None):
        self.language = validate_language(language)
        self.settings = settings or spell_config.get_config().spelling
        self.enabled = self.settings.enabled

        self.profile = get_profile(language)
        self.store = DictionaryStore(self.profile)
        self.classifier = TokenClassifier(
            self.profile,
            min_identifier_length=self.settings.min_identifier_length,
            max_identifier_length=self.settings.max_identifier_length,
        )
        self.ranker = SuggestionRanker(
            self.profile,
            max_suggestions=self.settings.max_suggestions,
            max_distance=self.settings.max_edit_distance,
        )

    def check_spelling(self, text: str) -> List[SpellError]:
        """
        Flag likely misspellings in source text.

        Errors are ordered by line, then by position within the line.
        Empty or non-string input gives an empty list.
        """
        if not self.enabled or not text or not isinstance(text, str):
            return []

        snapshot = self.store.snapshot()
        errors = []

        for line_number, tokens in scan_text(text):
            for token in tokens:
                if self.classifier.is_valid(token.word, snapshot):
                    continue
                errors.append(SpellError(
                    word=token.word,
                    line=line_number,
                    column=token.start + 1,
                    end_column=token.start + 1 + len(token.word),
                    suggestions=tuple(self.ranker.suggest(
                        token.word, snapshot.words, snapshot.display
                    )),
                    start_index=token.start,
                    end_index=token.end,
                ))

        return errors

    @handle_errors()
    def check(self, text: str, version: Any = None) -> CheckResult:
        """
        Run check_spelling and wrap the errors with timing and the caller's
        correlation token, so a caller can drop results for stale text.
        """
        start_time = time.time()
        dictionary_version = self.store.version
        errors = self.check_spelling(text)
        result = CheckResult(
            errors=errors,
            language=self.language,
            version=version,
            dictionary_version=dictionary_version,
            processing_time_ms=(time.time() - start_time) * 1000,
        )
        logger.debug(
            "Spell check completed",
            language=self.language,
            error_count=result.error_count,
            duration_ms=round(result.processing_time_ms, 2)
        )
        return result

    def add_to_dictionary(self, word: str) -> bool:
        return self.store.add(word)

    def remove_from_dictionary(self, word: str) -> bool:
        return self.store.remove(word)

    def ignore_word(self, word: str) -> bool:
        return self.store.ignore(word)

    def get_user_dictionary(self) -> List[str]:
        return self.store.user_words()

    def get_ignored_words(self) -> List[str]:
        return self.store.ignored_words()

    def clear_user_dictionary(self) -> int:
        return self.store.clear_user_dictionary()

    def is_valid_word(self, word: str) -> bool:
        """Classify a single word against the current dictionary."""
        return self.classifier.is_valid(word, self.store.snapshot())

    def suggest(self, word: str) -> List[str]:
        """Suggestions for a single word, whether or not it would be flagged."""
        snapshot = self.store.snapshot()
        return self.ranker.suggest(word, snapshot.words, snapshot.display)

    def get_status(self) -> Dict[str, Any]:
        """Summary of the session for the settings panel."""
        return {
            'language': self.language,
            'enabled': self.enabled,
            'dictionary_size': len(self.store),
            'dictionary_version': self.store.version,
            'user_dictionary': self.get_user_dictionary(),
            'ignored_words': self.get_ignored_words(),
        }


class SessionManager:
    """Holds the session for the currently active language."""

    def __init__(self, default_language: Optional[str] = None):
        self._lock = threading.Lock()
        self._session: Optional[SpellCheckSession] = None
        self.default_language = validate_language(
            default_language or spell_config.get_config().spelling.default_language
        )

    @property
    def session(self) -> SpellCheckSession:
        """Active session, created for the default language on first use."""
        with self._lock:
            if self._session is None:
                self._session = SpellCheckSession(self.default_language)
            return self._session

    def activate(self, language: str) -> SpellCheckSession:
        """
        Make language the active one.

        A different language gets a fresh session; the previous user
        dictionary and ignore set are discarded.
        """
        validate_language(language)
        with self._lock:
            if self._session is not None and self._session.language == language:
                return self._session
            previous = self._session
            session = SpellCheckSession(language)
            self._session = session

        if previous is not None:
            logger.info(
                "Spell check language switched",
                previous=previous.language,
                language=language,
                discarded_words=len(previous.get_user_dictionary())
            )
        return session

    def reset(self):
        with self._lock:
            self._session = None
