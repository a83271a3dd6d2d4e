"""
Language Profiles for the Code Spell Engine
===========================================
Static per-language vocabulary (keywords, built-ins, common library and
header names), the common-English programming wordlist, and the synthesized
set of common identifier names.

All of it is read-only data loaded once per process and cached.
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

from config_logging import get_logger, UnsupportedLanguageError

logger = get_logger('code_spell')

DATA_DIR = Path(__file__).parent / 'data'

# Category keys shipped in each profile file, in load order
PROFILE_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    'python': ('keywords', 'builtin_functions', 'common_libraries'),
    'java': ('keywords', 'builtin_classes', 'common_methods', 'common_libraries'),
    'c': ('keywords', 'builtin_functions', 'macros_and_constants', 'common_headers'),
}

SUPPORTED_LANGUAGES: Tuple[str, ...] = tuple(PROFILE_CATEGORIES)

EXTENSION_LANGUAGES: Dict[str, str] = {
    'py': 'python',
    'java': 'java',
    'c': 'c',
    'h': 'c',
}

IDENTIFIER_PREFIXES = (
    'get', 'set', 'is', 'has', 'can', 'should', 'will',
    'create', 'update', 'delete', 'find', 'search',
)
IDENTIFIER_SUFFIXES = (
    'name', 'value', 'data', 'info', 'result', 'output',
    'input', 'text', 'number', 'count', 'list', 'array',
)


@dataclass(frozen=True)
class LanguageProfile:
    """
    Immutable vocabulary for one supported language.

    Attributes:
        language: Language identifier ('python', 'java', 'c')
        vocabulary: Every entry of every category, lower-cased, in file order
        keywords: Reserved words only, lower-cased
        categories: Category name -> entries as shipped (original casing)
        display_forms: Lower-cased word -> first shipped casing ("true" -> "True")
    """
    language: str
    vocabulary: Tuple[str, ...]
    keywords: frozenset
    categories: Dict[str, Tuple[str, ...]] = field(default_factory=dict, compare=False)
    vocabulary_set: frozenset = field(default=frozenset(), compare=False, repr=False)
    display_forms: Dict[str, str] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        if not self.vocabulary_set:
            object.__setattr__(self, 'vocabulary_set', frozenset(self.vocabulary))
        if not self.display_forms:
            forms: Dict[str, str] = {}
            for words in self.categories.values():
                for word in words:
                    if word:
                        forms.setdefault(word.lower(), word)
            object.__setattr__(self, 'display_forms', forms)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.vocabulary_set

    def is_keyword(self, word: str) -> bool:
        """True if word is a reserved word of this language."""
        return word.lower() in self.keywords


def _unique_lower(words) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(w.lower() for w in words if w))


def validate_language(language: str) -> str:
    """Return the language identifier or raise UnsupportedLanguageError."""
    if not isinstance(language, str) or language not in PROFILE_CATEGORIES:
        raise UnsupportedLanguageError(language, SUPPORTED_LANGUAGES)
    return language


@lru_cache(maxsize=None)
def get_profile(language: str) -> LanguageProfile:
    """
    Load the vocabulary for a language (cached per process).

    Raises:
        UnsupportedLanguageError: language is not one of SUPPORTED_LANGUAGES
    """
    validate_language(language)

    path = DATA_DIR / f"{language}.json"
    with open(path, 'r', encoding='utf-8') as f:
        raw = json.load(f)

    categories = {
        name: tuple(raw.get(name, []))
        for name in PROFILE_CATEGORIES[language]
    }
    vocabulary = _unique_lower(
        word for name in PROFILE_CATEGORIES[language] for word in categories[name]
    )

    logger.debug(
        "Loaded language profile",
        language=language,
        vocabulary_size=len(vocabulary)
    )

    return LanguageProfile(
        language=language,
        vocabulary=vocabulary,
        keywords=frozenset(_unique_lower(categories['keywords'])),
        categories=categories,
    )


@lru_cache(maxsize=1)
def common_words() -> Tuple[str, ...]:
    """Common English words used in programming, lower-cased, file order."""
    words = []
    with open(DATA_DIR / 'common_words.txt', 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            words.extend(line.split())
    return _unique_lower(words)


@lru_cache(maxsize=1)
def common_identifier_names() -> Tuple[str, ...]:
    """
    Synthesized identifier names: every prefix joined with every
    title-cased suffix (getName, isValue, searchArray, ...).
    """
    return tuple(
        prefix + suffix[0].upper() + suffix[1:]
        for prefix in IDENTIFIER_PREFIXES
        for suffix in IDENTIFIER_SUFFIXES
    )


def detect_language(filename: str) -> str:
    """
    Map a file name to a supported language by its extension.

    Raises:
        UnsupportedLanguageError: no extension, or an unknown one
    """
    extension = filename.rsplit('.', 1)[1].lower() if '.' in filename else ''
    language = EXTENSION_LANGUAGES.get(extension)
    if language is None:
        raise UnsupportedLanguageError(extension or filename, SUPPORTED_LANGUAGES)
    return language
