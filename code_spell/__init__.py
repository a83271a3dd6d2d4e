"""
Code Spell Engine
=================
Code-aware spell checking for an in-browser multi-language editor.

Features:
- Line scanner that skips string literal content and trailing comments
- Identifier-aware classification (camelCase, snake_case, CONSTANTS, Types)
- Per-language vocabulary for Python, Java and C
- Ranked suggestions by edit distance
- Per-session user dictionary and ignore list

Usage:
    from code_spell import SpellCheckSession
    session = SpellCheckSession('c')
    for error in session.check_spelling('retrun 5;'):
        print(error.line, error.column, error.word, error.suggestions)
"""

__version__ = "1.0.0"

from .models import SpellError, CheckResult
from .profiles import (
    LanguageProfile,
    SUPPORTED_LANGUAGES,
    get_profile,
    detect_language,
)
from .scanner import Token, scan_line, scan_text
from .classifier import TokenClassifier, Classification
from .dictionary import DictionaryStore, DictionarySnapshot
from .ranker import SuggestionRanker, edit_distance
from .session import SpellCheckSession, SessionManager

__all__ = [
    'SpellError',
    'CheckResult',
    'LanguageProfile',
    'SUPPORTED_LANGUAGES',
    'get_profile',
    'detect_language',
    'Token',
    'scan_line',
    'scan_text',
    'TokenClassifier',
    'Classification',
    'DictionaryStore',
    'DictionarySnapshot',
    'SuggestionRanker',
    'edit_distance',
    'SpellCheckSession',
    'SessionManager',
]
