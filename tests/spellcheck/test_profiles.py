"""
Tests for Language Profiles
===========================
"""

import pytest

from config_logging import UnsupportedLanguageError
from code_spell.profiles import (
    SUPPORTED_LANGUAGES,
    common_identifier_names,
    common_words,
    detect_language,
    get_profile,
)


class TestGetProfile:

    @pytest.mark.parametrize('language', SUPPORTED_LANGUAGES)
    def test_loads_every_supported_language(self, language):
        profile = get_profile(language)
        assert profile.language == language
        assert profile.vocabulary
        assert 'return' in profile.keywords

    def test_profile_is_cached(self):
        assert get_profile('java') is get_profile('java')

    def test_vocabulary_is_lowercase(self):
        profile = get_profile('java')
        assert 'arraylist' in profile.vocabulary
        assert 'ArrayList' in profile.categories['builtin_classes']
        assert 'ArrayList' in profile

    def test_display_forms_keep_shipped_casing(self):
        assert get_profile('python').display_forms['true'] == 'True'
        assert get_profile('java').display_forms['arraylist'] == 'ArrayList'
        assert get_profile('c').display_forms['printf'] == 'printf'

    def test_categories(self):
        assert set(get_profile('c').categories) == {
            'keywords', 'builtin_functions', 'macros_and_constants', 'common_headers'
        }

    def test_is_keyword(self):
        profile = get_profile('python')
        assert profile.is_keyword('lambda')
        assert profile.is_keyword('None')
        assert not profile.is_keyword('print')

    @pytest.mark.parametrize('language', ['rust', 'Python', '', None, 'javascript'])
    def test_unsupported_language(self, language):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_profile(language)
        assert exc_info.value.status_code == 400
        assert exc_info.value.code == 'UNSUPPORTED_LANGUAGE'


class TestWordSources:

    def test_common_words(self):
        words = common_words()
        assert 'database' in words
        assert len(words) == len(set(words))

    def test_common_identifier_names(self):
        names = common_identifier_names()
        assert len(names) == 144
        assert names[0] == 'getName'
        assert 'isValue' in names
        assert names[-1] == 'searchArray'


class TestDetectLanguage:

    @pytest.mark.parametrize('filename, language', [
        ('main.py', 'python'),
        ('Main.java', 'java'),
        ('hello.c', 'c'),
        ('stdio.h', 'c'),
        ('SCRIPT.PY', 'python'),
    ])
    def test_known_extensions(self, filename, language):
        assert detect_language(filename) == language

    @pytest.mark.parametrize('filename', ['main.rs', 'Makefile', 'notes.txt'])
    def test_unknown_extensions(self, filename):
        with pytest.raises(UnsupportedLanguageError):
            detect_language(filename)
