"""Shared fixtures for the spell check tests."""

import pytest

from code_spell import config as spell_config
from code_spell.session import SpellCheckSession


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from default settings."""
    spell_config.reset_config()
    yield spell_config.get_config()
    spell_config.reset_config()


@pytest.fixture
def c_session() -> SpellCheckSession:
    return SpellCheckSession('c')


@pytest.fixture
def python_session() -> SpellCheckSession:
    return SpellCheckSession('python')


@pytest.fixture
def java_session() -> SpellCheckSession:
    return SpellCheckSession('java')
