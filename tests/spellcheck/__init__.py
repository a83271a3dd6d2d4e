"""
Spell Check Tests Package
=========================
Test suite for the code spell engine.

Run all tests: python3 -m pytest tests/spellcheck/ -v
Run specific: python3 -m pytest tests/spellcheck/test_session.py -v
"""
