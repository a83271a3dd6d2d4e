"""
Code Spell Flask Routes
=======================
API endpoints the editor calls to check text and manage the user
dictionary and ignore list of the active session.
"""

import time
from functools import wraps
from flask import Blueprint, current_app, g, jsonify, request

from config_logging import (
    get_logger, StructuredLogger, CodeSpellError, ValidationError
)
from .session import SessionManager

logger = get_logger('code_spell')

spell_blueprint = Blueprint('code_spell', __name__)

EXTENSION_KEY = 'code_spell'


def get_session_manager() -> SessionManager:
    """SessionManager of the current app, created on first use."""
    manager = current_app.extensions.get(EXTENSION_KEY)
    if manager is None:
        manager = SessionManager()
        current_app.extensions[EXTENSION_KEY] = manager
    return manager


def _error_response(code: str, message: str, status: int, details=None):
    body = {
        'success': False,
        'error': {
            'code': code,
            'message': message,
            'correlation_id': getattr(g, 'correlation_id', 'unknown')
        }
    }
    if details:
        body['error']['details'] = details
    return jsonify(body), status


# =============================================================================
# STANDARDIZED ERROR HANDLING DECORATOR
# =============================================================================

def handle_spell_errors(f):
    """
    Decorator for standardized API error handling in spell check routes.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        start_time = time.time()
        try:
            result = f(*args, **kwargs)

            elapsed = time.time() - start_time
            if elapsed > 1.0:
                logger.warning(f"Slow spell check API call: {f.__name__} took {elapsed:.1f}s")

            return result

        except CodeSpellError as e:
            logger.warning(f"{e.code} in {f.__name__}: {e.message}")
            return _error_response(e.code, e.message, e.status_code, e.details)
        except Exception as e:
            logger.exception(f"Unexpected error in {f.__name__}: {e}")
            return _error_response('INTERNAL_ERROR', 'An unexpected error occurred', 500)

    return decorated


@spell_blueprint.before_request
def assign_correlation_id():
    g.correlation_id = request.headers.get('X-Correlation-ID') or StructuredLogger.new_correlation_id()
    StructuredLogger.set_correlation_id(g.correlation_id)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _required_word(data: dict) -> str:
    word = data.get('word')
    if not isinstance(word, str) or not word.strip():
        raise ValidationError("A non-empty 'word' is required", field='word')
    return word


# =============================================================================
# SESSION
# =============================================================================

@spell_blueprint.route('/status', methods=['GET'])
@handle_spell_errors
def get_status():
    """
    Status of the active session.

    Returns:
        { success: true, status: { language, enabled, dictionary_size, ... } }
    """
    return jsonify({
        'success': True,
        'status': get_session_manager().session.get_status()
    })


@spell_blueprint.route('/language', methods=['PUT'])
@handle_spell_errors
def set_language():
    """
    Switch the active language. A new language starts a fresh session.

    Request body:
        { language: 'python' | 'java' | 'c' }
    """
    data = _json_body()
    language = data.get('language')
    if not language:
        raise ValidationError("'language' is required", field='language')

    session = get_session_manager().activate(language)
    return jsonify({
        'success': True,
        'status': session.get_status()
    })


@spell_blueprint.route('/check', methods=['POST'])
@handle_spell_errors
def check_text():
    """
    Check source text with the active session.

    Request body:
        { text: str, version?: any, markers?: bool }

    Returns:
        {
            success: true,
            result: {
                errors: [ { word, line, column, end_column, suggestions } ],
                error_count, language, version, dictionary_version,
                processing_time_ms, markers?
            }
        }
    """
    data = _json_body()
    text = data.get('text', '')
    if not isinstance(text, str):
        raise ValidationError("'text' must be a string", field='text')

    session = get_session_manager().session
    result = session.check(text, version=data.get('version'))

    return jsonify({
        'success': True,
        'result': result.to_dict(include_markers=bool(data.get('markers')))
    })


# =============================================================================
# USER DICTIONARY / IGNORE LIST
# =============================================================================

@spell_blueprint.route('/dictionary', methods=['GET'])
@handle_spell_errors
def get_dictionary():
    """User dictionary of the active session, in the order words were added."""
    words = get_session_manager().session.get_user_dictionary()
    return jsonify({
        'success': True,
        'words': words,
        'count': len(words)
    })


@spell_blueprint.route('/dictionary', methods=['POST'])
@handle_spell_errors
def add_word():
    """
    Add a word to the user dictionary.

    Request body:
        { word: str }
    """
    word = _required_word(_json_body())
    session = get_session_manager().session
    added = session.add_to_dictionary(word)
    return jsonify({
        'success': True,
        'added': added,
        'words': session.get_user_dictionary()
    })


@spell_blueprint.route('/dictionary/<word>', methods=['DELETE'])
@handle_spell_errors
def remove_word(word: str):
    """Remove one word from the user dictionary."""
    session = get_session_manager().session
    removed = session.remove_from_dictionary(word)
    return jsonify({
        'success': True,
        'removed': removed,
        'words': session.get_user_dictionary()
    })


@spell_blueprint.route('/dictionary', methods=['DELETE'])
@handle_spell_errors
def clear_dictionary():
    """Clear the user dictionary (ignored words are kept)."""
    removed = get_session_manager().session.clear_user_dictionary()
    return jsonify({
        'success': True,
        'removed': removed,
        'words': []
    })


@spell_blueprint.route('/ignore', methods=['POST'])
@handle_spell_errors
def ignore_word():
    """
    Ignore a word for the rest of the session.

    Request body:
        { word: str }
    """
    word = _required_word(_json_body())
    session = get_session_manager().session
    ignored = session.ignore_word(word)
    return jsonify({
        'success': True,
        'ignored': ignored,
        'words': session.get_ignored_words()
    })


def register_spell_routes(app, url_prefix: str = '/api/spellcheck'):
    """Register the spell check blueprint with a Flask app."""
    app.register_blueprint(spell_blueprint, url_prefix=url_prefix)
    app.extensions.setdefault(EXTENSION_KEY, SessionManager())
    logger.info("Spell check routes registered", url_prefix=url_prefix)
