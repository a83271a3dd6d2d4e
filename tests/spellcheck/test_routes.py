"""
Tests for the Spell Check API
=============================
Exercises the Flask blueprint through the test client.
"""

import pytest
from flask import Flask

from code_spell.routes import register_spell_routes


@pytest.fixture
def client():
    app = Flask(__name__)
    app.config['TESTING'] = True
    register_spell_routes(app)
    return app.test_client()


def use_language(client, language):
    response = client.put('/api/spellcheck/language', json={'language': language})
    assert response.status_code == 200
    return response.get_json()


class TestCheckEndpoint:

    def test_check_flags_misspelling(self, client):
        use_language(client, 'c')
        response = client.post('/api/spellcheck/check', json={'text': 'retrun 0;', 'version': 3})
        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        result = data['result']
        assert result['version'] == 3
        assert result['language'] == 'c'
        assert result['errors'][0]['word'] == 'retrun'
        assert result['errors'][0]['suggestions'][0] == 'return'
        assert 'markers' not in result

    def test_check_with_markers(self, client):
        use_language(client, 'c')
        response = client.post('/api/spellcheck/check', json={'text': 'xy', 'markers': True})
        markers = response.get_json()['result']['markers']
        assert markers[0]['source'] == 'spell-checker'
        assert markers[0]['endColumn'] == 3

    def test_marker_suggestions_keep_casing(self, client):
        use_language(client, 'python')
        response = client.post('/api/spellcheck/check', json={'text': 'x = ture', 'markers': True})
        marker = response.get_json()['result']['markers'][0]
        related = [r['message'] for r in marker['relatedInformation']]
        assert 'Suggestion: True' in related

    def test_empty_body(self, client):
        response = client.post('/api/spellcheck/check')
        assert response.status_code == 200
        assert response.get_json()['result']['errors'] == []

    def test_text_must_be_string(self, client):
        response = client.post('/api/spellcheck/check', json={'text': 42})
        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'VALIDATION_ERROR'

    def test_body_must_be_object(self, client):
        response = client.post('/api/spellcheck/check', json=['retrun'])
        assert response.status_code == 400


class TestLanguageEndpoint:

    def test_switch_language(self, client):
        data = use_language(client, 'java')
        assert data['status']['language'] == 'java'
        status = client.get('/api/spellcheck/status').get_json()['status']
        assert status['language'] == 'java'

    def test_unsupported_language(self, client):
        response = client.put('/api/spellcheck/language', json={'language': 'rust'})
        assert response.status_code == 400
        error = response.get_json()['error']
        assert error['code'] == 'UNSUPPORTED_LANGUAGE'
        assert 'correlation_id' in error

    def test_missing_language(self, client):
        response = client.put('/api/spellcheck/language', json={})
        assert response.status_code == 400

    def test_switch_discards_dictionary(self, client):
        use_language(client, 'c')
        client.post('/api/spellcheck/dictionary', json={'word': 'xy'})
        use_language(client, 'python')
        assert client.get('/api/spellcheck/dictionary').get_json()['words'] == []


class TestDictionaryEndpoints:

    def test_add_and_list(self, client):
        response = client.post('/api/spellcheck/dictionary', json={'word': 'FooBarBaz'})
        assert response.get_json()['added'] is True
        data = client.get('/api/spellcheck/dictionary').get_json()
        assert data['words'] == ['foobarbaz']
        assert data['count'] == 1

    def test_add_twice(self, client):
        client.post('/api/spellcheck/dictionary', json={'word': 'xy'})
        response = client.post('/api/spellcheck/dictionary', json={'word': 'xy'})
        assert response.get_json()['added'] is False

    def test_added_word_not_flagged(self, client):
        client.post('/api/spellcheck/dictionary', json={'word': 'xy'})
        result = client.post('/api/spellcheck/check', json={'text': 'xy'}).get_json()['result']
        assert result['errors'] == []

    def test_remove(self, client):
        client.post('/api/spellcheck/dictionary', json={'word': 'xy'})
        response = client.delete('/api/spellcheck/dictionary/xy')
        assert response.get_json()['removed'] is True
        assert response.get_json()['words'] == []

    def test_clear(self, client):
        client.post('/api/spellcheck/dictionary', json={'word': 'xy'})
        client.post('/api/spellcheck/dictionary', json={'word': 'zw'})
        response = client.delete('/api/spellcheck/dictionary')
        assert response.get_json()['removed'] == 2

    def test_word_is_required(self, client):
        response = client.post('/api/spellcheck/dictionary', json={'word': '  '})
        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'VALIDATION_ERROR'

    def test_ignore(self, client):
        response = client.post('/api/spellcheck/ignore', json={'word': 'xy'})
        assert response.get_json()['words'] == ['xy']
        client.delete('/api/spellcheck/dictionary')
        result = client.post('/api/spellcheck/check', json={'text': 'xy'}).get_json()['result']
        assert result['errors'] == []

    def test_correlation_id_header(self, client):
        response = client.put(
            '/api/spellcheck/language',
            json={'language': 'rust'},
            headers={'X-Correlation-ID': 'abc123'}
        )
        assert response.get_json()['error']['correlation_id'] == 'abc123'


class TestApplication:

    def test_health(self):
        from app import create_app
        app = create_app()
        app.config['TESTING'] = True
        response = app.test_client().get('/api/health')
        assert response.status_code == 200
        assert response.get_json()['success'] is True
