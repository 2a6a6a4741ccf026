#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the web interface and JSON API, using Flask's test client.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(__file__))

import pytest

import cipher_api
from cipher_api import app, get_port, get_host
from segment_cipher import CHARS, cipher_text


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


# ── HTML form ─────────────────────────────────────────────────────────────────

def test_form_get_renders_empty_form(client):
    response = client.get('/')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert '<form method="POST"' in html
    assert 'name="cipher"' in html
    assert 'name="decipher"' in html
    assert 'id="output"' not in html


def test_form_post_cipher(client):
    response = client.post('/', data={'input': 'Hello', 'cipher': 'Cipher'})
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert '<div class="output" id="output">lfQQD</div>' in html
    assert '>Hello</textarea>' in html


def test_form_post_decipher(client):
    response = client.post('/', data={'input': 'lfQQD', 'decipher': 'Decipher'})
    assert response.status_code == 200
    assert '<div class="output" id="output">Hello</div>' in response.get_data(as_text=True)


def test_form_post_without_button_gives_empty_output(client):
    response = client.post('/', data={'input': 'Hello'})
    assert response.status_code == 200
    assert '<div class="output" id="output"></div>' in response.get_data(as_text=True)


def test_form_output_is_escaped(client):
    response = client.post('/', data={'input': '<b>&', 'cipher': 'Cipher'})
    html = response.get_data(as_text=True)
    assert '<b>' not in html
    assert '&lt;' in html


# ── JSON API ──────────────────────────────────────────────────────────────────

def test_api_cipher(client):
    response = client.post('/api/cipher', json={'text': 'Hello World'})
    assert response.status_code == 200
    data = response.get_json()
    assert data == {
        'input': 'Hello World',
        'output': 'lfQQD #D9QG',
        'direction': 'encode',
        'segments': 2,
    }


def test_api_decipher(client):
    response = client.post('/api/decipher', json={'text': 'lfQQD #D9QG'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['output'] == 'Hello World'
    assert data['direction'] == 'decode'


def test_api_round_trip(client):
    text = "Hello, World! 123 #tag ok"
    encoded = client.post('/api/cipher', json={'text': text}).get_json()['output']
    assert encoded == cipher_text(text)
    decoded = client.post('/api/decipher', json={'text': encoded}).get_json()['output']
    assert decoded == text


def test_api_empty_text_is_valid(client):
    response = client.post('/api/cipher', json={'text': ''})
    assert response.status_code == 200
    assert response.get_json()['output'] == ''
    assert response.get_json()['segments'] == 0


@pytest.mark.parametrize('endpoint', ['/api/cipher', '/api/decipher'])
def test_api_validation(client, endpoint):
    response = client.post(endpoint, data='not json', content_type='text/plain')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'No JSON data provided'

    response = client.post(endpoint, json={'other': 'x'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'No text provided'

    response = client.post(endpoint, json={'text': 42})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'text must be a string'

    response = client.post(endpoint, json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'No text provided'

    for body in (['text'], 'some text', 42):
        response = client.post(endpoint, json=body)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'JSON body must be an object'


def test_api_mappings_for_segment(client):
    response = client.post('/api/mappings', json={'segment': 0})
    assert response.status_code == 200
    data = response.get_json()
    assert data['shift'] == 1
    assert data['direction'] == 'encode'
    assert data['mapping']['y'] == 'F'
    assert len(data['mapping']) == len(CHARS)

    data = client.post('/api/mappings', json={'segment': 2, 'decipher': True}).get_json()
    assert data['shift'] == -3
    assert data['mapping']['0'] == '^'


def test_api_mappings_for_text(client):
    response = client.post('/api/mappings', json={'text': 'Hello World'})
    assert response.status_code == 200
    segments = response.get_json()['segments']
    assert [s['text'] for s in segments] == ['Hello Worl', 'd']
    assert [s['shift'] for s in segments] == [1, 2]


def test_api_mappings_validation(client):
    assert client.post('/api/mappings', json={'decipher': True}).status_code == 400
    assert client.post('/api/mappings', json={'segment': 'abc'}).status_code == 400
    assert client.post('/api/mappings', json={'segment': -1}).status_code == 400
    assert client.post('/api/mappings', json={'segment': True}).status_code == 400
    assert client.post('/api/mappings', json={'text': ['a']}).status_code == 400
    assert client.post('/api/mappings', json={'segment': 0, 'decipher': 'yes'}).status_code == 400

    for segment in (2.7, '2', None, [1]):
        response = client.post('/api/mappings', json={'segment': segment})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'segment must be an integer'

    for body in (['segment'], 'some text'):
        response = client.post('/api/mappings', json=body)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'JSON body must be an object'

    response = client.post('/api/mappings', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Either segment or text must be provided'


def test_api_info_and_health(client):
    data = client.get('/api').get_json()
    assert data['status'] == 'running'
    assert '/api/cipher (POST)' in data['endpoints'].values()

    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'healthy', 'service': 'segment-cipher'}


def test_cors_headers(client):
    response = client.get('/api/health', headers={'Origin': 'http://example.com'})
    assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')


# ── Configuration ─────────────────────────────────────────────────────────────

def test_port_defaults_to_7777(monkeypatch):
    monkeypatch.delenv('PORT', raising=False)
    assert get_port() == 7777


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv('PORT', '8123')
    assert get_port() == 8123


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv('PORT', 'eighty')
    with pytest.raises(ValueError):
        get_port()


def test_host_from_environment(monkeypatch):
    monkeypatch.delenv('HOST', raising=False)
    assert get_host() == '0.0.0.0'
    monkeypatch.setenv('HOST', '127.0.0.1')
    assert get_host() == '127.0.0.1'


def test_run_server_uses_configured_address(monkeypatch, capsys):
    calls = {}
    monkeypatch.setenv('PORT', '9001')
    monkeypatch.delenv('HOST', raising=False)
    monkeypatch.setattr(cipher_api.app, 'run', lambda **kwargs: calls.update(kwargs))

    cipher_api.run_server(debug=False)

    assert calls == {'host': '0.0.0.0', 'port': 9001, 'debug': False}
    assert 'Listening on 0.0.0.0:9001...' in capsys.readouterr().out


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
