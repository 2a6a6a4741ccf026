#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Web interface and JSON API for the segment cipher
"""
from flask import Flask, request, jsonify, render_template_string
from flask_cors import CORS
from dotenv import load_dotenv
import os
import traceback

from segment_cipher import Direction, number_of_segments, transform
from segment_mapping import get_segment_mapping, get_text_mappings

# Load environment variables from .env file if it exists
load_dotenv()

app = Flask(__name__)
CORS(app)

# Debug mode - set via environment variable
DEBUG_MODE = os.environ.get('DEBUG', 'false').lower() == 'true'

DEFAULT_PORT = 7777
DEFAULT_HOST = '0.0.0.0'
SERVICE_NAME = 'segment-cipher'

INDEX_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>Cipher</title>
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 50px auto; padding: 20px; }
        h1 { color: #333; }
        textarea { width: 100%; height: 120px; font-family: monospace; }
        .output { background: #f5f5f5; padding: 10px; margin: 10px 0; border-radius: 5px; font-family: monospace; white-space: pre-wrap; }
    </style>
</head>
<body>
    <h1>Cipher</h1>
    <form method="POST" action="/">
        <textarea name="input">{{ input_text }}</textarea>
        <p>
            <input type="submit" name="cipher" value="Cipher">
            <input type="submit" name="decipher" value="Decipher">
        </p>
    </form>
    {% if output is not none %}
    <h2>Output</h2>
    <div class="output" id="output">{{ output }}</div>
    {% endif %}
</body>
</html>
"""


def get_port() -> int:
    """Listening port: PORT environment variable, or 7777."""
    port = os.environ.get('PORT')
    if not port:
        return DEFAULT_PORT
    try:
        return int(port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port!r}")


def get_host() -> str:
    return os.environ.get('HOST', DEFAULT_HOST)


def _cipher_response(direction: Direction):
    """Shared body of /api/cipher and /api/decipher"""
    data = request.get_json(silent=True)

    if data is None:
        return jsonify({'error': 'No JSON data provided'}), 400

    if not isinstance(data, dict):
        return jsonify({'error': 'JSON body must be an object'}), 400

    if 'text' not in data:
        return jsonify({'error': 'No text provided'}), 400

    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({'error': 'text must be a string'}), 400

    if DEBUG_MODE:
        print(f"DEBUG {direction.name}: text={text!r}")

    output = transform(text, direction)

    return jsonify({
        'input': text,
        'output': output,
        'direction': direction.name.lower(),
        'segments': number_of_segments(len(text)),
    })


@app.route('/', methods=['GET', 'POST'])
def cipher_web():
    """
    HTML form. GET renders an empty form; POST ciphers or deciphers the
    `input` field depending on which submit button was pressed.
    """
    input_text = ''
    output = None

    try:
        if request.method == 'POST':
            input_text = request.form.get('input', '')
            output = ''
            if 'cipher' in request.form:
                output = transform(input_text, Direction.ENCODE)
            elif 'decipher' in request.form:
                output = transform(input_text, Direction.DECODE)

            if DEBUG_MODE:
                print(f"DEBUG form: input={input_text!r} output={output!r}")

        return render_template_string(INDEX_TEMPLATE, input_text=input_text, output=output)

    except Exception as e:
        traceback.print_exc()
        return f'<html><body><h1>Error</h1><p>{type(e).__name__}</p></body></html>', 500


@app.route('/api/cipher', methods=['POST'])
def cipher_api():
    """
    Cipher text.

    Request body:
        {
            "text": "Text to cipher"
        }

    Response:
        {
            "input": "Text to cipher",
            "output": "Ciphered text",
            "direction": "encode",
            "segments": 2
        }
    """
    try:
        return _cipher_response(Direction.ENCODE)
    except Exception as e:
        traceback.print_exc()
        return jsonify({'error': str(e), 'type': type(e).__name__}), 500


@app.route('/api/decipher', methods=['POST'])
def decipher_api():
    """Decipher text. Same request/response shape as /api/cipher."""
    try:
        return _cipher_response(Direction.DECODE)
    except Exception as e:
        traceback.print_exc()
        return jsonify({'error': str(e), 'type': type(e).__name__}), 500


@app.route('/api/mappings', methods=['POST'])
def get_mappings():
    """
    Get substitution mappings.

    Request body:
        {
            "segment": 3,        # mapping for one segment
            "text": "Hello",     # or one mapping per segment of the text
            "decipher": false    # optional, inverse direction
        }
    """
    try:
        data = request.get_json(silent=True)

        if data is None:
            return jsonify({'error': 'No JSON data provided'}), 400

        if not isinstance(data, dict):
            return jsonify({'error': 'JSON body must be an object'}), 400

        decipher = data.get('decipher', False)
        if not isinstance(decipher, bool):
            return jsonify({'error': 'decipher must be a boolean'}), 400
        direction = Direction.from_flag(decipher)

        if 'segment' in data:
            segment = data.get('segment')
            if isinstance(segment, bool) or not isinstance(segment, int):
                return jsonify({'error': 'segment must be an integer'}), 400
            if segment < 0:
                return jsonify({'error': 'segment must not be negative'}), 400

            return jsonify({
                'segment': segment,
                'direction': direction.name.lower(),
                'shift': direction.shift_for(segment),
                'mapping': get_segment_mapping(segment, direction),
            })

        if 'text' in data:
            text = data.get('text')
            if not isinstance(text, str):
                return jsonify({'error': 'text must be a string'}), 400
            return jsonify({
                'direction': direction.name.lower(),
                'segments': get_text_mappings(text, direction),
            })

        return jsonify({'error': 'Either segment or text must be provided'}), 400

    except Exception as e:
        traceback.print_exc()
        return jsonify({'error': str(e), 'type': type(e).__name__}), 500


@app.route('/api', methods=['GET'])
def api_info():
    """API information endpoint"""
    return jsonify({
        'service': SERVICE_NAME,
        'status': 'running',
        'endpoints': {
            'form': '/ (GET, POST)',
            'cipher': '/api/cipher (POST)',
            'decipher': '/api/decipher (POST)',
            'mappings': '/api/mappings (POST)',
            'health': '/api/health (GET)'
        }
    })


@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': SERVICE_NAME
    })


def run_server(host: str = None, port: int = None, debug: bool = None):
    """Start the web interface. Blocks until the server stops."""
    host = host or get_host()
    port = port or get_port()
    if debug is None:
        debug = DEBUG_MODE

    print(f"Listening on {host}:{port}...")
    if debug:
        print(f"Debug mode: {debug}")

    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    run_server()
