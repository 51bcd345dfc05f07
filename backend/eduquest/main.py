import time

from flask import Blueprint, jsonify

main = Blueprint('main', __name__)

_started_at = time.monotonic()


@main.route('/')
def index():
    return 'EduQuest API is running!', 200, {'Content-Type': 'text/plain; charset=utf-8'}


@main.route('/health')
def health():
    return jsonify({'ok': True, 'uptime': time.monotonic() - _started_at})
