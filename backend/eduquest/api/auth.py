from flask import Blueprint, jsonify, request

from eduquest.errors import register_error_handlers
from eduquest.services.users.accounts import register_user, verify_login


auth = Blueprint('auth', __name__)
register_error_handlers(auth, with_ok_flag=True)


def _credentials():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    return data.get('username'), data.get('password')


@auth.route('/register', methods=['POST'])
def register():
    register_user(*_credentials())
    return jsonify({'ok': True})


@auth.route('/login', methods=['POST'])
def login():
    # Stateless credential check: no session or token is issued
    verify_login(*_credentials())
    return jsonify({'ok': True})
