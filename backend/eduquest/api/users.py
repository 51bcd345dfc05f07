from flask import Blueprint, jsonify, request

from eduquest.errors import register_error_handlers
from eduquest.services.users import inventory, progress


users = Blueprint('users', __name__)
register_error_handlers(users)


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# Points

@users.route('/<string:username>/points', methods=['GET'])
def get_points(username):
    return jsonify({'points': progress.get_points(username)})


@users.route('/<string:username>/points', methods=['PUT'])
def set_points(username):
    return jsonify({'points': progress.set_points(username, _body().get('points'))})


# Themes

@users.route('/<string:username>/theme', methods=['GET'])
def get_theme(username):
    return jsonify({'theme': progress.get_theme(username)})


@users.route('/<string:username>/theme', methods=['PUT'])
def set_theme(username):
    return jsonify({'theme': progress.set_theme(username, _body().get('theme'))})


@users.route('/<string:username>/themes', methods=['GET'])
def list_themes(username):
    return jsonify({'themes': progress.list_themes(username)})


@users.route('/<string:username>/themes/purchase', methods=['POST'])
def purchase_theme(username):
    progress.purchase_theme(username, _body().get('theme'))
    return jsonify({'ok': True})


# Power-ups

@users.route('/<string:username>/powerups', methods=['GET'])
def list_powerups(username):
    return jsonify({'powerups': inventory.list_powerups(username)})


@users.route('/<string:username>/powerups/purchase', methods=['POST'])
def purchase_powerup(username):
    inventory.purchase_powerup(username, _body().get('powerupId'))
    return jsonify({'ok': True})


@users.route('/<string:username>/powerups/use', methods=['POST'])
def use_powerup(username):
    inventory.use_powerup(username, _body().get('powerupId'))
    return jsonify({'ok': True})


# Imported flashcard sets

@users.route('/<string:username>/imported-sets', methods=['GET'])
def list_imported_sets(username):
    return jsonify({'sets': inventory.list_imported_sets(username)})


@users.route('/<string:username>/imported-sets', methods=['POST'])
def add_imported_set(username):
    inventory.add_imported_set(username, _body().get('setName'))
    return jsonify({'ok': True})


@users.route('/<string:username>/imported-sets/<path:set_name>', methods=['DELETE'])
def remove_imported_set(username, set_name):
    inventory.remove_imported_set(username, set_name)
    return jsonify({'ok': True})
