from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from eduquest import db


class ApiError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    message = 'Server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ApiError):
    status_code = 400
    message = 'Invalid request'


class ConflictError(ApiError):
    status_code = 409
    message = 'User exists'


class AuthError(ApiError):
    status_code = 401
    message = 'Invalid credentials'


class DepletedError(ApiError):
    status_code = 400
    message = 'No powerups left'


class NotFoundError(ApiError):
    status_code = 404
    message = 'User not found'


class ServerError(ApiError):
    pass


class StartupError(Exception):
    """Raised when the service cannot be brought up (bad config, store unreachable)."""


def register_error_handlers(blueprint, with_ok_flag=False):
    """Render ApiError and unexpected failures as JSON for every route of ``blueprint``.

    The auth group answers ``{ok: false, error}``; the users group answers ``{error}``.
    """

    def _body(message):
        if with_ok_flag:
            return {'ok': False, 'error': message}
        return {'error': message}

    @blueprint.errorhandler(ApiError)
    def handle_api_error(exc):
        db.session.rollback()
        if exc.status_code >= 500:
            current_app.logger.error(f"[{blueprint.name}] {exc.message}")
        return jsonify(_body(exc.message)), exc.status_code

    @blueprint.errorhandler(Exception)
    def handle_unexpected(exc):
        if isinstance(exc, HTTPException):
            return exc
        db.session.rollback()
        current_app.logger.exception(f"[{blueprint.name}] unhandled error: {exc}")
        return jsonify(_body(ServerError.message)), ServerError.status_code
