from flask import current_app
from sqlalchemy.exc import IntegrityError

from eduquest import db
from eduquest.errors import AuthError, ConflictError, ValidationError
from eduquest.models import User
from .provisioning import find_user

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _require_credentials(username, password):
    if not username or not password:
        raise ValidationError('Missing fields')
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError('username and password must be strings')


def register_user(username, password) -> User:
    _require_credentials(username, password)
    if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValidationError('Password too long')
    if find_user(username):
        raise ConflictError()

    user = User(username=username)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError()
    current_app.logger.info(f"[register] user={username}")
    return user


def verify_login(username, password) -> User:
    """Check credentials; unknown users and wrong passwords fail identically."""
    _require_credentials(username, password)
    user = find_user(username)
    if not user or not user.check_password(password):
        current_app.logger.info(f"[login] rejected user={username}")
        raise AuthError()
    current_app.logger.info(f"[login] user={username}")
    return user
