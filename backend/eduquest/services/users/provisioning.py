from flask import current_app
from sqlalchemy.exc import IntegrityError

from eduquest import db
from eduquest.errors import NotFoundError
from eduquest.models import User


def find_user(username: str):
    return User.query.filter_by(username=username).first()


def ensure_user(username: str) -> User:
    """Return the user for ``username``, creating it on first access.

    Implicit accounts get the configured default password, which is well known.
    Turn AUTO_PROVISION_USERS off to make unknown usernames a 404 instead.
    """
    user = find_user(username)
    if user:
        return user

    if not current_app.config.get('AUTO_PROVISION_USERS', True):
        raise NotFoundError()

    user = User(username=username)
    user.set_password(current_app.config.get('DEFAULT_PASSWORD', 'password'))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Another request provisioned the same username first
        db.session.rollback()
        user = find_user(username)
        if user is None:
            raise
        return user
    current_app.logger.info(f"[provision] auto-created user={username}")
    return user
