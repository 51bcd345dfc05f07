import math

from eduquest import db
from eduquest.errors import ValidationError
from eduquest.models import DEFAULT_THEME, MAX_POINTS
from .provisioning import ensure_user


def get_points(username: str) -> int:
    user = ensure_user(username)
    return user.points or 0


def set_points(username: str, points) -> int:
    """Overwrite the balance with ``max(0, trunc(points))``, capped at MAX_POINTS.

    This is an absolute set, not an increment: concurrent writers race and the
    last commit wins.
    """
    if isinstance(points, bool) or not isinstance(points, (int, float)):
        raise ValidationError('points must be number')
    if isinstance(points, float) and not math.isfinite(points):
        raise ValidationError('points must be number')
    user = ensure_user(username)
    user.points = min(MAX_POINTS, max(0, int(points)))
    db.session.add(user)
    db.session.commit()
    return user.points


def _require_theme(theme):
    if not theme:
        raise ValidationError('Missing theme')
    if not isinstance(theme, str):
        raise ValidationError('theme must be a string')


def get_theme(username: str) -> str:
    user = ensure_user(username)
    return user.current_theme or DEFAULT_THEME


def set_theme(username: str, theme) -> str:
    # No purchase check here; clients enforce the price before calling this
    _require_theme(theme)
    user = ensure_user(username)
    owned = user.themes_owned
    if theme not in owned:
        owned.append(theme)
        user.themes_owned = owned
    user.current_theme = theme
    db.session.add(user)
    db.session.commit()
    return user.current_theme


def list_themes(username: str) -> list:
    user = ensure_user(username)
    return list(dict.fromkeys([DEFAULT_THEME] + user.themes_owned))


def purchase_theme(username: str, theme) -> None:
    _require_theme(theme)
    user = ensure_user(username)
    owned = user.themes_owned
    if theme not in owned:
        owned.append(theme)
        user.themes_owned = owned
        db.session.add(user)
    db.session.commit()
