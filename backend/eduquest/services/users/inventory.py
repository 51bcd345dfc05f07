"""Consumable power-ups and imported flashcard-set references.

Power-up counts are always positive: a count that would reach zero removes the
entry instead. Imported sets are an ordered list of unique names.
"""
from eduquest import db
from eduquest.errors import DepletedError, ValidationError
from .provisioning import ensure_user


def _require(value, field):
    if not value:
        raise ValidationError(f'Missing {field}')
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')


def list_powerups(username: str) -> dict:
    return ensure_user(username).powerups


def purchase_powerup(username: str, powerup_id) -> int:
    _require(powerup_id, 'powerupId')
    user = ensure_user(username)
    counts = user.powerups
    counts[powerup_id] = int(counts.get(powerup_id) or 0) + 1
    user.powerups = counts
    db.session.add(user)
    db.session.commit()
    return counts[powerup_id]


def use_powerup(username: str, powerup_id) -> int:
    """Consume one power-up and return what is left."""
    _require(powerup_id, 'powerupId')
    user = ensure_user(username)
    counts = user.powerups
    current = int(counts.get(powerup_id) or 0)
    if current <= 0:
        raise DepletedError()
    remaining = current - 1
    if remaining > 0:
        counts[powerup_id] = remaining
    else:
        counts.pop(powerup_id, None)
    user.powerups = counts
    db.session.add(user)
    db.session.commit()
    return remaining


def list_imported_sets(username: str) -> list:
    return [{'name': name} for name in ensure_user(username).imported_sets]


def add_imported_set(username: str, set_name) -> None:
    _require(set_name, 'setName')
    user = ensure_user(username)
    names = user.imported_sets
    if set_name not in names:
        names.append(set_name)
        user.imported_sets = names
        db.session.add(user)
    db.session.commit()


def remove_imported_set(username: str, set_name: str) -> None:
    user = ensure_user(username)
    user.imported_sets = [n for n in user.imported_sets if n != set_name]
    db.session.add(user)
    db.session.commit()
