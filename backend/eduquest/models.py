from datetime import datetime, timezone
import json
import logging

from eduquest import db, bcrypt

# Child of the Flask app logger, so records share its handlers and level
logger = logging.getLogger(__name__)

DEFAULT_THEME = 'space'
# Largest balance a signed 64-bit column holds
MAX_POINTS = 2 ** 63 - 1


def _utcnow():
    return datetime.now(timezone.utc)


def _load_json(raw, default, field=None):
    if not raw:
        return default
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"[models] corrupt JSON in {field or 'column'}, using default: {raw!r}")
        return default


class User(db.Model):
    """A learner and all of their gamification state.

    The collection fields are stored as JSON-encoded text so the row reads and
    writes as a single document. Use the properties below rather than the raw
    columns; assigning through them replaces the whole value.
    """
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    points = db.Column(db.BigInteger, nullable=False, default=0)
    current_theme = db.Column(db.String(64), nullable=False, default=DEFAULT_THEME)
    themes_owned_json = db.Column('themes_owned', db.Text, nullable=True)
    powerups_json = db.Column('powerups', db.Text, nullable=True)
    imported_sets_json = db.Column('imported_sets', db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    def __init__(self, **kwargs):
        super(User, self).__init__(**kwargs)
        if self.points is None:
            self.points = 0
        if not self.current_theme:
            self.current_theme = DEFAULT_THEME
        if self.themes_owned_json is None:
            self.themes_owned = [DEFAULT_THEME]
        if self.powerups_json is None:
            self.powerups = {}
        if self.imported_sets_json is None:
            self.imported_sets = []

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        try:
            return bcrypt.check_password_hash(self.password_hash, password)
        except ValueError:
            # Malformed stored hash or an unhashable password never matches
            return False

    @property
    def themes_owned(self):
        return list(_load_json(self.themes_owned_json, [], 'themes_owned'))

    @themes_owned.setter
    def themes_owned(self, themes):
        self.themes_owned_json = json.dumps(list(dict.fromkeys(themes)))

    @property
    def powerups(self):
        return dict(_load_json(self.powerups_json, {}, 'powerups'))

    @powerups.setter
    def powerups(self, counts):
        self.powerups_json = json.dumps({k: v for k, v in counts.items() if v > 0})

    @property
    def imported_sets(self):
        return list(_load_json(self.imported_sets_json, [], 'imported_sets'))

    @imported_sets.setter
    def imported_sets(self, names):
        self.imported_sets_json = json.dumps(list(dict.fromkeys(names)))

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'points': self.points or 0,
            'theme': self.current_theme or DEFAULT_THEME,
            'themes_owned': self.themes_owned,
            'powerups': self.powerups,
            'imported_sets': self.imported_sets,
        }
