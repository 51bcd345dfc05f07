"""Fail-fast checks run before the service accepts traffic.

The connection string must be present, free of ``<placeholder>`` tokens and
parseable, and the store must answer a trivial query within the configured
connect timeout. Any failure is logged with a masked URL and aborts startup.
"""
import re

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from eduquest.errors import StartupError

_PLACEHOLDER = re.compile(r'<.+>')


def mask_database_url(url) -> str:
    """Summarize a connection string as ``driver://host/...`` without credentials."""
    if not url:
        return '(not set)'
    try:
        parsed = make_url(url)
    except ArgumentError:
        return '(invalid)'
    host = parsed.host or ''
    if parsed.port:
        host = f'{host}:{parsed.port}'
    return f'{parsed.drivername}://{host}/...'


def check_database_url(url) -> str:
    if not url:
        raise StartupError('DATABASE_URL is not set.')
    if _PLACEHOLDER.search(url):
        raise StartupError('DATABASE_URL contains placeholders.')
    try:
        make_url(url)
    except ArgumentError as exc:
        raise StartupError(f'DATABASE_URL could not be parsed: {exc}') from exc
    return url


def ping_database(db) -> None:
    """Run ``SELECT 1`` against the store; the engine's connect timeout bounds the wait."""
    try:
        with db.engine.connect() as conn:
            conn.execute(text('SELECT 1'))
    except SQLAlchemyError as exc:
        raise StartupError(f'Database unreachable: {exc.__class__.__name__}') from exc


def abort_startup(app, url, exc) -> None:
    app.logger.error(f"[startup] {exc}")
    app.logger.error(f"[startup] DATABASE_URL summary: {mask_database_url(url)}")
    app.logger.error('[startup] Set DATABASE_URL in backend/.env to a reachable database.')
    raise SystemExit(1)
