import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env'))


def _bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


def _engine_options(url, timeout):
    options = {'pool_pre_ping': True}
    # Only PostgreSQL drivers understand connect_timeout as a connect arg
    if url and url.startswith(('postgres', 'postgresql')):
        options['connect_args'] = {'connect_timeout': timeout}
    return options


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # No default: startup refuses to run without a real connection string
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_CONNECT_TIMEOUT_SEC = int(os.environ.get('DB_CONNECT_TIMEOUT_SEC', '8'))
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI, DB_CONNECT_TIMEOUT_SEC)
    # bcrypt cost factor for stored password hashes
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '10'))
    # Password given to users created implicitly on first access
    DEFAULT_PASSWORD = os.environ.get('DEFAULT_PASSWORD', 'password')
    AUTO_PROVISION_USERS = _bool(os.environ.get('AUTO_PROVISION_USERS'), True)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    PORT = int(os.environ.get('PORT', '3000'))
