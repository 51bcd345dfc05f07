import time

import click
from flask import Flask, g, request
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
    'Cross-Origin-Resource-Policy': 'same-origin',
}


def _cors_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [o.strip() for o in value.split(',') if o.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    from eduquest import startup
    testing = flask_app.config.get('TESTING', False)
    url = flask_app.config.get('SQLALCHEMY_DATABASE_URI')
    if not testing:
        try:
            startup.check_database_url(url)
        except startup.StartupError as exc:
            startup.abort_startup(flask_app, url, exc)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=_cors_origins(flask_app.config.get('CORS_ORIGINS')))

    if not testing:
        with flask_app.app_context():
            try:
                startup.ping_database(db)
            except startup.StartupError as exc:
                startup.abort_startup(flask_app, url, exc)
        flask_app.logger.info(f"[startup] database connected: {startup.mask_database_url(url)}")

    @flask_app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @flask_app.after_request
    def _finish_request(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        started = g.get('request_started')
        if started is not None:
            elapsed_ms = (time.perf_counter() - started) * 1000
            flask_app.logger.info(
                f"{request.method} {request.path} {response.status_code} {elapsed_ms:.1f} ms"
            )
        return response

    from eduquest.main import main
    flask_app.register_blueprint(main)

    from eduquest.api.auth import auth
    flask_app.register_blueprint(auth, url_prefix='/auth')

    from eduquest.api.users import users
    flask_app.register_blueprint(users, url_prefix='/users')

    @click.command('db-reset')
    @click.option('--yes', is_flag=True, help='Confirm wiping a non-test database.')
    def db_reset_command(yes):
        """Drops, recreates, and seeds the database with demo users."""
        if not flask_app.config.get('TESTING') and not yes:
            raise click.ClickException('Refusing to reset a non-test database without --yes.')
        from eduquest.models import User
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed users
            usernames = ['testuser1', 'testuser2', 'testuser3']
            for u in usernames:
                user = User(username=u)
                user.set_password(flask_app.config.get('DEFAULT_PASSWORD', 'password'))
                db.session.add(user)

            db.session.commit()
            click.echo('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
