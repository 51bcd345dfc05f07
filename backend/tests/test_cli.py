from eduquest.models import User


def test_db_reset_seeds_users(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['db-reset'])
    assert result.exit_code == 0
    assert 'reset and seeded' in result.output
    names = sorted(u.username for u in User.query.all())
    assert names == ['testuser1', 'testuser2', 'testuser3']
    assert User.query.filter_by(username='testuser1').first().check_password('password')


def test_db_reset_requires_confirmation_outside_tests(flask_app):
    ensure = User(username='keepme')
    ensure.set_password('pw')
    from eduquest import db
    db.session.add(ensure)
    db.session.commit()

    flask_app.config['TESTING'] = False
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['db-reset'])
    assert result.exit_code != 0
    assert '--yes' in result.output
    assert User.query.filter_by(username='keepme').first() is not None


def test_db_reset_with_confirmation(flask_app):
    flask_app.config['TESTING'] = False
    result = flask_app.test_cli_runner().invoke(args=['db-reset', '--yes'])
    assert result.exit_code == 0
    assert User.query.count() == 3
