import os
import sys
import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from seeder import create_app, default_config
from seeder.models import db, SuperAdmin


@pytest.fixture
def app(tmp_path):
    db_path = tmp_path / 'test.sqlite'
    app = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{db_path}')
    yield app
    with app.app_context():
        db.drop_all()


def test_seed_command_creates_admin(app):
    with app.app_context():
        db.create_all()
    result = app.test_cli_runner().invoke(args=['seed'])
    assert result.exit_code == 0
    assert 'Created super admin admin@example.com' in result.output
    with app.app_context():
        assert SuperAdmin.query.count() == 1


def test_seed_command_is_idempotent(app):
    with app.app_context():
        db.create_all()
    runner = app.test_cli_runner()
    runner.invoke(args=['seed'])
    result = runner.invoke(args=['seed'])
    assert result.exit_code == 0
    assert 'already present' in result.output
    with app.app_context():
        assert SuperAdmin.query.count() == 1


def test_setup_command_creates_tables_and_admin(app):
    result = app.test_cli_runner().invoke(args=['setup'])
    assert result.exit_code == 0
    with app.app_context():
        assert SuperAdmin.query.filter_by(email='admin@example.com').count() == 1


def test_seed_command_fails_when_store_unreachable(tmp_path):
    missing = tmp_path / 'missing' / 'db.sqlite'
    app = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{missing}')
    result = app.test_cli_runner().invoke(args=['seed'])
    assert result.exit_code == 1
    assert 'Database unavailable' in result.output


def test_default_config_follows_flask_env(monkeypatch):
    monkeypatch.setenv('FLASK_ENV', 'production')
    assert default_config() == 'config.ProductionConfig'
    monkeypatch.delenv('FLASK_ENV')
    assert default_config() == 'config.DevelopmentConfig'


def test_setup_command_fails_when_store_unreachable(tmp_path):
    missing = tmp_path / 'missing' / 'db.sqlite'
    app = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{missing}')
    result = app.test_cli_runner().invoke(args=['setup'])
    assert result.exit_code == 1
    assert 'Database unavailable' in result.output
    assert not missing.exists()


def test_seed_command_output_hides_password_hash(tmp_path):
    db_path = tmp_path / 'test.sqlite'
    app = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{db_path}')
    with app.app_context():
        db.create_all()
        db.engine.dispose()
    ro_app = create_app('config.TestingConfig',
                        SQLALCHEMY_DATABASE_URI=f'sqlite:///file:{db_path}?mode=ro&uri=true')
    result = ro_app.test_cli_runner().invoke(args=['seed'])
    assert result.exit_code == 1
    assert 'readonly' in result.output
    assert 'scrypt' not in result.output
    assert 'pbkdf2' not in result.output
