import os

from flask import Flask
from flask_migrate import Migrate

from .models import db

migrate = Migrate()


def default_config():
    if os.environ.get('FLASK_ENV', '').lower() == 'production':
        return 'config.ProductionConfig'
    return 'config.DevelopmentConfig'


def create_app(config_object=None, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object or default_config())
    app.config.update(overrides)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    migrate.init_app(app, db)

    from . import cli
    cli.init_app(app)

    return app
