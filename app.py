"""Application entry point.

Creates the Flask application using the factory defined in
``seeder/__init__.py`` so the CLI commands are available through
``flask --app app seed`` and ``flask --app app setup``.  Running this module
directly creates the tables and seeds the default super admin, which is what
a fresh environment needs before first use.
"""

from seeder import create_app
from seeder.seeds import create_schema, seed

app = create_app()

if __name__ == "__main__":
    # Queries need an application context; the factory does not open one.
    with app.app_context():
        create_schema()
        seed()
