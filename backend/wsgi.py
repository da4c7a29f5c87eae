"""WSGI entrypoint: ``gunicorn -c gunicorn.conf.py`` from ``backend/``."""

from liftlog import create_app

app = create_app()
