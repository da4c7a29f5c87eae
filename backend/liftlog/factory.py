"""Application factory for the LiftLog API."""

from __future__ import annotations

import logging

from flask import Flask

from liftlog.core.config import BaseConfig, get_config
from liftlog.core.logger import configure_logging

log = logging.getLogger(__name__)


def _load_config(
    app: Flask,
    config: str | type[BaseConfig] | object | None,
    instance_config_filename: str | None,
) -> None:
    """Apply ``config`` (or the ``APP_ENV`` selection), then the instance file."""
    app.config.from_object(config if config is not None else get_config())
    if instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)


def _register_components(app: Flask) -> None:
    """Attach middleware, extensions, routes, error handlers and CLI commands.

    Order matters: the request-id hooks must run before the error handlers
    render their first problem document.
    """
    from liftlog import cli
    from liftlog.api import init_app as init_api
    from liftlog.core import errors, extensions, logger, middleware

    middleware.init_app(app)
    extensions.init_app(app)
    logger.init_app(app)
    init_api(app)
    errors.init_app(app)
    cli.init_app(app)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str | None = "config.py",
) -> Flask:
    """Build the Flask application.

    Parameters
    ----------
    config:
        Import path, class or object holding settings. ``None`` picks the
        class matching ``APP_ENV``.
    instance_relative_config:
        Load ``instance_config_filename`` from Flask's instance folder on
        top of ``config``.
    instance_config_filename:
        File name inside the instance folder; missing files are ignored.
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)
    _load_config(app, config, instance_config_filename if instance_relative_config else None)

    # Keep field order from the marshmallow schemas in responses
    app.json.sort_keys = False

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    _register_components(app)

    log.info("LiftLog app created for %s", app.config.get("APP_ENV"))
    return app
