"""WSGI proxy handling and CORS policy for the API."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Wrap the WSGI app with ``ProxyFix`` and configure CORS.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``USE_PROXYFIX``, ``CORS_ORIGINS`` and
        ``CORS_MAX_AGE`` settings are consulted. A blank or ``"*"``
        ``CORS_ORIGINS`` allows any origin without credential support.
    """
    if app.config.get("USE_PROXYFIX", True):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    raw_origins = app.config.get("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = len(origins) == 0 or origins == ["*"]

    api_base = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")
    CORS(
        app,
        resources={rf"{api_base}/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        max_age=app.config.get("CORS_MAX_AGE", 600),
        expose_headers=["X-Request-ID"],
    )
