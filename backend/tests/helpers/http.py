"""HTTP helper utilities for tests."""

from __future__ import annotations

from urllib.parse import urlencode

API = "/api/v1"


def json_headers(request_id: str | None = None) -> dict[str, str]:
    """Return standard JSON headers, optionally with a correlation id."""

    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers


def build_url(path: str, **query: str | int | float | None) -> str:
    """Build an API URL with encoded query parameters.

    Parameters
    ----------
    path:
        Endpoint path relative to the versioned API root (e.g. ``"/workouts"``).
    **query:
        Query parameters to append; ``None`` values are dropped.
    """

    qs = urlencode({k: v for k, v in query.items() if v is not None})
    url = f"{API}{path}"
    return f"{url}?{qs}" if qs else url
