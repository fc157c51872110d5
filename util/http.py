"""
util/http.py

Tiny HTTP helper for JSON GET with a bounded timeout.
- Timeout can be configured via HTTP_TIMEOUT env (default 8s)
- Raises for HTTP status errors and network errors; no retries
"""

import os

import requests


DEFAULT_TIMEOUT = 8.0


def http_timeout():
    try:
        return float(os.getenv("HTTP_TIMEOUT", str(DEFAULT_TIMEOUT)))
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT


def get_json(url, params=None, headers=None, timeout=None):
    """HTTP GET and decode the JSON body.

    Raises `requests.RequestException` on transport errors, timeouts and non-2xx
    responses, and `ValueError` when the body is not JSON.
    """
    if timeout is None:
        timeout = http_timeout()
    resp = requests.get(url, params=params, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp.json()
