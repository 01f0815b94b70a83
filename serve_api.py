"""Launcher for the JSON API.

Usage:
  python serve_api.py

Serves ``/api/data`` and ``/api/type-of-issues-percentage`` with Flask's
development server on the host/port from ``settings.yaml``.
"""

import logging

from service_desk_app.api.server import create_app
from service_desk_app.core.settings import load_settings


def main():
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, str(settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(host=settings.api_host, port=int(settings.api_port))


if __name__ == "__main__":
    main()
