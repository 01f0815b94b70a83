"""Flask application factory for the service desk JSON API."""

from __future__ import annotations

from flask import Flask

from service_desk_app.core.client import SampleDataAPI
from service_desk_app.core.service import IssueService
from service_desk_app.core.settings import load_settings

from .routes import api_bp


def build_service() -> IssueService:
    settings = load_settings()
    api = SampleDataAPI(
        settings.data_url,
        timeout=float(settings.request_timeout),
        cache_ttl=float(settings.cache_ttl),
    )
    return IssueService(api, datapoints=int(settings.datapoints))


def create_app(service: IssueService | None = None) -> Flask:
    app = Flask(__name__)
    app.config["ISSUE_SERVICE"] = service or build_service()
    app.register_blueprint(api_bp)
    return app
