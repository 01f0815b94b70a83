"""JSON endpoints over the service desk sample."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify

from service_desk_app.analytics.distribution import type_percentage_triple
from service_desk_app.core.client import SampleDataError
from service_desk_app.core.config import FETCH_ERROR_MESSAGE
from service_desk_app.core.service import IssueService

logger = logging.getLogger(__name__)

api_bp = Blueprint("service_desk_api", __name__, url_prefix="/api")


def _service() -> IssueService:
    return current_app.config["ISSUE_SERVICE"]


@api_bp.get("/data")
def raw_data():
    """Return the remote payload unchanged: ``{"results": [...]}``."""
    try:
        payload = _service().fetch_payload(fresh=True)
    except SampleDataError as exc:
        # Keep it terse for clients; logs carry the cause
        logger.error("Fetching raw data failed: %s", exc)
        return jsonify({"error": FETCH_ERROR_MESSAGE}), 500
    return jsonify(payload)


@api_bp.get("/type-of-issues-percentage")
def type_of_issues_percentage():
    """Percentage of problems, questions and tasks in the fetched sample."""
    try:
        records = _service().fetch_records(fresh=True)
    except SampleDataError as exc:
        logger.error("Fetching issue types failed: %s", exc)
        return jsonify({"error": FETCH_ERROR_MESSAGE}), 500
    return jsonify(type_percentage_triple(records))
