"""Reports and analytics endpoints backing the dashboard charts."""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pymongo.errors import PyMongoError

from .. import sample_data
from ..config import ConfigError
from ..db import count_courses
from ..utils.params import parse_choice_arg
from .auth_simple import require_admin

reports_bp = Blueprint("reports", __name__, url_prefix="/api/admin")

logger = logging.getLogger(__name__)

TREND_WINDOWS = (5, 10)
DEFAULT_TREND_WINDOW = 5


def _json_error(message: str, status: int, details: Dict[str, Any] | None = None):
    payload: Dict[str, Any] = {"error": message}
    if details:
        payload["details"] = details
    return jsonify(payload), status


@reports_bp.get("/getDashboardStats")
@require_admin
def dashboard_stats():
    try:
        total_courses = count_courses()
    except ConfigError as exc:
        logger.exception("Missing configuration for MongoDB")
        return _json_error(str(exc), 500)
    except PyMongoError:
        logger.exception("Failed to count courses due to MongoDB error")
        return _json_error("Database unavailable. Please try again later.", 503)

    return jsonify({
        "totalStudents": sample_data.TOTAL_STUDENTS,
        "totalCourses": total_courses,
        "totalRegistrations": sample_data.TOTAL_REGISTRATIONS,
        "pendingRegistrations": sample_data.PENDING_REGISTRATIONS,
    })


@reports_bp.get("/getStudentsPerCourse")
@require_admin
def students_per_course():
    return jsonify(sample_data.students_per_course())


@reports_bp.route("/getEnrollmentTrend", methods=["GET", "POST"])
@require_admin
def enrollment_trend():
    years_back = parse_choice_arg(
        [request.args, request.get_json(silent=True) or {}],
        name="yearsBack",
        choices=TREND_WINDOWS,
        default=DEFAULT_TREND_WINDOW,
    )
    return jsonify(sample_data.enrollment_trend(years_back))


@reports_bp.get("/getRegistrationStatus")
@require_admin
def registration_status():
    return jsonify(sample_data.registration_status())


@reports_bp.get("/getPendingRegistrations")
@require_admin
def pending_registrations():
    return jsonify(sample_data.pending_registrations())


__all__ = ["reports_bp"]
