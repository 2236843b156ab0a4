from datetime import datetime, time

from flask import current_app, jsonify, request

from cybele.schemas import (
    period_summary_schema,
    period_totals_schema,
    run_schema,
    runs_schema,
    validate_payload,
)
from cybele.schemas.query import anchor_query_schema, run_range_query_schema
from cybele.services.run_stats import day_bounds, period_bounds, period_summary, running_stats
from cybele.storage import get_storage
from cybele.utils.decorators import login_required

from . import api_bp


def anchor_now():
    """The moment statistics are anchored on: ``?date=`` if given, else now (UTC)."""
    query = validate_payload(anchor_query_schema, request.args)
    if query["date"] is None:
        return datetime.utcnow()
    return datetime.combine(query["date"], time.min)


@api_bp.route("/runs", methods=["POST"])
@login_required
def create_run(current_user):
    data = validate_payload(run_schema, request.get_json(silent=True))
    if data["date"] is None:
        data["date"] = datetime.utcnow()
    run = get_storage().create_run(current_user.id, data)
    current_app.logger.info(
        f"User {current_user.id} logged a {run.distance} km run (run {run.id})"
    )
    return jsonify(run_schema.dump(run)), 201


@api_bp.route("/runs", methods=["GET"])
@login_required
def list_runs(current_user):
    """Runs between ``?from=`` and ``?to=`` (both days inclusive); defaults to this week."""
    query = validate_payload(run_range_query_schema, request.args)
    week_start, week_end = period_bounds("week", datetime.utcnow())

    start = day_bounds(query["start"])[0] if query["start"] else week_start
    end = day_bounds(query["end"])[1] if query["end"] else week_end

    runs = get_storage().get_runs(current_user.id, start, end)
    return jsonify(runs_schema.dump(runs))


@api_bp.route("/runs/stats", methods=["GET"])
@login_required
def get_running_stats(current_user):
    stats = running_stats(
        get_storage(), current_user.id, anchor_now(), current_user.target_distance
    )
    return jsonify({key: period_totals_schema.dump(summary) for key, summary in stats.items()})


@api_bp.route("/runs/<any(week, month, year):period>", methods=["GET"])
@login_required
def get_period_summary(current_user, period):
    summary = period_summary(
        get_storage(), current_user.id, period, anchor_now(), current_user.target_distance
    )
    return jsonify(period_summary_schema.dump(summary))
