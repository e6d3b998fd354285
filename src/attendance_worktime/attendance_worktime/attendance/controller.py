from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_hhmm, parse_iso_date
from ..core.exceptions import DataUnavailable, ValidationError
from ..rollup.model import PeriodSummary
from .model import DailyAttendanceRecord

logger = logging.getLogger(__name__)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _record_to_json(r: DailyAttendanceRecord) -> dict:
    return {
        "agent_id": r.user_id,
        "agent_name": r.agent_name,
        "date": r.date_key,
        "first_login": _iso(r.first_login),
        "last_logout": _iso(r.last_logout),
        "status": r.status,
        "is_late": r.is_late,
        "total_work_minutes": r.work_minutes,
        "worked_hours": format_hhmm(r.work_minutes),
        "minutes_source": r.minutes_source.value,
    }


def _summary_to_json(s: PeriodSummary) -> dict:
    return {
        "agent_id": s.user_id,
        "agent_name": s.agent_name,
        "days_present": s.days_present,
        "days_recorded": s.days_recorded,
        "late_days": s.late_days,
        "total_work_minutes": s.total_work_minutes,
        "total_hours": format_hhmm(s.total_work_minutes),
        "avg_first_login": s.avg_first_login.strftime("%H:%M") if s.avg_first_login else None,
        "avg_last_logout": s.avg_last_logout.strftime("%H:%M") if s.avg_last_logout else None,
    }


def register(app: Flask, container) -> None:
    @app.route("/api/attendance/overview", methods=["GET"], endpoint="attendance_overview")
    def attendance_overview():
        """Day records or week/month summaries for a team (or everyone)."""

        service = container.attendance_service
        # The only wall-clock read; everything below works from as_of.
        as_of = datetime.now(timezone.utc)
        try:
            date_s = (request.args.get("date") or "").strip()
            selected = parse_iso_date(date_s) if date_s else service.engine.bucketer.local_date(as_of)
            result = service.overview(
                period=request.args.get("period", "day"),
                selected_date=selected,
                as_of=as_of,
                team_id=request.args.get("team_id") or None,
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except DataUnavailable as e:
            logger.exception("Attendance overview failed")
            return jsonify({"success": False, "message": str(e)}), 503

        rows = [
            _summary_to_json(r) if isinstance(r, PeriodSummary) else _record_to_json(r)
            for r in result.rows
        ]
        return jsonify(
            {
                "success": True,
                "period": result.period.value,
                "start": result.date_range.start.isoformat() if result.date_range else None,
                "end": result.date_range.end.isoformat() if result.date_range else None,
                "rows": rows,
                "stats": result.stats.as_dict(),
            }
        )
