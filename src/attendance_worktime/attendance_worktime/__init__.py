"""Attendance work-time aggregation.

Organized by feature modules (business_calendar, spans, attendance, rollup)
around a pure engine, with thin MySQL read adapters and a thin Flask
controller layer on top.
"""
from __future__ import annotations

from .engine import AttendanceEngine, AttendanceResult, compute_attendance

__all__ = ["AttendanceEngine", "AttendanceResult", "compute_attendance"]
