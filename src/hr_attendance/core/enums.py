from __future__ import annotations

from enum import Enum


class Field(str, Enum):
    """Semantic columns of a time-clock statistics export."""

    DOCUMENT_ID = "document_id"
    NAME = "name"
    DEPARTMENT = "department"
    SCHEDULED_HOURS = "scheduled_hours"
    ACTUAL_HOURS = "actual_hours"
    TARDY_COUNT = "tardy_count"
    TARDY_MINUTES = "tardy_minutes"
    EARLY_LEAVE_COUNT = "early_leave_count"
    EARLY_LEAVE_MINUTES = "early_leave_minutes"
    OVERTIME_WEEKDAY = "overtime_weekday"
    OVERTIME_HOLIDAY = "overtime_holiday"
    DAYS_ATTENDED = "days_attended"
    EARLY_LEAVE_DAYS = "early_leave_days"
    ABSENCES = "absences"
    PERMISSIONS = "permissions"


class ColumnGroup(str, Enum):
    """Merged header labels that give meaning to the sub-columns below/right of them."""

    WORK_HOURS = "WORK_HOURS"
    TARDY = "TARDY"
    EARLY_LEAVE = "EARLY_LEAVE"
    OVERTIME = "OVERTIME"


class ExportFormat(str, Enum):
    PDF = "pdf"
    CSV = "csv"
    XLSX = "xlsx"
