from __future__ import annotations

import mysql.connector
import pytest

from hr_attendance.core.exceptions import RosterUnavailableError
from hr_attendance.database.connection import DBConfig
from hr_attendance.roster.mysql_roster_repository import MySQLRosterRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.sql = None
        self.closed = False

    def execute(self, sql, params=None):
        self.sql = sql

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=False):
        assert dictionary is True
        return self._cursor

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, rows=None, error=None):
        self.cursor = FakeCursor(rows or [])
        self.connection = FakeConnection(self.cursor)
        self._error = error

    def connect(self):
        if self._error is not None:
            raise self._error
        return self.connection


def test_lists_active_employees_with_department():
    factory = FakeFactory(
        rows=[
            {"employee_id": 7, "full_name": "Ana Torres", "document_id": " 12345678 ", "dept_name": "RRHH"},
            {"employee_id": 8, "full_name": None, "document_id": None, "dept_name": None},
        ]
    )

    entries = MySQLRosterRepository(factory).list_active()

    assert entries[0].employee_id == "7"
    assert entries[0].document_id == "12345678"
    assert entries[0].department == "RRHH"
    assert (entries[1].full_name, entries[1].document_id, entries[1].department) == ("", "", "")
    assert "is_active = 1" in factory.cursor.sql
    assert factory.cursor.closed and factory.connection.closed


def test_connector_errors_become_roster_unavailable():
    factory = FakeFactory(error=mysql.connector.Error("Can't connect to MySQL server"))

    with pytest.raises(RosterUnavailableError, match="could not reach employee directory"):
        MySQLRosterRepository(factory).list_active()


def test_db_config_from_settings_mapping():
    config = DBConfig.from_mapping({"host": "db", "port": "3307", "user": "hr", "password": "x", "database": "rrhh"})

    assert config.port == 3307
    assert config.connect_timeout == 10
    assert config.describe() == "hr@db:3307/rrhh"
