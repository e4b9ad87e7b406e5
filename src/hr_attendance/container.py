from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .biometric.service import BiometricImportService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.policy import DeductionPolicy
from .payroll.service import DeductionService
from .roster.mysql_roster_repository import MySQLRosterRepository
from .roster.repository import RosterRepository


@dataclass(frozen=True)
class Container:
    roster_repo: RosterRepository

    import_service: BiometricImportService
    deduction_service: DeductionService


def build_container(*, db_config: dict, deduction_policy: Optional[Mapping[str, Any]] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    roster_repo = MySQLRosterRepository(conn)
    return build_service_container(roster_repo, deduction_policy=deduction_policy)


def build_service_container(
    roster_repo: RosterRepository,
    *,
    deduction_policy: Optional[Mapping[str, Any]] = None,
) -> Container:
    """Wire services around any roster implementation (MySQL, CSV file, test fake)."""

    import_service = BiometricImportService(roster_repo)
    deduction_service = DeductionService(DeductionPolicy.from_mapping(deduction_policy))

    return Container(
        roster_repo=roster_repo,
        import_service=import_service,
        deduction_service=deduction_service,
    )
