from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import RosterUnavailableError
from ..roster.model import EmployeeRosterEntry, index_roster
from ..roster.reconciler import reconcile
from ..roster.repository import RosterRepository
from ..workbook.reader import read_workbook
from ..workbook.selector import DEFAULT_SHEET_STRATEGIES, SheetStrategy, select_data_sheet
from .model import ParsedReport
from .period import extract_period
from .row_parser import RowParser
from .schema import SchemaDetector

logger = logging.getLogger(__name__)


class BiometricImportService:
    """Turn one time-clock export into a reconciled ParsedReport.

    Stateless between calls: everything an import needs (sheet, schema, roster)
    is resolved inside ``import_workbook``, so concurrent imports do not interact.
    """

    def __init__(
        self,
        roster: RosterRepository,
        *,
        schema_detector: Optional[SchemaDetector] = None,
        sheet_strategies: Sequence[SheetStrategy] = DEFAULT_SHEET_STRATEGIES,
    ):
        self._roster = roster
        self._detector = schema_detector or SchemaDetector()
        self._sheet_strategies = tuple(sheet_strategies)

    def import_workbook(self, payload: bytes, *, today: Optional[date] = None) -> ParsedReport:
        sheets = read_workbook(payload)
        sheet = select_data_sheet(sheets, self._sheet_strategies)
        logger.info("Using sheet %r (%s rows) out of %s", sheet.name, len(sheet.rows), len(sheets))

        mapping = self._detector.detect(sheet.rows)
        period = extract_period(sheet.rows, today=today)
        records, issues = RowParser(mapping).parse(sheet.rows)

        roster = self._fetch_roster()
        records = reconcile(records, index_roster(roster))

        report = ParsedReport.build(
            period=period,
            records=records,
            sheet_name=sheet.name,
            schema_strategy=mapping.strategy,
            cell_issues=issues,
        )
        logger.info(
            "Import parsed: period=%s..%s total=%s matched=%s unmatched=%s cell_issues=%s",
            period.start,
            period.end,
            report.total_employees,
            report.matched_employees,
            report.unmatched_employees,
            len(issues),
        )
        return report

    def _fetch_roster(self) -> Sequence[EmployeeRosterEntry]:
        try:
            return self._roster.list_active()
        except RosterUnavailableError:
            logger.exception("Roster fetch failed")
            raise
        except Exception as exc:
            logger.exception("Roster fetch failed")
            raise RosterUnavailableError("could not reach employee directory") from exc
