"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

HEADER_SCAN_ROWS = 10
PERIOD_SCAN_ROWS = 5
MIN_IDENTIFIER_LENGTH = 5

STATISTICS_SHEET_TOKENS = ("estad", "page 2")

DEFAULT_TARDY_MINUTE_RATE = Decimal("0.50")
DEFAULT_ABSENCE_DAY_RATE = Decimal("100")
DEFAULT_EARLY_LEAVE_MINUTE_RATE = Decimal("0.50")
DEFAULT_TOLERANCE_MINUTES = 10
DEFAULT_MAX_DEDUCTION_PERCENT = Decimal("10")

DEFAULT_CURRENCY_SYMBOL = "S/."
DEFAULT_ORGANIZATION_NAME = "Empresa"
DEFAULT_REPORT_TITLE = "Reporte de Asistencia"

DETAIL_NAME_WIDTH = 20
DEDUCTION_NAME_WIDTH = 25
DEPARTMENT_WIDTH = 10

ALLOWED_UPLOAD_EXTENSIONS = (".xls", ".xlsx")
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
