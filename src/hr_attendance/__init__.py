"""HR attendance import package.

Organized by feature modules (workbook, biometric, roster, payroll, reports)
with a thin Flask controller layer over plain service/strategy layers.
"""
