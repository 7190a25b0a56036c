"""WorkSync attendance & payroll policy engine.

This package is organized by feature modules (settings, attendance, payroll,
reports) with a thin Flask controller layer over service/repository layers.
"""
