"""Attendance Ledger package.

This package is organized by feature modules (employees, attendance,
reports, ...) with a thin console layer on top of the service layer and an
in-memory ledger at the bottom.
"""
