"""Salary Slip - per-employee salary slip component calculations."""

__version__ = "0.1.0"
