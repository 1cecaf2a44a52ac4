"""Clinic payroll package.

This package is organized by feature modules (staff, attendance, payroll,
settings) with a thin Flask controller layer and service/repository layers
over a key-value store.

The two calculation entry points are pure functions and can be used without
the web layer:

- ``analyze_day``: classify one shift for schedule-view badges.
- ``aggregate_and_price``: fold a month of attendance into a payroll result.
"""

from .attendance.analyzer import analyze_day
from .payroll.engine import aggregate_and_price

__all__ = ["analyze_day", "aggregate_and_price"]
