"""Compilers for deriving calendar views from release records."""

from .break_calculator import BreakCalculator, check_sorted, compute_yearly_breaks
from .calendar_builder import CalendarBuilder, build_calendar, issue_axis
from .compiler import Compiler

__all__ = [
    "BreakCalculator",
    "CalendarBuilder",
    "Compiler",
    "build_calendar",
    "check_sorted",
    "compute_yearly_breaks",
    "issue_axis",
]
