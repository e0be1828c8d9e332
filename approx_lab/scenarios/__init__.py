"""
Suite definitions for approximation benchmarking.
"""

from .definitions import (
    ALL_SUITES,
    SuiteDefinition,
    get_suite,
    list_suites,
)

__all__ = [
    "ALL_SUITES",
    "SuiteDefinition",
    "get_suite",
    "list_suites",
]
