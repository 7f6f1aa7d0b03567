"""Utility modules for datetasks.

This package provides utility functions for time-span parsing and formatting.

Modules:
    time_utils: HH:mm:ss.sss formatting and parsing
"""
from utils.time_utils import INVALID_SPAN_TEXT, format_time_span, parse_time_span

__all__ = ["INVALID_SPAN_TEXT", "format_time_span", "parse_time_span"]
