"""Utility functions for workhours."""

from workhours.utils.date_parser import parse_date, parse_time
from workhours.utils.number_parser import parse_number, parse_duration
from workhours.utils.company_resolver import resolve_company

__all__ = ["parse_date", "parse_time", "parse_number", "parse_duration", "resolve_company"]
