"""Smogon usage statistics parsing and team analysis."""

from .analysis import format_report
from .parsers import parse_usage_text
from .repository import FormatUnavailableError, UsageRepository
from .services import UsageService

__all__ = [
    "FormatUnavailableError",
    "UsageRepository",
    "UsageService",
    "format_report",
    "parse_usage_text",
]
