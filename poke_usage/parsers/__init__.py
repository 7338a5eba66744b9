"""Parsers for Smogon usage statistics text."""

from .usage_stats import parse_entry, parse_usage_file, parse_usage_text, split_entries

__all__ = [
    "parse_entry",
    "parse_usage_file",
    "parse_usage_text",
    "split_entries",
]
