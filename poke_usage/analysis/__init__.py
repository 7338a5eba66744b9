"""Team analysis engines built on parsed usage statistics."""

from .counters import ThreatAnalyzer, threat_score
from .coverage import CoverageAnalyzer
from .reports import TeamReportBuilder, compare_to_meta, format_report
from .synergy import SynergyAnalyzer

__all__ = [
    "CoverageAnalyzer",
    "SynergyAnalyzer",
    "TeamReportBuilder",
    "ThreatAnalyzer",
    "compare_to_meta",
    "format_report",
    "threat_score",
]
