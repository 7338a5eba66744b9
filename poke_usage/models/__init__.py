"""Shared dataclasses for usage statistics and team reports."""

from .reports import (
    BlindSpot,
    ComprehensiveReport,
    CoverageReport,
    CoverageSuggestion,
    ExcessiveCoverage,
    MemberScore,
    MetaComparison,
    RedundancyReport,
    SynergyPair,
    TeammateSuggestion,
    TeamSynergyAnalysis,
    ThreatAssessment,
    TypeRedundancy,
    WeaknessReport,
)
from .usage import (
    CheckCounter,
    CounterRef,
    MoveUser,
    ParsedFormat,
    Parsed,
    ParseOptions,
    ParseResult,
    PokemonUsage,
    Skipped,
    StatSpread,
    normalize_name,
)

__all__ = [
    "BlindSpot",
    "CheckCounter",
    "ComprehensiveReport",
    "CounterRef",
    "CoverageReport",
    "CoverageSuggestion",
    "ExcessiveCoverage",
    "MemberScore",
    "MetaComparison",
    "MoveUser",
    "ParsedFormat",
    "Parsed",
    "ParseOptions",
    "ParseResult",
    "PokemonUsage",
    "RedundancyReport",
    "Skipped",
    "StatSpread",
    "SynergyPair",
    "TeammateSuggestion",
    "TeamSynergyAnalysis",
    "ThreatAssessment",
    "TypeRedundancy",
    "WeaknessReport",
    "normalize_name",
]
