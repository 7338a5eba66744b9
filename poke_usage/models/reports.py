"""Report dataclasses produced by the team analysis engines.

Reports only carry names and numbers; they never point back into the cached
usage profiles and are rebuilt on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(slots=True)
class SynergyPair:
    pokemon1: str
    pokemon2: str
    score: float


@dataclass(slots=True)
class TeammateSuggestion:
    name: str
    score: float


@dataclass(slots=True)
class TeamSynergyAnalysis:
    """Pairwise teammate correlation for a team."""

    score: float
    strong_pairs: List[SynergyPair] = field(default_factory=list)
    weak_pairs: List[SynergyPair] = field(default_factory=list)
    suggested_teammates: List[TeammateSuggestion] = field(default_factory=list)


@dataclass(slots=True)
class MemberScore:
    name: str
    score: float


@dataclass(slots=True)
class BlindSpot:
    """A single Pokemon that checks a large share of the team."""

    pokemon: str
    threatens: List[str]
    avg_score: float


@dataclass(slots=True)
class ThreatAssessment:
    """How hard one opposing Pokemon pressures the team."""

    pokemon: str
    threat_score: float
    threatens: List[MemberScore] = field(default_factory=list)
    threatened_by: List[MemberScore] = field(default_factory=list)


@dataclass(slots=True)
class WeaknessReport:
    blind_spots: List[BlindSpot] = field(default_factory=list)
    defensive_score: float = 100.0
    major_threats: List[ThreatAssessment] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TypeRedundancy:
    type: str
    pokemon: List[str]


@dataclass(slots=True)
class CoverageSuggestion:
    pokemon: str
    move: str
    covers: List[str]
    reason: str


@dataclass(slots=True)
class CoverageReport:
    coverage_by_type: Dict[str, int] = field(default_factory=dict)
    gaps: List[str] = field(default_factory=list)
    redundancies: List[TypeRedundancy] = field(default_factory=list)
    coverage_score: float = 0.0
    suggestions: List[CoverageSuggestion] = field(default_factory=list)


@dataclass(slots=True)
class ExcessiveCoverage:
    type: str
    count: int
    pokemon: List[str]


@dataclass(slots=True)
class RedundancyReport:
    duplicate_moves: Dict[str, List[str]] = field(default_factory=dict)
    excessive_coverage: List[ExcessiveCoverage] = field(default_factory=list)
    redundancy_score: float = 0.0


@dataclass(slots=True)
class MetaComparison:
    """Where the team sits relative to the format's usage ranking."""

    avg_usage_rank: float = 0.0
    avg_viability: float = 0.0
    off_meta_picks: List[str] = field(default_factory=list)
    top_tier_picks: List[str] = field(default_factory=list)
    meta_alignment_score: float = 0.0


@dataclass(slots=True)
class ComprehensiveReport:
    """Aggregated report returned by ``generate_team_report``."""

    team: List[str]
    synergy: TeamSynergyAnalysis
    weaknesses: WeaknessReport
    coverage: CoverageReport
    meta: MetaComparison
    redundancy: RedundancyReport
    overall_score: int
    summary: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
