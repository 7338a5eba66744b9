"""Checks-and-counters aggregation: blind spots, major threats and defense."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from ..config import AnalysisSettings
from ..models import (
    BlindSpot,
    MemberScore,
    PokemonUsage,
    ThreatAssessment,
    WeaknessReport,
    normalize_name,
)


@dataclass(slots=True)
class ThreatTally:
    """Team members one opposing Pokemon checks, with the recorded scores."""

    members: Dict[str, float] = field(default_factory=dict)
    scores: List[float] = field(default_factory=list)

    def record(self, member: str, score: float) -> None:
        self.members[member] = max(score, self.members.get(member, score))
        self.scores.append(score)

    @property
    def avg_score(self) -> float:
        return sum(self.scores) / len(self.scores) if self.scores else 0.0


def collect_threats(
    team: Sequence[str], usage: Mapping[str, PokemonUsage]
) -> Dict[str, ThreatTally]:
    """Map every counter of every team member to the members it checks."""

    threats: Dict[str, ThreatTally] = {}
    for member in team:
        data = usage.get(member)
        if data is None:
            continue
        for counter in data.checks_and_counters:
            tally = threats.setdefault(normalize_name(counter.name), ThreatTally())
            tally.record(member, counter.score)
    return threats


class ThreatAnalyzer:
    """Turns per-Pokemon counter lists into a team-wide weakness report."""

    def __init__(self, *, settings: Optional[AnalysisSettings] = None) -> None:
        self.settings = settings or AnalysisSettings()

    def analyze(
        self, team: Sequence[str], usage: Mapping[str, PokemonUsage]
    ) -> WeaknessReport:
        members = [normalize_name(name) for name in team]
        threats = collect_threats(members, usage)
        blind_spots = self._blind_spots(threats, len(members))
        assessments = self._major_threats(threats, members, usage)

        team_size = max(1, len(members))
        defensive_score = max(
            0.0,
            100.0
            - (len(threats) / team_size) * self.settings.threats_per_member_penalty
            - len(blind_spots) * self.settings.blind_spot_penalty,
        )
        suggestions = self._suggestions(blind_spots, assessments, usage)
        return WeaknessReport(
            blind_spots=blind_spots,
            defensive_score=defensive_score,
            major_threats=assessments[: self.settings.major_threat_limit],
            suggestions=suggestions,
        )

    def find_blind_spots(
        self, team: Sequence[str], usage: Mapping[str, PokemonUsage]
    ) -> List[BlindSpot]:
        members = [normalize_name(name) for name in team]
        return self._blind_spots(collect_threats(members, usage), len(members))

    def blind_spot_threshold(self, team_size: int) -> int:
        return max(
            self.settings.blind_spot_minimum,
            math.ceil(team_size * self.settings.blind_spot_fraction),
        )

    def _blind_spots(self, threats: Mapping[str, ThreatTally], team_size: int) -> List[BlindSpot]:
        threshold = self.blind_spot_threshold(team_size)
        spots = [
            BlindSpot(pokemon=name, threatens=list(tally.members), avg_score=tally.avg_score)
            for name, tally in threats.items()
            if len(tally.members) >= threshold
        ]
        spots.sort(key=lambda spot: (len(spot.threatens), spot.avg_score), reverse=True)
        return spots

    def _major_threats(
        self,
        threats: Mapping[str, ThreatTally],
        team: Sequence[str],
        usage: Mapping[str, PokemonUsage],
    ) -> List[ThreatAssessment]:
        assessments: List[ThreatAssessment] = []
        for name, tally in threats.items():
            threat_data = usage.get(name)
            if threat_data is None:
                usage_factor = self.settings.unknown_usage_factor
            else:
                usage_factor = min(1.0, threat_data.raw_count / self.settings.usage_factor_divisor)
            score = (tally.avg_score * 10 + len(tally.members) * 20) * usage_factor
            assessments.append(
                ThreatAssessment(
                    pokemon=name,
                    threat_score=score,
                    threatens=[MemberScore(name=m, score=s) for m, s in tally.members.items()],
                    threatened_by=checked_by_team(threat_data, team, usage),
                )
            )
        assessments.sort(key=lambda assessment: assessment.threat_score, reverse=True)
        return assessments

    def _suggestions(
        self,
        blind_spots: List[BlindSpot],
        assessments: List[ThreatAssessment],
        usage: Mapping[str, PokemonUsage],
    ) -> List[str]:
        suggestions: List[str] = []
        if blind_spots:
            top = blind_spots[0]
            suggestions.append(
                f"Critical blind spot: {top.pokemon} threatens {len(top.threatens)} team members"
            )
            top_data = usage.get(top.pokemon)
            if top_data is not None and top_data.checks_and_counters:
                limit = self.settings.suggested_counter_limit
                names = [counter.name for counter in top_data.checks_and_counters[:limit]]
                suggestions.append(f"Consider adding: {', '.join(names)} to check {top.pokemon}")

        if len(assessments) > self.settings.major_threat_warning:
            suggestions.append(
                f"Team faces {len(assessments)} significant threats - consider defensive backbone"
            )

        unanswered = [a.pokemon for a in assessments if not a.threatened_by]
        if unanswered:
            suggestions.append(f"No answers for: {', '.join(unanswered[:3])}")
        return suggestions


def checked_by_team(
    threat_data: Optional[PokemonUsage],
    team: Sequence[str],
    usage: Mapping[str, PokemonUsage],
) -> List[MemberScore]:
    """Team members listed in the threat's own checks-and-counters section.

    Members without a usage profile never count as an answer.
    """

    if threat_data is None:
        return []
    found: Dict[str, float] = {}
    for member in team:
        if member in found or usage.get(member) is None:
            continue
        counter = next((c for c in threat_data.checks_and_counters if c.name == member), None)
        if counter is not None:
            found[member] = counter.score
    checkers = [MemberScore(name=name, score=score) for name, score in found.items()]
    checkers.sort(key=lambda checker: checker.score, reverse=True)
    return checkers


def threat_score(
    pokemon: str, team: Sequence[str], usage: Mapping[str, PokemonUsage]
) -> float:
    """Rate one opposing Pokemon against a team on a 0-100 scale."""

    target = normalize_name(pokemon)
    members = [normalize_name(name) for name in team]
    scores: List[float] = []
    for member in members:
        data = usage.get(member)
        if data is None:
            continue
        match = next((c for c in data.checks_and_counters if c.name == target), None)
        if match is not None:
            scores.append(match.score)
    if not scores:
        return 0.0
    average = sum(scores) / len(scores)
    return min(100.0, average * 5 + len(scores) / len(members) * 50)
