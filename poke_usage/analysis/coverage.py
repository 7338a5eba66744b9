"""Offensive type coverage and move redundancy for a team."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Set

from ..config import AnalysisSettings
from ..data.type_chart import ALL_TYPES, attackers_for, move_type, strong_against
from ..models import (
    CoverageReport,
    CoverageSuggestion,
    ExcessiveCoverage,
    PokemonUsage,
    RedundancyReport,
    TypeRedundancy,
    normalize_name,
)


class CoverageAnalyzer:
    """Works out which defending types a team's common moves hit hard."""

    def __init__(self, *, settings: Optional[AnalysisSettings] = None) -> None:
        self.settings = settings or AnalysisSettings()

    def top_moves(self, data: PokemonUsage) -> List[str]:
        """Most used moves, minus the catch-all bucket."""

        ranked = sorted(data.moves.items(), key=lambda item: item[1], reverse=True)
        top = ranked[: self.settings.top_move_count]
        return [move for move, _ in top if move != self.settings.catch_all_move]

    def movesets(
        self, team: Sequence[str], usage: Mapping[str, PokemonUsage]
    ) -> Dict[str, List[str]]:
        """Top moves per known member; a member listed twice counts once."""

        sets: Dict[str, List[str]] = {}
        for name in team:
            member = normalize_name(name)
            data = usage.get(member)
            if data is not None:
                sets[member] = self.top_moves(data)
        return sets

    def analyze(
        self, team: Sequence[str], usage: Mapping[str, PokemonUsage]
    ) -> CoverageReport:
        members = [normalize_name(name) for name in team]
        sets = self.movesets(members, usage)
        coverage = {defending: 0 for defending in ALL_TYPES}
        for moves in sets.values():
            for move in moves:
                attack = move_type(move)
                if attack is None:
                    continue
                for covered in strong_against(attack):
                    coverage[covered] += 1

        gaps = [defending for defending, count in coverage.items() if count == 0]
        covered_count = sum(1 for count in coverage.values() if count > 0)
        redundancies = [
            TypeRedundancy(type=attack, pokemon=holders)
            for attack, holders in self._type_holders(sets).items()
            if len(holders) > self.settings.redundant_type_members
        ]
        return CoverageReport(
            coverage_by_type=coverage,
            gaps=gaps,
            redundancies=redundancies,
            coverage_score=covered_count / len(ALL_TYPES) * 100,
            suggestions=self._suggestions(gaps, sets, members, usage),
        )

    def check_redundancy(
        self, team: Sequence[str], usage: Mapping[str, PokemonUsage]
    ) -> RedundancyReport:
        sets = self.movesets(team, usage)
        users: Dict[str, List[str]] = {}
        for member, moves in sets.items():
            for move in moves:
                users.setdefault(move, []).append(member)
        duplicates = {move: holders for move, holders in users.items() if len(holders) > 1}

        excessive = [
            ExcessiveCoverage(type=attack, count=len(holders), pokemon=holders)
            for attack, holders in self._type_holders(sets).items()
            if len(holders) > self.settings.redundant_type_members
        ]
        extra_copies = sum(len(holders) - 1 for holders in duplicates.values())
        score = min(
            100.0,
            extra_copies * self.settings.duplicate_move_penalty
            + len(excessive) * self.settings.excessive_coverage_penalty,
        )
        return RedundancyReport(
            duplicate_moves=duplicates,
            excessive_coverage=excessive,
            redundancy_score=score,
        )

    @staticmethod
    def _type_holders(sets: Mapping[str, List[str]]) -> Dict[str, List[str]]:
        holders: Dict[str, List[str]] = {}
        for member, moves in sets.items():
            for move in moves:
                attack = move_type(move)
                if attack is None:
                    continue
                members = holders.setdefault(attack, [])
                if member not in members:
                    members.append(member)
        return holders

    def _suggestions(
        self,
        gaps: List[str],
        sets: Mapping[str, List[str]],
        team: Sequence[str],
        usage: Mapping[str, PokemonUsage],
    ) -> List[CoverageSuggestion]:
        if not gaps:
            return []
        useful: Set[str] = {attack for gap in gaps for attack in attackers_for(gap)}
        limit = self.settings.coverage_suggestion_limit
        suggestions: List[CoverageSuggestion] = []
        seen: Set[str] = set()
        for member in team:
            data = usage.get(member)
            if data is None or member in seen:
                continue
            seen.add(member)
            current = set(sets.get(member, []))
            for move, percentage in data.moves.items():
                if move in current or move == self.settings.catch_all_move:
                    continue
                if percentage < self.settings.coverage_suggestion_min_usage:
                    continue
                attack = move_type(move)
                if attack is None or attack not in useful:
                    continue
                covers = [gap for gap in gaps if gap in strong_against(attack)]
                suggestions.append(
                    CoverageSuggestion(
                        pokemon=member,
                        move=move,
                        covers=covers,
                        reason=f"Covers {', '.join(covers)} ({percentage:.1f}% usage)",
                    )
                )
                if len(suggestions) >= limit:
                    return suggestions
        return suggestions
