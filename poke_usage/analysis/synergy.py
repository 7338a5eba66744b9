"""Teammate co-occurrence scoring for a team."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from ..config import AnalysisSettings
from ..models import (
    PokemonUsage,
    SynergyPair,
    TeammateSuggestion,
    TeamSynergyAnalysis,
    normalize_name,
)


class SynergyAnalyzer:
    """Scores how often team members are seen together on the ladder."""

    def __init__(self, *, settings: Optional[AnalysisSettings] = None) -> None:
        self.settings = settings or AnalysisSettings()

    def analyze(
        self, team: Sequence[str], usage: Mapping[str, PokemonUsage]
    ) -> TeamSynergyAnalysis:
        members = [normalize_name(name) for name in team]
        strong: List[SynergyPair] = []
        weak: List[SynergyPair] = []
        scores: List[float] = []

        for i, first in enumerate(members):
            first_data = usage.get(first)
            if first_data is None:
                continue
            for second in members[i + 1 :]:
                second_data = usage.get(second)
                if second_data is None:
                    continue
                score = pair_score(first_data, second_data)
                scores.append(score)
                pair = SynergyPair(pokemon1=first, pokemon2=second, score=score)
                if score >= self.settings.strong_pair_threshold:
                    strong.append(pair)
                elif score < self.settings.weak_pair_threshold:
                    weak.append(pair)

        strong.sort(key=lambda pair: pair.score, reverse=True)
        weak.sort(key=lambda pair: pair.score)
        mean = sum(scores) / len(scores) if scores else 0.0

        return TeamSynergyAnalysis(
            score=min(100.0, mean * self.settings.synergy_scale),
            strong_pairs=strong,
            weak_pairs=weak,
            suggested_teammates=self.suggest_teammates(
                members, usage, limit=self.settings.synergy_suggestion_limit
            ),
        )

    def suggest_teammates(
        self,
        team: Sequence[str],
        usage: Mapping[str, PokemonUsage],
        limit: int = 5,
    ) -> List[TeammateSuggestion]:
        """Partners most often paired with the team, averaged over its size."""

        members = [normalize_name(name) for name in team]
        if not members:
            return []
        on_team = set(members)
        totals: Dict[str, float] = {}
        for member in members:
            data = usage.get(member)
            if data is None:
                continue
            for teammate, percentage in data.teammates.items():
                if teammate in on_team:
                    continue
                totals[teammate] = totals.get(teammate, 0.0) + percentage

        suggestions = [
            TeammateSuggestion(name=name, score=total / len(members))
            for name, total in totals.items()
        ]
        suggestions.sort(key=lambda suggestion: suggestion.score, reverse=True)
        return suggestions[: max(0, limit)]


def pair_score(first: PokemonUsage, second: PokemonUsage) -> float:
    """Mean of the two one-directional teammate percentages."""

    forward = first.teammates.get(second.key, 0.0)
    backward = second.teammates.get(first.key, 0.0)
    return (forward + backward) / 2
