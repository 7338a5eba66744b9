"""Comprehensive team report combining every analysis engine."""

from __future__ import annotations

import math
from typing import List, Mapping, Optional, Sequence

from ..config import AnalysisSettings
from ..models import (
    ComprehensiveReport,
    CoverageReport,
    MetaComparison,
    PokemonUsage,
    RedundancyReport,
    TeamSynergyAnalysis,
    WeaknessReport,
    normalize_name,
)
from ..repository import sort_by_usage
from .counters import ThreatAnalyzer
from .coverage import CoverageAnalyzer
from .synergy import SynergyAnalyzer


class TeamReportBuilder:
    """Runs all analyses for a team and folds them into one score."""

    def __init__(
        self,
        *,
        settings: Optional[AnalysisSettings] = None,
        synergy: Optional[SynergyAnalyzer] = None,
        threats: Optional[ThreatAnalyzer] = None,
        coverage: Optional[CoverageAnalyzer] = None,
    ) -> None:
        self.settings = settings or AnalysisSettings()
        self.synergy = synergy or SynergyAnalyzer(settings=self.settings)
        self.threats = threats or ThreatAnalyzer(settings=self.settings)
        self.coverage = coverage or CoverageAnalyzer(settings=self.settings)

    def build(self, team: Sequence[str], usage: Mapping[str, PokemonUsage]) -> ComprehensiveReport:
        members = [normalize_name(name) for name in team]
        synergy = self.synergy.analyze(members, usage)
        weaknesses = self.threats.analyze(members, usage)
        coverage = self.coverage.analyze(members, usage)
        redundancy = self.coverage.check_redundancy(members, usage)
        meta = compare_to_meta(members, usage)

        return ComprehensiveReport(
            team=members,
            synergy=synergy,
            weaknesses=weaknesses,
            coverage=coverage,
            meta=meta,
            redundancy=redundancy,
            overall_score=self.overall_score(synergy, weaknesses, coverage, redundancy, meta),
            summary=_summary(members, synergy, weaknesses, coverage, meta),
            recommendations=self._recommendations(synergy, weaknesses, coverage, redundancy),
        )

    def overall_score(
        self,
        synergy: TeamSynergyAnalysis,
        weaknesses: WeaknessReport,
        coverage: CoverageReport,
        redundancy: RedundancyReport,
        meta: MetaComparison,
    ) -> int:
        s = self.settings
        total = (
            synergy.score * s.synergy_weight
            + weaknesses.defensive_score * s.defense_weight
            + coverage.coverage_score * s.coverage_weight
            + max(0.0, 100.0 - redundancy.redundancy_score) * s.redundancy_weight
            + meta.meta_alignment_score * s.meta_weight
        )
        # halves round up
        return max(0, min(100, math.floor(total + 0.5)))

    def _recommendations(
        self,
        synergy: TeamSynergyAnalysis,
        weaknesses: WeaknessReport,
        coverage: CoverageReport,
        redundancy: RedundancyReport,
    ) -> List[str]:
        recommendations: List[str] = []

        if synergy.score < 50 and synergy.suggested_teammates:
            top = synergy.suggested_teammates[0]
            recommendations.append(
                f"Consider adding {top.name} for better synergy ({top.score:.1f}% compatibility)"
            )
        if synergy.weak_pairs:
            weakest = synergy.weak_pairs[0]
            recommendations.append(
                f"Weak synergy between {weakest.pokemon1} and {weakest.pokemon2} "
                f"({weakest.score:.1f}%)"
            )

        recommendations.extend(weaknesses.suggestions[:2])

        if coverage.suggestions:
            top_move = coverage.suggestions[0]
            recommendations.append(
                f"{top_move.pokemon} could run {top_move.move}: {top_move.reason}"
            )
        if coverage.gaps:
            recommendations.append(f"Missing coverage for: {', '.join(coverage.gaps[:3])}")

        if redundancy.redundancy_score > 30 and redundancy.duplicate_moves:
            move, holders = next(iter(redundancy.duplicate_moves.items()))
            recommendations.append(f"Multiple Pokemon running {move}: {', '.join(holders)}")

        return recommendations[: self.settings.recommendation_limit]


def compare_to_meta(team: Sequence[str], usage: Mapping[str, PokemonUsage]) -> MetaComparison:
    """Rank the team's members against everything in the format."""

    ranked = sort_by_usage(usage)
    ranks = {profile.key: position for position, profile in enumerate(ranked, start=1)}
    total = len(ranked)

    found: List[PokemonUsage] = []
    positions: List[int] = []
    top_tier: List[str] = []
    off_meta: List[str] = []
    for member in team:
        data = usage.get(member)
        if data is None:
            continue
        found.append(data)
        rank = ranks[data.key]
        positions.append(rank)
        percentile = (1 - rank / total) * 100
        if percentile >= 90:
            top_tier.append(member)
        elif percentile < 50:
            off_meta.append(member)

    if not found:
        return MetaComparison()

    avg_usage = sum(p.raw_count for p in found) / len(found)
    avg_viability = sum(p.viability_ceiling for p in found) / len(found)
    top_count = ranked[0].raw_count or 1
    usage_score = min(100.0, avg_usage / top_count * 100)
    viability_score = min(100.0, avg_viability / 20)

    return MetaComparison(
        avg_usage_rank=sum(positions) / len(positions),
        avg_viability=avg_viability,
        off_meta_picks=off_meta,
        top_tier_picks=top_tier,
        meta_alignment_score=usage_score * 0.6 + viability_score * 0.4,
    )


def _summary(
    team: Sequence[str],
    synergy: TeamSynergyAnalysis,
    weaknesses: WeaknessReport,
    coverage: CoverageReport,
    meta: MetaComparison,
) -> List[str]:
    summary = [f"Team of {len(team)} Pokemon"]

    if synergy.score >= 70:
        summary.append(f"Strong team synergy ({synergy.score:.0f}/100)")
    elif synergy.score >= 40:
        summary.append(f"Moderate team synergy ({synergy.score:.0f}/100)")
    else:
        summary.append(f"Weak team synergy ({synergy.score:.0f}/100)")

    blind_spots = len(weaknesses.blind_spots)
    if blind_spots:
        summary.append(f"{blind_spots} critical blind spot{'s' if blind_spots > 1 else ''}")
    else:
        summary.append("No major blind spots identified")

    gaps = len(coverage.gaps)
    if gaps == 0:
        summary.append("Complete type coverage")
    elif gaps <= 3:
        summary.append(f"Minor coverage gaps ({gaps} types)")
    else:
        summary.append(f"Significant coverage gaps ({gaps} types)")

    if team and len(meta.top_tier_picks) >= len(team) * 0.5:
        summary.append("Meta-dominant team composition")
    elif team and len(meta.off_meta_picks) >= len(team) * 0.5:
        summary.append("Off-meta team composition")
    else:
        summary.append("Balanced meta alignment")
    return summary


def format_report(report: ComprehensiveReport) -> str:
    """Render a report as a plain-text block for terminals."""

    rule = "=" * 60
    lines: List[str] = [rule, "TEAM ANALYSIS REPORT", rule, "", "TEAM:"]
    lines.extend(f"  • {member}" for member in report.team)
    lines += ["", f"OVERALL SCORE: {report.overall_score}/100", "", "SUMMARY:"]
    lines.extend(f"  • {point}" for point in report.summary)
    lines.append("")

    synergy = report.synergy
    lines.append(f"SYNERGY ANALYSIS ({synergy.score:.0f}/100):")
    if synergy.strong_pairs:
        lines.append("  Strong pairs:")
        for pair in synergy.strong_pairs[:3]:
            lines.append(f"    • {pair.pokemon1} + {pair.pokemon2} ({pair.score:.1f}%)")
    if synergy.suggested_teammates:
        lines.append("  Suggested teammates:")
        for mate in synergy.suggested_teammates[:3]:
            lines.append(f"    • {mate.name} ({mate.score:.1f}% synergy)")
    lines.append("")

    weaknesses = report.weaknesses
    lines.append(f"DEFENSIVE ANALYSIS ({weaknesses.defensive_score:.0f}/100):")
    if weaknesses.blind_spots:
        lines.append("  Blind spots:")
        for spot in weaknesses.blind_spots[:3]:
            lines.append(f"    • {spot.pokemon} threatens: {', '.join(spot.threatens)}")
    if weaknesses.major_threats:
        lines.append("  Major threats:")
        for threat in weaknesses.major_threats[:3]:
            lines.append(f"    • {threat.pokemon} (threat score: {threat.threat_score:.1f})")
    lines.append("")

    coverage = report.coverage
    lines.append(f"COVERAGE ANALYSIS ({coverage.coverage_score:.0f}/100):")
    if coverage.gaps:
        lines.append(f"  Coverage gaps: {', '.join(coverage.gaps)}")
    else:
        lines.append("  Complete type coverage!")
    lines.append("")

    meta = report.meta
    lines += [
        "META ANALYSIS:",
        f"  Average usage rank: #{meta.avg_usage_rank:.0f}",
        f"  Meta alignment: {meta.meta_alignment_score:.0f}/100",
    ]
    if meta.top_tier_picks:
        lines.append(f"  Top tier picks: {', '.join(meta.top_tier_picks)}")
    if meta.off_meta_picks:
        lines.append(f"  Off-meta picks: {', '.join(meta.off_meta_picks)}")
    lines.append("")

    if report.recommendations:
        lines.append("RECOMMENDATIONS:")
        lines.extend(f"  • {rec}" for rec in report.recommendations)
        lines.append("")

    lines.append(rule)
    return "\n".join(lines)
