"""Facade exposing usage lookups and team analyses for one repository."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..analysis import CoverageAnalyzer, SynergyAnalyzer, TeamReportBuilder, ThreatAnalyzer
from ..config import AnalysisSettings, RepositoryConfig
from ..models import (
    BlindSpot,
    ComprehensiveReport,
    CounterRef,
    CoverageReport,
    MoveUser,
    ParseOptions,
    PokemonUsage,
    RedundancyReport,
    Skipped,
    TeammateSuggestion,
    TeamSynergyAnalysis,
    WeaknessReport,
)
from ..repository import UsageRepository


class UsageService:
    """Coordinates the usage repository with the analysis engines.

    Every ``format_id`` argument is optional and falls back to the
    repository's active format.
    """

    def __init__(
        self,
        *,
        repository: Optional[UsageRepository] = None,
        config: Optional[RepositoryConfig] = None,
        settings: Optional[AnalysisSettings] = None,
    ) -> None:
        self.repository = repository or UsageRepository(config=config)
        self.settings = settings or AnalysisSettings()
        self.synergy = SynergyAnalyzer(settings=self.settings)
        self.threats = ThreatAnalyzer(settings=self.settings)
        self.coverage = CoverageAnalyzer(settings=self.settings)
        self.reports = TeamReportBuilder(
            settings=self.settings,
            synergy=self.synergy,
            threats=self.threats,
            coverage=self.coverage,
        )

    # ------------------------------------------------------------------
    # Repository passthroughs
    # ------------------------------------------------------------------
    def load_format(
        self, format_id: Optional[str] = None, options: Optional[ParseOptions] = None
    ) -> None:
        self.repository.load_format(format_id, options)

    def set_active_format(self, format_id: str) -> None:
        self.repository.set_active_format(format_id)

    def get_pokemon(self, name: str, format_id: Optional[str] = None) -> Optional[PokemonUsage]:
        return self.repository.get_pokemon(name, format_id)

    def get_all_pokemon(self, format_id: Optional[str] = None) -> List[PokemonUsage]:
        return self.repository.get_all_pokemon(format_id)

    def get_top_pokemon(self, limit: int = 10, format_id: Optional[str] = None) -> List[PokemonUsage]:
        return self.repository.get_top_pokemon(limit, format_id)

    def find_pokemon_with_move(
        self, move_name: str, min_percentage: float = 10.0, format_id: Optional[str] = None
    ) -> List[MoveUser]:
        return self.repository.find_pokemon_with_move(move_name, min_percentage, format_id)

    def find_counters(
        self, threat_name: str, min_score: float = 1.0, format_id: Optional[str] = None
    ) -> List[CounterRef]:
        return self.repository.find_counters(threat_name, min_score, format_id)

    def clear_cache(self, format_id: Optional[str] = None) -> None:
        self.repository.clear_cache(format_id)

    def get_loaded_formats(self) -> List[str]:
        return self.repository.get_loaded_formats()

    def get_diagnostics(self, format_id: Optional[str] = None) -> List[Skipped]:
        return self.repository.get_diagnostics(format_id)

    # ------------------------------------------------------------------
    # Team analyses
    # ------------------------------------------------------------------
    def calculate_team_synergy(
        self, team: Sequence[str], format_id: Optional[str] = None
    ) -> TeamSynergyAnalysis:
        return self.synergy.analyze(team, self.repository.profiles(format_id))

    def suggest_teammates(
        self, team: Sequence[str], limit: int = 5, format_id: Optional[str] = None
    ) -> List[TeammateSuggestion]:
        return self.synergy.suggest_teammates(team, self.repository.profiles(format_id), limit)

    def analyze_team_weaknesses(
        self, team: Sequence[str], format_id: Optional[str] = None
    ) -> WeaknessReport:
        return self.threats.analyze(team, self.repository.profiles(format_id))

    def find_blind_spots(
        self, team: Sequence[str], format_id: Optional[str] = None
    ) -> List[BlindSpot]:
        return self.threats.find_blind_spots(team, self.repository.profiles(format_id))

    def analyze_coverage(
        self, team: Sequence[str], format_id: Optional[str] = None
    ) -> CoverageReport:
        return self.coverage.analyze(team, self.repository.profiles(format_id))

    def check_move_redundancy(
        self, team: Sequence[str], format_id: Optional[str] = None
    ) -> RedundancyReport:
        return self.coverage.check_redundancy(team, self.repository.profiles(format_id))

    def generate_team_report(
        self, team: Sequence[str], format_id: Optional[str] = None
    ) -> ComprehensiveReport:
        return self.reports.build(team, self.repository.profiles(format_id))
