"""Runtime configuration for the usage repository and analysis heuristics."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import ParseOptions

# Load default .env first, then overlay .env.local so user-specific values win.
load_dotenv()
load_dotenv(".env.local", override=True)

DEFAULT_FORMAT = "gen2ou-1760"


def default_data_dir() -> Path:
    configured = os.getenv("POKE_USAGE_DATA_DIR")
    return Path(configured) if configured else Path.cwd() / "data"


def default_format() -> str:
    return os.getenv("POKE_USAGE_FORMAT") or DEFAULT_FORMAT


@dataclass(slots=True)
class RepositoryConfig:
    """Where usage files live and which format queries use by default."""

    data_dir: Path = field(default_factory=default_data_dir)
    active_format: str = field(default_factory=default_format)
    parse_options: ParseOptions = field(default_factory=ParseOptions)

    def format_path(self, format_id: str) -> Path:
        return Path(self.data_dir) / f"{format_id}.txt"


@dataclass(slots=True)
class AnalysisSettings:
    """Tunable constants behind every team score."""

    # Synergy
    strong_pair_threshold: float = 30.0
    weak_pair_threshold: float = 15.0
    synergy_scale: float = 2.0
    synergy_suggestion_limit: int = 10

    # Threats
    blind_spot_fraction: float = 0.33
    blind_spot_minimum: int = 2
    usage_factor_divisor: float = 5000.0
    unknown_usage_factor: float = 0.5
    major_threat_limit: int = 10
    major_threat_warning: int = 5
    threats_per_member_penalty: float = 5.0
    blind_spot_penalty: float = 10.0
    suggested_counter_limit: int = 3

    # Coverage and redundancy
    top_move_count: int = 4
    catch_all_move: str = "other"
    coverage_suggestion_min_usage: float = 5.0
    coverage_suggestion_limit: int = 5
    redundant_type_members: int = 2
    duplicate_move_penalty: float = 15.0
    excessive_coverage_penalty: float = 10.0

    # Aggregate report
    synergy_weight: float = 0.25
    defense_weight: float = 0.30
    coverage_weight: float = 0.25
    redundancy_weight: float = 0.10
    meta_weight: float = 0.10
    recommendation_limit: int = 8


def build_repository_config(
    *,
    data_dir: str | Path | None = None,
    active_format: Optional[str] = None,
    parse_options: Optional[ParseOptions] = None,
) -> RepositoryConfig:
    config = RepositoryConfig()
    if data_dir is not None:
        config.data_dir = Path(data_dir)
    if active_format:
        config.active_format = active_format
    if parse_options is not None:
        config.parse_options = parse_options
    return config
