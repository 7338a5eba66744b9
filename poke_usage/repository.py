"""In-memory cache of parsed usage files, keyed by format id."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .config import RepositoryConfig, build_repository_config
from .models import (
    CounterRef,
    MoveUser,
    ParseOptions,
    PokemonUsage,
    Skipped,
    normalize_name,
)
from .parsers.usage_stats import parse_usage_file

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, PokemonUsage] = MappingProxyType({})


class UsageDataError(RuntimeError):
    """Base error for usage data problems surfaced to callers."""


class FormatUnavailableError(UsageDataError):
    """Raised when a format's usage file is missing or unreadable."""

    def __init__(self, format_id: str, path: Path, reason: str) -> None:
        super().__init__(f"Usage data for {format_id!r} unavailable at {path}: {reason}")
        self.format_id = format_id
        self.path = path


class UsageRepository:
    """Lazily parses usage files and answers lookups against them.

    Each format is parsed at most once until it is evicted with
    :meth:`clear_cache`. There is no locking; callers sharing a repository
    across threads should serialise first loads of the same format.
    """

    def __init__(
        self,
        *,
        config: Optional[RepositoryConfig] = None,
        data_dir: str | Path | None = None,
        active_format: Optional[str] = None,
    ) -> None:
        self.config = config or build_repository_config(
            data_dir=data_dir, active_format=active_format
        )
        self._formats: Dict[str, Dict[str, PokemonUsage]] = {}
        self._diagnostics: Dict[str, List[Skipped]] = {}

    @property
    def active_format(self) -> str:
        return self.config.active_format

    def set_active_format(self, format_id: str) -> None:
        self.config.active_format = format_id

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_format(
        self, format_id: Optional[str] = None, options: Optional[ParseOptions] = None
    ) -> None:
        """Parse and cache ``format_id``; a cached format is left untouched."""

        format_id = format_id or self.active_format
        if format_id in self._formats:
            return

        path = self.config.format_path(format_id)
        try:
            parsed = parse_usage_file(path, options or self.config.parse_options)
        except OSError as exc:
            raise FormatUnavailableError(format_id, path, str(exc)) from exc

        self._formats[format_id] = parsed.profiles
        self._diagnostics[format_id] = parsed.skipped
        logger.info(
            "Loaded %d profiles for %s (%d entries skipped)",
            len(parsed.profiles),
            format_id,
            len(parsed.skipped),
        )

    def is_loaded(self, format_id: Optional[str] = None) -> bool:
        return (format_id or self.active_format) in self._formats

    def clear_cache(self, format_id: Optional[str] = None) -> None:
        if format_id:
            self._formats.pop(format_id, None)
            self._diagnostics.pop(format_id, None)
            logger.debug("Evicted usage data for %s", format_id)
        else:
            self._formats.clear()
            self._diagnostics.clear()
            logger.debug("Evicted all cached usage data")

    def get_loaded_formats(self) -> List[str]:
        return list(self._formats)

    def get_diagnostics(self, format_id: Optional[str] = None) -> List[Skipped]:
        return list(self._diagnostics.get(format_id or self.active_format, []))

    def profiles(self, format_id: Optional[str] = None) -> Mapping[str, PokemonUsage]:
        """Read-only view of a format's profiles, loading it on first use.

        An unavailable format yields an empty mapping, same as a format
        without the requested Pokemon.
        """

        format_id = format_id or self.active_format
        if format_id not in self._formats:
            try:
                self.load_format(format_id)
            except FormatUnavailableError as exc:
                logger.warning("%s", exc)
                return _EMPTY
        return MappingProxyType(self._formats[format_id])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_pokemon(self, name: str, format_id: Optional[str] = None) -> Optional[PokemonUsage]:
        return self.profiles(format_id).get(normalize_name(name))

    def get_all_pokemon(self, format_id: Optional[str] = None) -> List[PokemonUsage]:
        return list(self.profiles(format_id).values())

    def get_top_pokemon(self, limit: int = 10, format_id: Optional[str] = None) -> List[PokemonUsage]:
        ranked = sort_by_usage(self.profiles(format_id))
        return ranked[: max(0, limit)]

    def find_pokemon_with_move(
        self,
        move_name: str,
        min_percentage: float = 10.0,
        format_id: Optional[str] = None,
    ) -> List[MoveUser]:
        move = normalize_name(move_name)
        users: List[MoveUser] = []
        for key, profile in self.profiles(format_id).items():
            percentage = profile.moves.get(move)
            if percentage and percentage >= min_percentage:
                users.append(MoveUser(name=key, percentage=percentage))
        return sorted(users, key=lambda user: user.percentage, reverse=True)

    def find_counters(
        self,
        threat_name: str,
        min_score: float = 1.0,
        format_id: Optional[str] = None,
    ) -> List[CounterRef]:
        threat = self.get_pokemon(threat_name, format_id)
        if threat is None:
            return []
        counters = [
            CounterRef(name=counter.name, score=counter.score)
            for counter in threat.checks_and_counters
            if counter.score >= min_score
        ]
        return sorted(counters, key=lambda counter: counter.score, reverse=True)


def sort_by_usage(usage: Mapping[str, PokemonUsage]) -> List[PokemonUsage]:
    """Profiles by descending raw count; ties keep parse order."""

    return sorted(usage.values(), key=lambda profile: profile.raw_count, reverse=True)
