"""Shared builders for usage text and profiles."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest

from poke_usage.models import CheckCounter, PokemonUsage, normalize_name

BORDER = " +----------------------------------------+"


def _row(text: str) -> str:
    return f" | {text:<38} |"


def render_entry(
    name: str,
    *,
    raw_count: int = 1000,
    avg_weight: float = 0.1,
    viability: int = 1900,
    sections: Optional[Dict[str, Iterable[str]]] = None,
) -> str:
    """Render one Pokemon block in the Smogon moveset layout."""

    lines = [
        BORDER,
        _row(name),
        BORDER,
        _row(f"Raw count: {raw_count}"),
        _row(f"Avg. weight: {avg_weight}"),
        _row(f"Viability Ceiling: {viability}"),
    ]
    for header, rows in (sections or {}).items():
        lines.append(BORDER)
        lines.append(_row(header))
        lines.extend(_row(row) for row in rows)
    lines.append(BORDER)
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_entry() -> Callable[..., str]:
    return render_entry


def build_profile(
    name: str,
    *,
    raw_count: int = 1000,
    viability: int = 1900,
    moves: Optional[Dict[str, float]] = None,
    teammates: Optional[Dict[str, float]] = None,
    counters: Optional[List[Tuple[str, float]]] = None,
) -> PokemonUsage:
    return PokemonUsage(
        name=name,
        raw_count=raw_count,
        viability_ceiling=viability,
        moves={normalize_name(k): v for k, v in (moves or {}).items()},
        teammates={normalize_name(k): v for k, v in (teammates or {}).items()},
        checks_and_counters=[
            CheckCounter(
                name=normalize_name(counter),
                score=score,
                matchup_percent=60.0,
                confidence_margin=3.0,
            )
            for counter, score in (counters or [])
        ],
    )


@pytest.fixture
def make_profile() -> Callable[..., PokemonUsage]:
    return build_profile


@pytest.fixture
def usage_map() -> Callable[..., Dict[str, PokemonUsage]]:
    def _build(*profiles: PokemonUsage) -> Dict[str, PokemonUsage]:
        return {profile.key: profile for profile in profiles}

    return _build
