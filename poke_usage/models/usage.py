"""Dataclasses describing parsed Smogon usage statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

# Label -> percentage containers on a profile.
LABEL_MAPS = ("abilities", "items", "moves", "tera_types", "teammates")


def normalize_name(name: str) -> str:
    """Lookup key used for every name and label in the usage data."""

    return name.strip().lower()


@dataclass(slots=True, frozen=True)
class StatSpread:
    """A nature plus EV distribution and how often it is used."""

    nature: str
    hp: int
    atk: int
    def_: int
    spa: int
    spd: int
    spe: int
    percentage: float


@dataclass(slots=True, frozen=True)
class CheckCounter:
    """A Pokemon that checks or counters the profiled one."""

    name: str
    score: float
    matchup_percent: float
    confidence_margin: float
    ko_percent: float = 0.0
    switch_percent: float = 0.0


@dataclass(slots=True, frozen=True)
class PokemonUsage:
    """Usage profile of a single Pokemon in one format.

    Profiles are shared by every reader of the format cache, so the label
    maps are frozen into read-only mappings and the ordered sections into
    tuples on construction.
    """

    name: str
    raw_count: int = 0
    avg_weight: float = 0.0
    viability_ceiling: int = 0
    abilities: Mapping[str, float] = field(default_factory=dict)
    items: Mapping[str, float] = field(default_factory=dict)
    spreads: Tuple[StatSpread, ...] = ()
    moves: Mapping[str, float] = field(default_factory=dict)
    tera_types: Mapping[str, float] = field(default_factory=dict)
    teammates: Mapping[str, float] = field(default_factory=dict)
    checks_and_counters: Tuple[CheckCounter, ...] = ()

    def __post_init__(self) -> None:
        for attr in LABEL_MAPS:
            object.__setattr__(self, attr, MappingProxyType(dict(getattr(self, attr))))
        object.__setattr__(self, "spreads", tuple(self.spreads))
        object.__setattr__(self, "checks_and_counters", tuple(self.checks_and_counters))

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-ready copy (``asdict`` cannot copy the frozen maps)."""

        payload: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name in LABEL_MAPS:
                value = dict(value)
            elif isinstance(value, tuple):
                value = [asdict(entry) for entry in value]
            payload[item.name] = value
        return payload


@dataclass(slots=True)
class ParseOptions:
    """Knobs accepted by the usage file parser."""

    include_spreads: bool = True
    include_checks_and_counters: bool = True
    min_move_percentage: float = 0.0


@dataclass(slots=True, frozen=True)
class Parsed:
    profile: PokemonUsage


@dataclass(slots=True, frozen=True)
class Skipped:
    """An entry the parser could not turn into a profile."""

    reason: str
    excerpt: str = ""


ParseResult = Union[Parsed, Skipped]


@dataclass(slots=True)
class ParsedFormat:
    """Everything parsed out of one usage file."""

    profiles: Dict[str, PokemonUsage] = field(default_factory=dict)
    skipped: List[Skipped] = field(default_factory=list)

    def get(self, name: str) -> Optional[PokemonUsage]:
        return self.profiles.get(normalize_name(name))


@dataclass(slots=True, frozen=True)
class MoveUser:
    name: str
    percentage: float


@dataclass(slots=True, frozen=True)
class CounterRef:
    name: str
    score: float
