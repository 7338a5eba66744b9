"""Static generation-2 type chart and move typing used by coverage analysis."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

# Attacking type -> defending types it hits super-effectively.
TYPE_CHART: Dict[str, Tuple[str, ...]] = {
    "Normal": (),
    "Fire": ("Grass", "Ice", "Bug", "Steel"),
    "Water": ("Fire", "Ground", "Rock"),
    "Electric": ("Water", "Flying"),
    "Grass": ("Water", "Ground", "Rock"),
    "Ice": ("Grass", "Ground", "Flying", "Dragon"),
    "Fighting": ("Normal", "Ice", "Rock", "Dark", "Steel"),
    "Poison": ("Grass",),
    "Ground": ("Fire", "Electric", "Poison", "Rock", "Steel"),
    "Flying": ("Grass", "Fighting", "Bug"),
    "Psychic": ("Fighting", "Poison"),
    "Bug": ("Grass", "Psychic", "Dark"),
    "Rock": ("Fire", "Ice", "Flying", "Bug"),
    "Ghost": ("Psychic", "Ghost"),
    "Dragon": ("Dragon",),
    "Dark": ("Psychic", "Ghost"),
    "Steel": ("Ice", "Rock"),
}

ALL_TYPES: List[str] = list(TYPE_CHART)

# Deliberately small: moves missing here simply add no coverage.
MOVE_TYPES: Dict[str, str] = {
    "earthquake": "Ground",
    "thunderbolt": "Electric",
    "thunder": "Electric",
    "zap cannon": "Electric",
    "ice beam": "Ice",
    "fire blast": "Fire",
    "flamethrower": "Fire",
    "surf": "Water",
    "hydro pump": "Water",
    "psychic": "Psychic",
    "shadow ball": "Ghost",
    "sludge bomb": "Poison",
    "rock slide": "Rock",
    "ancient power": "Rock",
    "ancientpower": "Rock",
    "cross chop": "Fighting",
    "dynamic punch": "Fighting",
    "dynamicpunch": "Fighting",
    "crunch": "Dark",
    "pursuit": "Dark",
    "return": "Normal",
    "body slam": "Normal",
    "double-edge": "Normal",
    "giga drain": "Grass",
    "solar beam": "Grass",
    "solarbeam": "Grass",
    "outrage": "Dragon",
    "dragonbreath": "Dragon",
}

HIDDEN_POWER = "hidden power"
HIDDEN_POWER_DEFAULT = "Normal"
_HIDDEN_POWER_TYPE = re.compile(r"hidden power\s*\[?\s*([a-z]+)\s*\]?", re.IGNORECASE)


def move_type(move_name: str) -> Optional[str]:
    """Resolve a move name to its type, or ``None`` when unknown."""

    move = move_name.strip().lower()
    if move.startswith(HIDDEN_POWER):
        match = _HIDDEN_POWER_TYPE.match(move)
        if match:
            candidate = match.group(1).title()
            if candidate in TYPE_CHART:
                return candidate
        return HIDDEN_POWER_DEFAULT
    return MOVE_TYPES.get(move)


def strong_against(attack_type: str) -> Tuple[str, ...]:
    return TYPE_CHART.get(attack_type, ())


def attackers_for(defending_type: str) -> List[str]:
    """Attacking types that hit ``defending_type`` super-effectively."""

    return [attack for attack, targets in TYPE_CHART.items() if defending_type in targets]
