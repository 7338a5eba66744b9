"""FastMCP server exposing Smogon usage lookups and team analysis tools."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Any, Dict, List, Optional

from fastmcp import FastMCP

from .clients import PokeAPIClient, PokeAPIClientError
from .services import UsageService

app = FastMCP("poke-usage", version="0.1.0")
_service = UsageService()
_pokeapi = PokeAPIClient()


@app.tool()
def get_usage_profile(
    pokemon: Annotated[str, "Pokemon name (e.g., 'Snorlax')"],
    format_id: Annotated[Optional[str], "Usage format id, e.g. 'gen2ou-1760'"] = None,
) -> Dict[str, Any]:
    """Return the parsed usage profile for one Pokemon, or an empty dict."""

    profile = _service.get_pokemon(pokemon, format_id)
    return profile.to_dict() if profile else {}


@app.tool()
def top_pokemon(
    limit: Annotated[int, "How many Pokemon to list"] = 10,
    format_id: Annotated[Optional[str], "Usage format id"] = None,
) -> List[Dict[str, Any]]:
    """List the most used Pokemon in a format."""

    return [
        {"name": p.name, "raw_count": p.raw_count, "viability_ceiling": p.viability_ceiling}
        for p in _service.get_top_pokemon(limit, format_id)
    ]


@app.tool()
def find_counters(
    pokemon: Annotated[str, "Pokemon to find answers for"],
    min_score: Annotated[float, "Minimum checks-and-counters score"] = 1.0,
    format_id: Annotated[Optional[str], "Usage format id"] = None,
) -> List[Dict[str, Any]]:
    """List Pokemon that check or counter the given one."""

    return [asdict(counter) for counter in _service.find_counters(pokemon, min_score, format_id)]


@app.tool()
def analyze_usage_team(
    team: Annotated[List[str], "Team member names"],
    format_id: Annotated[Optional[str], "Usage format id"] = None,
) -> Dict[str, Any]:
    """Run the synergy, threat and coverage analyses and return the report."""

    report = _service.generate_team_report(team, format_id)
    return asdict(report)


@app.tool()
def get_pokemon_types(
    species: Annotated[str, "Species name (e.g., 'Zapdos')"],
) -> str:
    """Get a Pokemon's typing via PokeAPI."""

    try:
        types = _pokeapi.get_pokemon_types(species)
    except PokeAPIClientError as exc:  # pragma: no cover - network failure
        return f"Error fetching {species}: {exc}"
    return f"{species}: {', '.join(types) or 'unknown'}"


def run() -> None:
    """Entry point for `python -m poke_usage.server`."""

    print("[poke-usage] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
