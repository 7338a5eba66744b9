"""Command-line interface for Smogon usage-based team analysis."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from poke_usage.analysis import format_report
from poke_usage.config import build_repository_config, default_format
from poke_usage.models import PokemonUsage
from poke_usage.repository import FormatUnavailableError
from poke_usage.services import UsageService


def _humanize_top(profiles: list[PokemonUsage]) -> str:
    lines = ["Top Pokémon by usage:"]
    for position, profile in enumerate(profiles, start=1):
        lines.append(
            f"  {position:>2}. {profile.name} (raw count {profile.raw_count},"
            f" viability {profile.viability_ceiling})"
        )
    return "\n".join(lines)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze a team against Smogon usage stats")
    parser.add_argument(
        "team",
        nargs="*",
        help="Team member names (quote names containing spaces)",
    )
    parser.add_argument(
        "--format",
        default=default_format(),
        help="Usage format id, i.e. the data file name without .txt (default: %(default)s)",
    )
    parser.add_argument(
        "--data-dir",
        help="Directory holding <format>.txt usage files (default: ./data)",
    )
    parser.add_argument(
        "--top",
        type=int,
        metavar="N",
        help="List the N most used Pokémon instead of analyzing a team",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the report as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.debug)
    log = logging.getLogger("poke_usage.cli")

    if not args.team and args.top is None:
        parser.error("provide team members or --top N")

    config = build_repository_config(data_dir=args.data_dir, active_format=args.format)
    service = UsageService(config=config)
    try:
        service.load_format()
    except FormatUnavailableError as exc:
        raise SystemExit(str(exc)) from exc
    skipped = service.get_diagnostics()
    log.debug("Loaded %s (%d entries skipped)", args.format, len(skipped))

    if args.top is not None:
        profiles = service.get_top_pokemon(args.top)
        if args.json:
            json.dump([p.to_dict() for p in profiles], sys.stdout, indent=2)
            sys.stdout.write("\n")
        else:
            print(_humanize_top(profiles))
        return 0

    missing = [name for name in args.team if service.get_pokemon(name) is None]
    if missing:
        log.warning("No usage data for: %s", ", ".join(missing))

    report = service.generate_team_report(args.team)
    if args.json:
        json.dump(asdict(report), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
