"""Parser for Smogon moveset usage statistics (the box-drawn ``.txt`` dumps)."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from ..models import (
    CheckCounter,
    Parsed,
    ParsedFormat,
    ParseOptions,
    ParseResult,
    PokemonUsage,
    Skipped,
    StatSpread,
    normalize_name,
)

logger = logging.getLogger(__name__)

ENTRY_MARKER = "Raw count:"
DIVIDER = "+---"

# Border, name row and divider sit directly above the "Raw count" line.
_HEADER_LINES = 3
_METADATA_WINDOW = slice(3, 8)

_BOXED_TEXT = re.compile(r"\|\s+(.+?)\s+\|")
_RAW_COUNT = re.compile(r"Raw count:\s*(\d+)")
_AVG_WEIGHT = re.compile(r"Avg\.\s*weight:\s*(\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)")
_VIABILITY = re.compile(r"Viability Ceiling:\s*(\d+)")
_PERCENT_ROW = re.compile(r"\|\s+(.+?)\s+([\d.]+)%")
_SPREAD_ROW = re.compile(
    r"\|\s+([^:]+):(\d+)/(\d+)/(\d+)/(\d+)/(\d+)/(\d+)\s+([\d.]+)%"
)
_COUNTER_ROW = re.compile(r"\|\s+(.+?)\s+([\d.]+)\s+\(([\d.]+)±([\d.]+)\)")
_COUNTER_DETAIL = re.compile(
    r"\(([\d.]+)%?\s+KOed\s+/\s+([\d.]+)%?\s+switched\s+out\)"
)

PERCENT_SECTIONS: Dict[str, str] = {
    "abilities": "abilities",
    "items": "items",
    "moves": "moves",
    "tera types": "tera_types",
    "teammates": "teammates",
}
SPREADS_SECTION = "spreads"
COUNTERS_SECTION = "checks and counters"
_METADATA_HEADERS = ("Raw count", "Avg", "Viability")


def parse_usage_file(path: str | Path, options: Optional[ParseOptions] = None) -> ParsedFormat:
    """Read and parse a usage statistics file.

    ``OSError`` from the read is left to the caller.
    """

    text = Path(path).read_text(encoding="utf-8")
    return parse_usage_text(text, options)


def parse_usage_text(text: str, options: Optional[ParseOptions] = None) -> ParsedFormat:
    """Parse a whole usage dump, skipping entries that cannot be read."""

    result = ParsedFormat()
    for entry in split_entries(text):
        outcome = parse_entry(entry, options)
        if isinstance(outcome, Skipped):
            logger.warning("Skipping usage entry: %s", outcome.reason)
            result.skipped.append(outcome)
            continue
        result.profiles[outcome.profile.key] = outcome.profile
    return result


def split_entries(text: str) -> List[str]:
    """Cut a usage dump into one chunk per Pokemon.

    A chunk starts three lines above each ``Raw count:`` line and runs until
    the next one, so a truncated final entry is still returned.
    """

    lines = text.splitlines()
    entries: List[str] = []
    current: List[str] = []
    for index, line in enumerate(lines):
        if ENTRY_MARKER in line:
            if current:
                entries.append("\n".join(current))
            current = lines[max(0, index - _HEADER_LINES) : index + 1]
        elif current:
            current.append(line)
    if current:
        entries.append("\n".join(current))
    return entries


def parse_entry(entry_text: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse one chunk produced by :func:`split_entries`."""

    options = options or ParseOptions()
    try:
        return _parse_entry(entry_text, options)
    except (ValueError, IndexError) as exc:
        return Skipped(reason=f"malformed entry: {exc}", excerpt=_excerpt(entry_text))


def _parse_entry(entry_text: str, options: ParseOptions) -> ParseResult:
    lines = entry_text.splitlines()
    name_match = _BOXED_TEXT.search(lines[1]) if len(lines) > 1 else None
    if not name_match:
        return Skipped(reason="no name header", excerpt=_excerpt(entry_text))

    name = name_match.group(1).strip()
    raw_count, avg_weight, viability = _parse_metadata(lines[_METADATA_WINDOW])
    maps: Dict[str, Dict[str, float]] = {attr: {} for attr in PERCENT_SECTIONS.values()}
    spreads: List[StatSpread] = []
    counters: List[CheckCounter] = []

    for title, rows in _iter_sections(lines):
        section = title.lower()
        if section in PERCENT_SECTIONS:
            minimum = options.min_move_percentage if section == "moves" else 0.0
            _parse_percentage_rows(rows, maps[PERCENT_SECTIONS[section]], minimum)
        elif section == SPREADS_SECTION:
            if options.include_spreads:
                spreads.extend(_parse_spreads(rows))
        elif section == COUNTERS_SECTION:
            if options.include_checks_and_counters:
                counters.extend(_parse_checks_and_counters(rows))
        else:
            logger.debug("Ignoring section %r in entry for %s", title, name)

    profile = PokemonUsage(
        name=name,
        raw_count=raw_count,
        avg_weight=avg_weight,
        viability_ceiling=viability,
        spreads=spreads,
        checks_and_counters=counters,
        **maps,
    )
    return Parsed(profile)


def _parse_metadata(lines: List[str]) -> Tuple[int, float, int]:
    raw_count, avg_weight, viability = 0, 0.0, 0
    for line in lines:
        match = _RAW_COUNT.search(line)
        if match:
            raw_count = int(match.group(1))
        match = _AVG_WEIGHT.search(line)
        if match:
            avg_weight = float(match.group(1))
        match = _VIABILITY.search(line)
        if match:
            viability = int(match.group(1))
    return raw_count, avg_weight, viability


def _iter_sections(lines: List[str]) -> Iterator[Tuple[str, List[str]]]:
    """Yield ``(header, rows)`` for every divider-delimited section."""

    title: Optional[str] = None
    rows: List[str] = []
    index = 1
    while index < len(lines):
        line = lines[index]
        if DIVIDER in line:
            if title and rows:
                yield title, rows
            title, rows = None, []
            if index + 1 < len(lines):
                header = _BOXED_TEXT.search(lines[index + 1])
                if header:
                    candidate = header.group(1).strip()
                    if not any(marker in candidate for marker in _METADATA_HEADERS):
                        title = candidate
                    index += 1
        elif title and line.lstrip().startswith("|"):
            rows.append(line)
        index += 1
    if title and rows:
        yield title, rows


def _parse_percentage_rows(rows: List[str], target: Dict[str, float], minimum: float) -> None:
    for row in rows:
        match = _PERCENT_ROW.search(row)
        if not match:
            continue
        percentage = float(match.group(2))
        if percentage >= minimum:
            target[normalize_name(match.group(1))] = percentage


def _parse_spreads(rows: List[str]) -> List[StatSpread]:
    spreads: List[StatSpread] = []
    for row in rows:
        match = _SPREAD_ROW.search(row)
        if not match:
            continue
        hp, atk, def_, spa, spd, spe = (int(match.group(i)) for i in range(2, 8))
        spreads.append(
            StatSpread(
                nature=match.group(1).strip(),
                hp=hp,
                atk=atk,
                def_=def_,
                spa=spa,
                spd=spd,
                spe=spe,
                percentage=float(match.group(8)),
            )
        )
    return spreads


def _parse_checks_and_counters(rows: List[str]) -> List[CheckCounter]:
    counters: List[CheckCounter] = []
    index = 0
    while index < len(rows):
        match = _COUNTER_ROW.search(rows[index])
        index += 1
        if not match:
            continue
        ko_percent = switch_percent = 0.0
        if index < len(rows):
            detail = _COUNTER_DETAIL.search(rows[index])
            if detail:
                ko_percent = float(detail.group(1))
                switch_percent = float(detail.group(2))
                index += 1
        counters.append(
            CheckCounter(
                name=normalize_name(match.group(1)),
                score=float(match.group(2)),
                matchup_percent=float(match.group(3)),
                confidence_margin=float(match.group(4)),
                ko_percent=ko_percent,
                switch_percent=switch_percent,
            )
        )
    return counters


def _excerpt(entry_text: str, limit: int = 120) -> str:
    return " ".join(entry_text.split())[:limit]
