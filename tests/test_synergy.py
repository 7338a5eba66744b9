"""Tests for teammate co-occurrence scoring."""

from __future__ import annotations

import pytest

from poke_usage.analysis import SynergyAnalyzer
from poke_usage.analysis.synergy import pair_score


def test_strong_pair_saturates_team_score(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("Snorlax", teammates={"Zapdos": 72.6, "Cloyster": 50.0}),
        make_profile("Zapdos", teammates={"Snorlax": 71.0, "Raikou": 12.0}),
    )

    analysis = SynergyAnalyzer().analyze(["Snorlax", "Zapdos"], usage)

    assert analysis.score == 100.0
    assert len(analysis.strong_pairs) == 1
    pair = analysis.strong_pairs[0]
    assert (pair.pokemon1, pair.pokemon2) == ("snorlax", "zapdos")
    assert pair.score == pytest.approx(71.8)
    assert analysis.weak_pairs == []


def test_members_that_never_pair_are_weak(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("Exeggutor", teammates={"Snorlax": 56.0}),
        make_profile("Machamp", teammates={"Zapdos": 40.0}),
    )

    analysis = SynergyAnalyzer().analyze(["Exeggutor", "Machamp"], usage)

    assert analysis.score == 0.0
    assert analysis.strong_pairs == []
    assert [(p.pokemon1, p.pokemon2, p.score) for p in analysis.weak_pairs] == [
        ("exeggutor", "machamp", 0.0)
    ]


def test_unknown_members_are_ignored(make_profile, usage_map) -> None:
    usage = usage_map(make_profile("Snorlax", teammates={"Zapdos": 72.6}))

    analysis = SynergyAnalyzer().analyze(["Snorlax", "Missingno"], usage)

    assert analysis.score == 0.0
    assert analysis.strong_pairs == []
    assert analysis.weak_pairs == []


def test_pairs_are_sorted(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("A", teammates={"B": 40.0, "C": 10.0, "D": 2.0}),
        make_profile("B", teammates={"A": 40.0, "C": 60.0, "D": 6.0}),
        make_profile("C", teammates={"A": 10.0, "B": 60.0}),
        make_profile("D", teammates={"A": 2.0, "B": 6.0}),
    )

    analysis = SynergyAnalyzer().analyze(["A", "B", "C", "D"], usage)

    assert [p.score for p in analysis.strong_pairs] == [60.0, 40.0]
    assert [p.score for p in analysis.weak_pairs] == [0.0, 2.0, 6.0, 10.0]


def test_pair_score_is_symmetric(make_profile) -> None:
    first = make_profile("Snorlax", teammates={"Zapdos": 72.6})
    second = make_profile("Zapdos", teammates={"Snorlax": 71.0})

    assert pair_score(first, second) == pair_score(second, first)


def test_suggest_teammates_averages_over_whole_team(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("Snorlax", teammates={"Zapdos": 72.0, "Cloyster": 50.0}),
        make_profile("Zapdos", teammates={"Snorlax": 71.0, "Cloyster": 40.0, "Raikou": 12.0}),
    )

    suggestions = SynergyAnalyzer().suggest_teammates(
        ["Snorlax", "Zapdos", "Missingno"], usage
    )

    assert [s.name for s in suggestions] == ["cloyster", "raikou"]
    assert suggestions[0].score == pytest.approx(30.0)
    assert suggestions[1].score == pytest.approx(4.0)


def test_suggest_teammates_respects_limit_and_empty_team(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("Snorlax", teammates={"A": 5.0, "B": 4.0, "C": 3.0}),
    )
    analyzer = SynergyAnalyzer()

    assert [s.name for s in analyzer.suggest_teammates(["Snorlax"], usage, limit=2)] == ["a", "b"]
    assert analyzer.suggest_teammates([], usage) == []
