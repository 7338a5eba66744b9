"""Tests for type coverage and move redundancy."""

from __future__ import annotations

import pytest

from poke_usage.analysis import CoverageAnalyzer
from poke_usage.data.type_chart import ALL_TYPES, attackers_for, move_type


@pytest.fixture
def two_member_usage(make_profile, usage_map):
    return usage_map(
        make_profile(
            "A",
            moves={
                "Earthquake": 90.0,
                "Ice Beam": 80.0,
                "Surf": 70.0,
                "Cross Chop": 60.0,
                "Crunch": 20.0,
                "Shadow Ball": 3.0,
            },
        ),
        make_profile(
            "B",
            moves={
                "Fire Blast": 90.0,
                "Thunderbolt": 85.0,
                "Psychic": 80.0,
                "Body Slam": 75.0,
            },
        ),
    )


def test_gaps_follow_type_chart_order(two_member_usage) -> None:
    report = CoverageAnalyzer().analyze(["A", "B"], two_member_usage)

    assert report.gaps == ["Psychic", "Ghost"]
    assert report.coverage_score == pytest.approx(15 / 17 * 100)
    assert list(report.coverage_by_type) == ALL_TYPES
    assert report.coverage_by_type["Rock"] == 3
    assert report.coverage_by_type["Normal"] == 1


def test_suggests_unused_moves_that_fill_gaps(two_member_usage) -> None:
    report = CoverageAnalyzer().analyze(["A", "B"], two_member_usage)

    assert len(report.suggestions) == 1
    suggestion = report.suggestions[0]
    assert (suggestion.pokemon, suggestion.move) == ("a", "crunch")
    assert suggestion.covers == ["Psychic", "Ghost"]
    assert suggestion.reason == "Covers Psychic, Ghost (20.0% usage)"


def test_top_moves_drop_catch_all_after_slicing(make_profile) -> None:
    data = make_profile(
        "Snorlax",
        moves={"Curse": 72.0, "Other": 90.0, "Rest": 70.0, "Body Slam": 68.0, "Earthquake": 55.0},
    )

    assert CoverageAnalyzer().top_moves(data) == ["curse", "rest", "body slam"]


def test_unknown_members_add_nothing(usage_map) -> None:
    report = CoverageAnalyzer().analyze(["Missingno"], usage_map())

    assert report.gaps == ALL_TYPES
    assert report.coverage_score == 0.0
    assert report.redundancies == []
    assert report.suggestions == []


def test_type_redundancy_needs_three_holders(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("A", moves={"Earthquake": 90.0}),
        make_profile("B", moves={"Earthquake": 80.0}),
        make_profile("C", moves={"Earthquake": 70.0}),
        make_profile("D", moves={"Surf": 70.0}),
    )

    report = CoverageAnalyzer().analyze(["A", "B", "C", "D"], usage)

    assert [(r.type, r.pokemon) for r in report.redundancies] == [("Ground", ["a", "b", "c"])]


def test_redundancy_score(make_profile, usage_map) -> None:
    usage = usage_map(
        make_profile("A", moves={"Earthquake": 90.0, "Rest": 50.0}),
        make_profile("B", moves={"Earthquake": 80.0, "Rest": 40.0}),
        make_profile("C", moves={"Earthquake": 70.0}),
    )

    report = CoverageAnalyzer().check_redundancy(["A", "B", "C"], usage)

    assert report.duplicate_moves == {"earthquake": ["a", "b", "c"], "rest": ["a", "b"]}
    assert [(e.type, e.count) for e in report.excessive_coverage] == [("Ground", 3)]
    # (2 + 1) extra copies * 15 + one excessive type * 10
    assert report.redundancy_score == 55.0


def test_redundancy_score_is_capped(make_profile, usage_map) -> None:
    moves = {"Earthquake": 90.0, "Surf": 80.0, "Ice Beam": 70.0, "Rest": 60.0}
    usage = usage_map(*(make_profile(name, moves=moves) for name in "ABCD"))

    report = CoverageAnalyzer().check_redundancy(list("ABCD"), usage)

    assert report.redundancy_score == 100.0


def test_repeated_member_counts_once(two_member_usage) -> None:
    analyzer = CoverageAnalyzer()

    single = analyzer.analyze(["A"], two_member_usage)
    repeated = analyzer.analyze(["A", "a "], two_member_usage)
    redundancy = analyzer.check_redundancy(["A", "A"], two_member_usage)

    assert repeated.coverage_by_type == single.coverage_by_type
    assert repeated.redundancies == []
    assert redundancy.duplicate_moves == {}
    assert redundancy.redundancy_score == 0.0


def test_move_type_lookup() -> None:
    assert move_type("Earthquake") == "Ground"
    assert move_type("ICE BEAM") == "Ice"
    assert move_type("Hidden Power [Ice]") == "Ice"
    assert move_type("hidden power fire") == "Fire"
    assert move_type("Hidden Power [Fairy]") == "Normal"
    assert move_type("Spikes") is None


def test_attackers_for() -> None:
    assert attackers_for("Ghost") == ["Ghost", "Dark"]
    assert attackers_for("Normal") == ["Fighting"]
