"""
Tests for remaining-requirement resolution.
"""

from coursemate.academic.credit_check import (
    build_remaining_report,
    earned_units,
    resolve_remaining_requirements,
)
from coursemate.catalog import DegreeProgram, RequirementCategory


def single(name, courses, units):
    return DegreeProgram(
        name="Test Program",
        categories=(RequirementCategory(name=name, courses=tuple(courses), units=units),),
    )


def test_fully_satisfied_category_is_omitted():
    program = single("Intro", ["CMPUT 174", "CMPUT 175"], 3)
    assert resolve_remaining_requirements(program, ["CMPUT 174"]) == {}


def test_partial_satisfaction_lists_enough_courses():
    program = single("Cat", ["A", "B", "C"], 9)
    assert resolve_remaining_requirements(program, ["A"]) == {"Cat: 6 units": ["B", "C"]}


def test_no_completions_stops_once_units_covered():
    program = single("Cat", ["A", "B"], 3)
    assert resolve_remaining_requirements(program, []) == {"Cat: 3 units": ["A"]}


def test_completed_courses_do_not_use_budget():
    program = single("Cat", ["A", "B", "C", "D"], 9)
    # A and C done: 3 units left, B is the first not-yet-completed course
    assert resolve_remaining_requirements(program, ["C", "A"]) == {"Cat: 3 units": ["B"]}


def test_units_not_multiple_of_three_round_up_in_courses():
    program = single("Cat", ["A", "B", "C"], 4)
    assert resolve_remaining_requirements(program, []) == {"Cat: 4 units": ["A", "B"]}


def test_empty_course_list_keeps_full_units():
    program = single("Free Electives", [], 6)
    assert resolve_remaining_requirements(program, ["A"]) == {"Free Electives: 6 units": []}


def test_zero_unit_category_is_satisfied():
    program = single("Optional", ["A"], 0)
    assert resolve_remaining_requirements(program, []) == {}


def test_unknown_program_yields_nothing():
    assert resolve_remaining_requirements(None, ["CMPUT 174"]) == {}


def test_course_counts_in_every_category_listing_it():
    program = DegreeProgram(
        name="Overlap",
        categories=(
            RequirementCategory(name="First", courses=("A", "B"), units=3),
            RequirementCategory(name="Second", courses=("A", "C"), units=6),
        ),
    )
    assert resolve_remaining_requirements(program, ["A"]) == {"Second: 3 units": ["C"]}


def test_result_follows_catalog_order(program):
    remaining = resolve_remaining_requirements(program, ["CMPUT 174", "CMPUT 201"])
    assert list(remaining) == ["Core Computing: 6 units", "Statistics: 3 units"]
    assert remaining["Core Computing: 6 units"] == ["CMPUT 204", "CMPUT 229"]
    assert remaining["Statistics: 3 units"] == ["STAT 151"]


def test_duplicate_completed_entries_count_once(program):
    category = program.categories[1]
    assert earned_units(category, ["CMPUT 201", "CMPUT 201"]) == 3


def test_report_lists_categories_and_courses():
    report = build_remaining_report({"Cat: 6 units": ["B", "C"], "Empty: 3 units": []}, "BSc")
    assert "Remaining Major Requirements (BSc)" in report
    assert "  Cat: 6 units" in report
    assert "    - B" in report
    assert "(no eligible courses listed)" in report
    assert report.endswith("Status: 2 categories outstanding")


def test_report_when_everything_is_done():
    assert build_remaining_report({}).endswith("Status: All major requirements satisfied")
