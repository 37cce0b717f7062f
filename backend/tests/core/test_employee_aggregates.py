"""Tests for employee aggregates — pure search/max/top-N, no IO."""

import ast
from dataclasses import dataclass
from pathlib import Path

from employee_facade.core import employee_aggregates
from employee_facade.core.employee_aggregates import (
    filter_by_name, highest_salary, top_earner_names,
)
from employee_facade.schemas.employee import Employee


def _emp(id: str, name: str | None, salary: int | None = None) -> Employee:
    return Employee(id=id, name=name, salary=salary)


SCENARIO = [_emp("1", "Alpha", 100), _emp("2", "Bravo", 450)]


# -- filter_by_name ------------------------------------------------------------

def test_search_scenario_matches_alpha_only():
    assert [e.id for e in filter_by_name(SCENARIO, "al")] == ["1"]


def test_search_is_case_insensitive_both_ways():
    employees = [_emp("1", "ALINA"), _emp("2", "malcolm"), _emp("3", "Bob")]
    assert [e.id for e in filter_by_name(employees, "aL")] == ["1", "2"]


def test_search_preserves_input_order():
    employees = [_emp("3", "Carla"), _emp("1", "Alan"), _emp("2", "Pal")]
    assert [e.id for e in filter_by_name(employees, "a")] == ["3", "1", "2"]


def test_search_skips_nameless_employees():
    employees = [_emp("1", None), _emp("2", "Ann")]
    assert [e.id for e in filter_by_name(employees, "an")] == ["2"]


def test_blank_needle_matches_nothing():
    assert filter_by_name(SCENARIO, "") == []
    assert filter_by_name(SCENARIO, "   ") == []


def test_search_result_is_subset_defined_by_substring():
    employees = [_emp(str(i), n) for i, n in enumerate(
        ["Anna", "Hannah", "Joan", "Ian", "Bo", None],
    )]
    for needle in ("an", "AN", "h", "o", "zz"):
        expected = [
            e for e in employees
            if e.name is not None and needle.lower() in e.name.lower()
        ]
        assert filter_by_name(employees, needle) == expected


# -- highest_salary ------------------------------------------------------------

def test_highest_salary_scenario():
    assert highest_salary(SCENARIO) == 450


def test_highest_salary_empty_is_zero():
    assert highest_salary([]) == 0


def test_highest_salary_all_absent_is_zero():
    assert highest_salary([_emp("1", "A"), _emp("2", "B")]) == 0


def test_highest_salary_ignores_absent():
    assert highest_salary([_emp("1", "A"), _emp("2", "B", 30), _emp("3", "C", 20)]) == 30


# -- top_earner_names ----------------------------------------------------------

def test_top_ten_of_eleven_drops_lowest():
    employees = [_emp(str(i), f"Emp{i}", i * 100) for i in range(1, 12)]

    names = top_earner_names(employees)

    assert names == [f"Emp{i}" for i in range(11, 1, -1)]


def test_top_earners_smaller_collection_returns_all():
    assert top_earner_names(SCENARIO) == ["Bravo", "Alpha"]


def test_absent_salary_ranks_lowest():
    employees = [_emp("1", "NoPay"), _emp("2", "Low", 1), _emp("3", "High", 99)]
    assert top_earner_names(employees) == ["High", "Low", "NoPay"]


def test_absent_salary_cut_by_limit():
    employees = [_emp("1", "NoPay"), _emp("2", "Low", 1), _emp("3", "High", 99)]
    assert top_earner_names(employees, limit=2) == ["High", "Low"]


def test_ties_keep_input_order():
    employees = [_emp("1", "First", 50), _emp("2", "Second", 50), _emp("3", "Top", 90)]
    assert top_earner_names(employees) == ["Top", "First", "Second"]


def test_nameless_top_earner_is_dropped_not_replaced():
    employees = [_emp(str(i), f"E{i}", i) for i in range(1, 11)]
    employees.append(_emp("x", None, 1000))

    names = top_earner_names(employees)

    assert len(names) == 9
    assert names[0] == "E10"


# -- layering ------------------------------------------------------------------

@dataclass
class _Payee:
    name: str | None
    salary: int | None


def test_aggregates_accept_any_name_salary_record():
    payees = [_Payee("Alpha", 100), _Payee(None, 900), _Payee("Bravo", None)]

    assert filter_by_name(payees, "alp") == [payees[0]]
    assert highest_salary(payees) == 900
    assert top_earner_names(payees) == ["Alpha", "Bravo"]


def test_core_modules_never_import_outer_layers():
    core_dir = Path(employee_aggregates.__file__).parent
    outer = ("employee_facade.schemas", "employee_facade.services",
             "employee_facade.infrastructure", "employee_facade.api")

    for source in core_dir.glob("*.py"):
        tree = ast.parse(source.read_text())
        imported = [
            node.module for node in ast.walk(tree)
            if isinstance(node, ast.ImportFrom) and node.module
        ] + [
            alias.name for node in ast.walk(tree)
            if isinstance(node, ast.Import) for alias in node.names
        ]
        assert not [m for m in imported if m.startswith(outer)], source.name
