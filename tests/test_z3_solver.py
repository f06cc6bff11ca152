from conftest import UNIQUE_4X4, column_regions
from starlogic.puzzle_solver import is_valid_solution
from starlogic.z3_solver import Z3StarBattleSolver, format_duration


def test_counts_stop_at_the_limit():
    # Five columns as regions admit 14 placements.
    solver = Z3StarBattleSolver(column_regions(5))
    assert solver.count_solutions(limit=2) == 2
    assert solver.count_solutions(limit=100) == 14
    assert not solver.has_unique_solution()


def test_single_solution_is_recognised():
    solver = Z3StarBattleSolver(UNIQUE_4X4)
    assert solver.has_unique_solution()
    assert [row.index(1) for row in solver.find_solutions()[0]] == [1, 3, 0, 2]


def test_unsolvable_partition_has_no_solutions():
    assert Z3StarBattleSolver(column_regions(3)).find_solutions() == []


def test_enumerated_solutions_are_distinct_and_valid():
    regions = column_regions(6)
    solutions = Z3StarBattleSolver(regions).find_solutions(limit=100)
    assert len(solutions) == 90
    assert len({tuple(map(tuple, s)) for s in solutions}) == 90
    assert all(is_valid_solution(regions, s) for s in solutions)


def test_format_duration():
    assert format_duration(0.0125) == "12.50 ms"
    assert format_duration(2.5) == "2.500 s"
    assert format_duration(75) == "1 min 15.00 s"
