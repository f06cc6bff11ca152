import pytest

from conftest import UNIQUE_4X4, column_regions
from starlogic import action_handlers as actions
from starlogic import puzzle_handler as pz
from starlogic import validator
from starlogic.constants import CellState, PUZZLE_DEFINITIONS
from starlogic.puzzle_solver import is_valid_solution
from starlogic.region_generator import is_valid_partition, region_cells
from starlogic.z3_solver import Z3StarBattleSolver


def test_new_five_by_five_puzzle_end_to_end(seeded):
    puzzle = pz.new_puzzle(5)
    assert puzzle is not None

    cells = region_cells(puzzle.regions)
    assert len(cells) == 5
    assert all(len(members) == 5 for members in cells.values())
    assert is_valid_partition(puzzle.regions, 5)

    solution = puzzle.solution_grid
    assert sum(map(sum, solution)) == 5
    assert is_valid_solution(puzzle.regions, solution)

    actions.reveal_solution(puzzle)
    assert validator.is_solved(puzzle)


@pytest.mark.parametrize("size", [5, 6, 8])
def test_assembled_puzzles_start_empty_and_active(seeded, size):
    puzzle = pz.assemble_puzzle(size, 'Hard')
    assert puzzle is not None
    assert puzzle.grid_size == size and puzzle.region_count == size
    assert puzzle.stars_per_area == 1
    assert puzzle.difficulty == 'Hard'
    assert puzzle.is_active and puzzle.hints_used == 0
    assert all(cell == CellState.EMPTY for row in puzzle.user_grid for cell in row)
    assert is_valid_solution(puzzle.regions, puzzle.solution_grid)


def test_hints_on_a_fresh_puzzle_finish_it(seeded):
    puzzle = pz.new_puzzle(6)
    placed = []
    while (hint := actions.request_hint(puzzle)) is not None:
        placed.append(hint)
    assert len(placed) == 6
    assert validator.is_solved(puzzle)
    assert actions.request_hint(puzzle) is None


def test_uniqueness_gate_skips_partitions_with_several_solutions(monkeypatch):
    # Columns as regions admit two 4x4 placements; UNIQUE_4X4 admits one.
    partitions = iter([column_regions(4), UNIQUE_4X4])
    monkeypatch.setattr(pz, "generate_regions", lambda size, count: next(partitions))

    puzzle = pz.assemble_puzzle(4, require_unique=True, max_attempts=2)
    assert puzzle is not None
    assert puzzle.regions == UNIQUE_4X4
    assert [row.index(1) for row in puzzle.solution_grid] == [1, 3, 0, 2]
    assert Z3StarBattleSolver(puzzle.regions).count_solutions(limit=5) == 1


def test_uniqueness_gate_gives_up_on_ambiguous_partitions(monkeypatch):
    monkeypatch.setattr(pz, "generate_regions", lambda size, count: column_regions(4))
    assert pz.assemble_puzzle(4, max_attempts=1) is not None
    assert pz.assemble_puzzle(4, require_unique=True, max_attempts=3) is None


def test_region_failures_use_up_the_attempt_budget(monkeypatch):
    calls = []

    def failing_generator(size, count):
        calls.append(size)
        return None

    monkeypatch.setattr(pz, "generate_regions", failing_generator)
    assert pz.assemble_puzzle(5, max_attempts=7) is None
    assert len(calls) == 7


def test_unsolvable_partitions_are_retried(monkeypatch):
    unsolvable = [[c for c in range(3)] for _ in range(3)]
    monkeypatch.setattr(pz, "generate_regions", lambda size, count: unsolvable)
    assert pz.assemble_puzzle(3, max_attempts=4) is None


def test_unsupported_requests_are_rejected():
    with pytest.raises(ValueError):
        pz.new_puzzle(7)
    with pytest.raises(ValueError):
        pz.new_puzzle(5, 'Impossible')
    with pytest.raises(ValueError):
        pz.new_puzzle_from_definition(len(PUZZLE_DEFINITIONS))


def test_definitions_cover_every_size_and_difficulty(seeded):
    assert {(d['dim'], d['difficulty']) for d in PUZZLE_DEFINITIONS} == {
        (dim, difficulty) for dim in (5, 6, 8) for difficulty in ('Easy', 'Medium', 'Hard')
    }
    puzzle = pz.new_puzzle_from_definition(0)
    assert puzzle.grid_size == PUZZLE_DEFINITIONS[0]['dim']


def test_terminal_grid_shows_regions_and_stars():
    regions = [[0, 1], [1, 1]]
    text = pz.display_terminal_grid(regions, "Tiny", content_grid=[[1, 0], [0, 0]])
    lines = text.splitlines()
    assert lines[0] == "--- Tiny ---"
    assert lines[1].split() == ["*", "1"]
    assert lines[2].split() == ["1", "1"]
    assert pz.display_terminal_grid([], "Empty") == ""
