"""**********************************************************************************
 * Title: z3_solver.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * An SMT model of the star placement rules built on the Z3 solver. The
 * backtracking solver only ever reports the first placement it finds; this
 * model is used when a puzzle must have exactly one solution, by searching
 * for a second placement after blocking the first one.
 **********************************************************************************"""

# --- IMPORTS ---
import time
import logging
from collections import defaultdict

from z3 import Solver, Bool, PbEq, Implies, And, Not, Or, sat

from starlogic.constants import STARS_PER_AREA, UNIQUENESS_SOLUTION_LIMIT

def format_duration(seconds):
    if seconds >= 60: return f"{int(seconds//60)} min {seconds%60:.2f} s"
    if seconds >= 1: return f"{seconds:.3f} s"
    return f"{seconds*1000:.2f} ms"

# --- CLASS DEFINITION ---
class Z3StarBattleSolver:
    """Solves and counts star placements for a region grid using Z3."""
    def __init__(self, region_grid, stars_per_region=STARS_PER_AREA):
        self.region_grid, self.dim, self.stars_per_region = region_grid, len(region_grid), stars_per_region

    def _build_model(self):
        s = Solver()
        grid_vars = [[Bool(f"c_{r}_{c}") for c in range(self.dim)] for r in range(self.dim)]
        # Rule: N stars per row and column
        for i in range(self.dim):
            s.add(PbEq([(grid_vars[i][c], 1) for c in range(self.dim)], self.stars_per_region))
            s.add(PbEq([(grid_vars[r][i], 1) for r in range(self.dim)], self.stars_per_region))
        # Rule: N stars per region
        regions = defaultdict(list)
        for r in range(self.dim):
            for c in range(self.dim): regions[self.region_grid[r][c]].append(grid_vars[r][c])
        for r_vars in regions.values():
            s.add(PbEq([(var, 1) for var in r_vars], self.stars_per_region))
        # Rule: Stars cannot be adjacent
        for r in range(self.dim):
            for c in range(self.dim):
                neighbors = [Not(grid_vars[nr][nc])
                             for dr in [-1, 0, 1] for dc in [-1, 0, 1]
                             if not (dr == 0 and dc == 0)
                             and 0 <= (nr := r + dr) < self.dim and 0 <= (nc := c + dc) < self.dim]
                s.add(Implies(grid_vars[r][c], And(neighbors)))
        return s, grid_vars

    def find_solutions(self, limit=UNIQUENESS_SOLUTION_LIMIT):
        """
        Finds up to `limit` distinct placements.

        :param int limit: The maximum number of solutions to enumerate.
        :returns: A list of 2D 0/1 grids, at most `limit` long.
        :rtype: list[list[list[int]]]
        """
        s, grid_vars = self._build_model()
        solutions, start_time = [], time.monotonic()
        while len(solutions) < limit and s.check() == sat:
            model = s.model()
            solution = [[(1 if model.evaluate(grid_vars[r][c], model_completion=True) else 0) for c in range(self.dim)] for r in range(self.dim)]
            solutions.append(solution)
            # Block this solution and look for another
            s.add(Or([Not(v) if solution[r][c] else v for r, row in enumerate(grid_vars) for c, v in enumerate(row)]))
        logging.debug(f"Z3 search for {limit} solution(s) took {format_duration(time.monotonic() - start_time)}")
        return solutions

    def count_solutions(self, limit=UNIQUENESS_SOLUTION_LIMIT):
        """Counts placements, stopping once `limit` have been found."""
        return len(self.find_solutions(limit))

    def has_unique_solution(self):
        return self.count_solutions(limit=2) == 1
