"""Star Logic Grid: region generation, solving and rule checks for one-star grid puzzles."""
