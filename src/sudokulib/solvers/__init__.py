from .abstract import AbstractSolver, Result
from .backtracking import (
    Solver,
    compute_blanks,
    is_admissible,
    is_valid_region,
    solve,
)
from .exceptions import SolutionError, SolutionImpossible, SolverException

__all__ = [
    "AbstractSolver",
    "Result",
    "SolutionError",
    "SolutionImpossible",
    "Solver",
    "SolverException",
    "compute_blanks",
    "is_admissible",
    "is_valid_region",
    "solve",
]
