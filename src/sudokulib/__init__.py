__all__ = [
    "AbstractSolver",
    "BaseReporter",
    "BlankCell",
    "Grid",
    "Result",
    "SolutionError",
    "SolutionImpossible",
    "Solver",
    "SolverException",
    "compute_blanks",
    "format_blanks",
    "format_grid",
    "grid_from_rows",
    "grid_from_string",
    "is_admissible",
    "solve",
    "split_string",
    "__version__",
]

__version__ = "0.1.0.dev0"


from .grids import (
    format_blanks,
    format_grid,
    grid_from_rows,
    grid_from_string,
    split_string,
)
from .reporters import BaseReporter
from .solvers import (
    AbstractSolver,
    Result,
    SolutionError,
    SolutionImpossible,
    Solver,
    SolverException,
    compute_blanks,
    is_admissible,
    solve,
)
from .structs import BlankCell, Grid
