import pytest

from sudokulib import BaseReporter


class RecordingReporter(BaseReporter):
    def __init__(self):
        self.events = []

    def starting(self, grid, blanks):
        self.events.append(("starting", len(blanks)))

    def assigning(self, blank, value):
        self.events.append(("assigning", (blank.row, blank.column), value))

    def rejecting(self, blank, value):
        self.events.append(("rejecting", (blank.row, blank.column), value))

    def backtracking(self, blank):
        self.events.append(("backtracking", (blank.row, blank.column)))

    def ending(self, grid):
        self.events.append(("ending",))

    def exhausted(self, grid):
        self.events.append(("exhausted",))

    def count(self, name):
        return sum(1 for event in self.events if event[0] == name)


# A puzzle with a single solution, given as row strings of uneven length.
SOLVABLE_ROWS = [
    "     4  3",
    " 71 9 4",
    "3  7  9 6",
    "  517  6",
    "1 64 3 9",
    "  96 2 35",
    "        7",
    "",
    "6      4",
]

SOLVABLE_SOLUTION = (
    "962814573571396482384725916835179264126453798749682135213948657"
    "498567321657231849"
)

UNSOLVABLE_ROWS = [
    "  6 71 3",
    "    4  7",
    "    567",
    " 1   4 5",
    " 8  3",
    "7  5  6",
    " 68 2",
    " 429    7",
    " 97  35",
]

CLASSIC = (
    "53  7    6  195    98    6 8   6   34  8 3  17   2   6 6    28    419  5"
    "    8  79"
)


@pytest.fixture(scope="session")
def reporter_cls():
    return RecordingReporter


@pytest.fixture()
def reporter(reporter_cls):
    return reporter_cls()


@pytest.fixture()
def solvable_rows():
    return list(SOLVABLE_ROWS)


@pytest.fixture()
def solvable_solution():
    return SOLVABLE_SOLUTION


@pytest.fixture()
def unsolvable_rows():
    return list(UNSOLVABLE_ROWS)


@pytest.fixture()
def classic():
    return CLASSIC
