import argparse
import json
import pathlib

import nox


ROOT = pathlib.Path(__file__).resolve().parent

INIT_PY = ROOT.joinpath("src", "sudokulib", "__init__.py")

nox.options.sessions = ["lint", "tests"]
nox.options.reuse_existing_virtualenvs = True


@nox.session
def lint(session):
    session.install(".[lint]")

    session.run("black", "--check", ".")
    session.run("flake8", "src", "tests")
    session.run("mypy", "src")


@nox.session(python=["3.13", "3.12", "3.11", "3.10", "3.9", "3.8"])
def tests(session):
    session.install(".[test]")

    files = session.posargs or ["tests"]
    session.run("pytest", *files)


@nox.session
def solve(session):
    """Run the command line solver, e.g. ``nox -s solve -- "<puzzle>"``."""
    session.install(".")
    session.run("python", "-m", "sudokulib", *session.posargs)


def _write_package_version(v):
    lines = []

    version_line = None
    with INIT_PY.open() as f:
        for line in f:
            if line.startswith("__version__ = "):
                line = version_line = f"__version__ = {json.dumps(str(v))}\n"
            lines.append(line)
    if not version_line:
        raise ValueError("__version__ not found in __init__.py")

    with INIT_PY.open("w", newline="\n") as f:
        f.write("".join(lines))


@nox.session
def release(session):
    session.install(".[release]")

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--version",
        required=True,
        help="Version to release. Empty value uses the value in __init__.py.",
    )
    parser.add_argument(
        "--repo",
        required=True,
        help="Repository to upload to. Empty value disables publish.",
    )
    options = parser.parse_args(session.posargs)

    if options.version:
        _write_package_version(options.version)
        session.run("towncrier", "--version", options.version)

    if options.repo:
        session.log(f"Releasing distributions to {options.repo}...")
        session.run("setl", "publish", "--repository", options.repo)
    else:
        session.log("Building distributions locally since --repo is empty")
        session.run("setl", "publish", "--no-upload")
