import ast
import os

from setuptools import find_packages, setup


def read_version():
    init_py = os.path.join(
        os.path.dirname(os.path.abspath(__file__)),
        "src", "sudokulib", "__init__.py",
    )
    with open(init_py) as f:
        for line in f:
            if not line.startswith("__version__"):
                continue
            return ast.literal_eval(line.split("=", 1)[-1].strip())
    raise RuntimeError("failed to read package version")


# Everything else lives in setup.cfg.
setup(
    package_dir={"": "src"},
    packages=find_packages("src"),
    version=read_version(),
)
