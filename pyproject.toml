[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicbox"
version = "0.1.0"
description = "Small toolkit for propositional and first-order logic: formula trees, evaluation over finite structures, and a backtracking SAT solver for DIMACS CNF."
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "first-order logic", "propositional logic", "sat", "dimacs", "cnf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicbox-fol = "logicbox.first_order:main"
logicbox-depth = "logicbox.propositional:main"
logicbox-sat = "logicbox.sat:main"

[tool.hatch.build.targets.wheel]
packages = ["logicbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
