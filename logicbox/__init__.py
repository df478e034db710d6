"""Propositional and first-order formula trees, evaluation, and a DIMACS CNF SAT solver."""

__version__ = "0.1.0"