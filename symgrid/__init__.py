"""Solver for a 10x10 grid puzzle with symmetric and asymmetric blocks."""

__version__ = "0.1.0"
__all__ = ["board", "cell", "cli", "rules", "solver"]