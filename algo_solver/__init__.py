"""AlgoSolver: LeetCode problem to generated solution code."""

__version__ = "0.1.0"
