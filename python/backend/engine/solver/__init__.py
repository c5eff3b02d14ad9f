from backend.engine.solver.solver import choose_algorithm, compare_algorithms

__all__ = ["choose_algorithm", "compare_algorithms"]
