"""Solutions to classic programming-practice puzzles on arrays, strings, numbers, simulations, patterns and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "strings", "mathematics", "simulation", "patterns", "linkedlist"]