"""Classic data-structure and algorithm drills, with a small command-line driver."""

__version__ = "0.1.0"

__all__ = ["arrays", "recursion", "strings", "matrices", "linked", "stacks", "queues", "cli"]