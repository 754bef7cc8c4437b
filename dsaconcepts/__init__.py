"""Classic data structures and algorithms: arrays, queues, stacks, recursion, searching and sorting."""

__version__ = "0.1.0"
__all__ = ["arrays", "queues", "recursion", "searching", "sorting", "stack"]