"""AVL tree with an in-order cursor, plus small sorting, Fibonacci, counting and timing exercises."""

__version__ = "0.1.0"
__all__ = ["avl", "cursor", "counting", "sorting", "fibonacci", "workloads"]