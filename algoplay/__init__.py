"""Classic sorting, searching, ranking and tree algorithms with a small maze demo."""

__version__ = "0.1.0"
__all__ = ["maze", "ranking", "search", "sorting", "tree"]