"""Queries on trees: ancestors, lowest common ancestors, distances, path counts and subtree statistics."""

__version__ = "0.1.0"
__all__ = ["ancestry", "cli", "distances", "paths", "subtree", "tree"]