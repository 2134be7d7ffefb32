"""Greedy algorithms for pairing, scheduling, counting and string problems."""

__version__ = "0.1.0"
__all__ = ["counting", "pairing", "scheduling", "strings"]