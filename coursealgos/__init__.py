"""Classic course algorithms, data structures and CPU scheduling simulations."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "linked_list",
    "multilevel",
    "primes",
    "realtime",
    "scheduling",
    "sorting",
    "stack",
    "trees",
]