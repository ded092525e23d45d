"""Classic data structures, prime generators and small text utilities."""

__version__ = "0.1.0"

__all__ = [
    "cards",
    "deque",
    "linked_list",
    "primes",
    "priority_queue",
    "streamops",
    "template_list",
    "tree",
    "tree_report",
]