"""Multi-selection text-editing actions for host editors."""

__all__ = [
    "actions",
    "buffer",
    "commands",
    "dispatch",
    "runtime",
]

__version__ = "0.1.0"
