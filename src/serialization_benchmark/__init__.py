"""Serialization benchmark harness."""

__all__ = [
    "backends",
    "core",
    "datasets",
    "reporting",
    "shared",
]
