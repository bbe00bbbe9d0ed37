"""Small file helpers shared by the storage layer."""

__all__ = [
    "fs",
    "jsonio",
]
