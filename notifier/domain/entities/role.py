"""Domain entity representing a user role."""

from dataclasses import dataclass


@dataclass
class Role:
    """Role that can be assigned to a user, e.g. ``Manager``."""

    id: int
    name: str


__all__ = ["Role"]
