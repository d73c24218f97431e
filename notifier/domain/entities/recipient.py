"""Value object describing an addressable notification recipient."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecipientInfo:
    """Contact details of a user resolved for a single dispatch."""

    id: str
    email: str | None = None
    phone: str | None = None
    full_name: str | None = None
    role: str | None = None


__all__ = ["RecipientInfo"]
