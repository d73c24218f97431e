"""Per-user opt-out checks applied before each channel delivery."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def get_preference(
        self, user_id: str, category: str, channel: str | None
    ) -> bool | None: ...


class PreferenceGate:
    """Answer whether a user accepts a category on a channel.

    A channel-specific preference wins over a category-wide one and users
    without any stored preference receive everything. Answers are memoized, so
    one gate should live for a single dispatch only.
    """

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store
        self._cache: dict[tuple[str, str, str | None], bool | None] = {}

    def allowed(self, user_id: str, category: str, channel: str) -> bool:
        specific = self._lookup(user_id, category, channel)
        if specific is not None:
            return specific
        category_wide = self._lookup(user_id, category, None)
        if category_wide is not None:
            return category_wide
        return True

    def _lookup(self, user_id: str, category: str, channel: str | None) -> bool | None:
        key = (user_id, category, channel)
        if key not in self._cache:
            self._cache[key] = self._store.get_preference(user_id, category, channel)
        return self._cache[key]


__all__ = ["PreferenceGate", "PreferenceStore"]
