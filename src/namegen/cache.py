import logging
from abc import ABC, abstractmethod
from typing import Any

from .symbolic import Name
from .util.logging import LOG_CACHE

logger = logging.getLogger(__name__)


class CacheInvalidationHook(ABC):
    """
    Contract for any cache whose keys are generated names.

    Such a cache relies on every key being seen for the first time. Rolling a
    generator back to an earlier snapshot breaks that, because the restored
    generator re-issues the same names, so the snapshot-restore logic calls
    `reset` on every registered cache before resuming.
    """

    @abstractmethod
    def reset(self) -> None:
        """
        Drop every entry. Must be callable at any time and must not allocate
        fresh names.
        """
        ...


class NameCache(CacheInvalidationHook):
    """A dictionary cache keyed by generated names."""

    def __init__(self, label: str = "cache"):
        self.label = label
        self._entries: dict[Name, Any] = {}

    def get(self, key: Name, default=None):
        return self._entries.get(key, default)

    def put(self, key: Name, value) -> None:
        if key in self._entries:
            raise ValueError(
                f"Name {key} is already cached in {self.label}; "
                "was its generator rolled back without a reset?"
            )
        self._entries[key] = value

    def __getitem__(self, key: Name):
        return self._entries[key]

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self) -> None:
        logger.debug(
            "reset %s (%d entries)", self.label, len(self._entries), extra=LOG_CACHE
        )
        self._entries.clear()
