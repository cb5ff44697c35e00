import copy
import logging
from dataclasses import dataclass

from .cache import CacheInvalidationHook
from .symbolic import NameGenerator
from .util.logging import LOG_CACHE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """A saved logical position of a session generator."""

    generator: NameGenerator


class SnapshotManager:
    """
    Owns the generator of one parsing or elaboration session and the caches
    keyed by the names it hands out.

    `restore` rewinds the generator, after which it will re-issue names that
    caches may already hold, so every registered cache is reset first.
    """

    def __init__(self, generator: NameGenerator):
        self.generator = generator
        self._caches: list[CacheInvalidationHook] = []

    def register(self, cache: CacheInvalidationHook) -> CacheInvalidationHook:
        if not isinstance(cache, CacheInvalidationHook):
            raise TypeError(
                f"{type(cache).__name__} does not implement CacheInvalidationHook"
            )
        self._caches.append(cache)
        return cache

    def save(self) -> Snapshot:
        return Snapshot(copy.copy(self.generator))

    def restore(self, snapshot: Snapshot) -> NameGenerator:
        for cache in self._caches:
            cache.reset()
        self.generator = copy.copy(snapshot.generator)
        logger.debug(
            "restored generator to %s, reset %d caches",
            self.generator.peek(),
            len(self._caches),
            extra=LOG_CACHE,
        )
        return self.generator
