from __future__ import annotations

import logging

from ..util.logging import LOG_GENERATOR
from .name import Name

logger = logging.getLogger(__name__)


class NameGenerator:
    """
    NameGenerator

    A source of fresh names that owns one branch of an infinite naming tree.
    The generator is logically the pair `(base, counter)`: `next()` hands out
    `base ++ [counter]` and advances the counter, and `mk_child()` spends one
    counter value on a whole sub-branch, so a child rooted at `base ++ [i]`
    can never collide with anything its parent issues later.

    Generators are exclusively owned values. Pass them down (or pass a child
    down) instead of sharing one between callers, and never return an updated
    generator alongside a result; hand the callee `mk_child()` instead.
    """

    def __init__(self, base: Name, counter: int = 0):
        if not isinstance(base, Name):
            raise TypeError(f"Generator base must be a Name, got {base!r}")
        if counter < 0:
            raise ValueError(f"Generator counter must be non-negative: {counter}")
        self._base = base
        self._counter = counter

    @classmethod
    def root(cls, initial_path: Name | str | int = Name()) -> NameGenerator:
        """Create a top-level generator for an independent session."""
        return cls(Name.of(initial_path))

    @property
    def base(self) -> Name:
        return self._base

    @property
    def counter(self) -> int:
        return self._counter

    def peek(self) -> Name:
        """The name `next()` would return, without advancing."""
        return self._base.append(self._counter)

    def _allocate(self) -> int:
        i = self._counter
        self._counter += 1
        return i

    def next(self) -> Name:
        name = self._base.append(self._allocate())
        logger.debug("fresh name %s", name, extra=LOG_GENERATOR)
        return name

    def mk_child(self) -> NameGenerator:
        child = NameGenerator(self._base.append(self._allocate()))
        logger.debug("child generator at %s", child.base, extra=LOG_GENERATOR)
        return child

    def mk_tagged_child(
        self, prefix: Name | str, module: str, registry=None
    ) -> NameGenerator:
        """
        Like `mk_child`, but the child is rooted at `base ++ [prefix, i]`.

        `prefix` must be a single internal component registered to the calling
        `module`. Validation happens before the counter advances, so a rejected
        request leaves the generator untouched.
        """
        from ..registry import validate_tag

        tag = validate_tag(prefix, module=module, registry=registry)
        child = NameGenerator(self._base.append(tag, self._allocate()))
        logger.debug("tagged generator at %s", child.base, extra=LOG_GENERATOR)
        return child

    def __eq__(self, other):
        return (
            isinstance(other, NameGenerator)
            and self._base == other._base
            and self._counter == other._counter
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"NameGenerator({self._base!r}, counter={self._counter})"
