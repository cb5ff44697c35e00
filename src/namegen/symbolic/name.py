from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import total_ordering

INTERNAL_MARKER = "_"
ANONYMOUS = "[anonymous]"

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_']*")


def _check_component(c) -> str | int:
    if isinstance(c, bool) or not isinstance(c, (str, int)):
        raise ValueError(f"Name components must be str or int, got {c!r}")
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"Integer name components must be non-negative: {c}")
        return c
    if not c:
        raise ValueError("String name components must be non-empty")
    if "«" in c or "»" in c:
        raise ValueError(f"Name component {c!r} contains an escape character")
    return c


def _component_key(c: str | int) -> tuple[int, str | int]:
    return (0, c) if isinstance(c, int) else (1, c)


def _component_str(c: str | int) -> str:
    if isinstance(c, int):
        return str(c)
    if _IDENT.fullmatch(c):
        return c
    return f"«{c}»"


def is_internal_component(c: str | int) -> bool:
    return isinstance(c, str) and c.startswith(INTERNAL_MARKER)


@total_ordering
@dataclass(eq=True, frozen=True, init=False)
class Name:
    """
    Name

    An immutable hierarchical path. Each component is either a non-empty
    string token or a non-negative integer index. Equality, hashing and
    ordering are structural; integer components sort before string
    components and a name sorts before all of its extensions.

    `Name()` is the anonymous path. It is only meaningful as the root of a
    generator; every generated name has at least one component.
    """

    components: tuple[str | int, ...]

    def __init__(self, *components: str | int):
        object.__setattr__(
            self, "components", tuple(_check_component(c) for c in components)
        )

    @classmethod
    def parse(cls, text: str) -> Name:
        from .parser import parse_components

        if text.strip() == ANONYMOUS:
            return cls()
        return cls(*parse_components(text))

    @classmethod
    def of(cls, value: Name | str | int) -> Name:
        """Coerce a single component into a one-component name."""
        if isinstance(value, Name):
            return value
        return cls(value)

    def append(self, *components: str | int) -> Name:
        return Name(*self.components, *components)

    def __add__(self, other: Name) -> Name:
        if not isinstance(other, Name):
            return NotImplemented
        return Name(*self.components, *other.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[str | int]:
        return iter(self.components)

    def __getitem__(self, idx):
        return self.components[idx]

    def __lt__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return tuple(map(_component_key, self.components)) < tuple(
            map(_component_key, other.components)
        )

    @property
    def is_anonymous(self) -> bool:
        return not self.components

    @property
    def is_atomic(self) -> bool:
        return len(self.components) == 1

    @property
    def last(self) -> str | int:
        if not self.components:
            raise ValueError("The anonymous name has no components")
        return self.components[-1]

    @property
    def prefix(self) -> Name:
        """The name with its last component dropped."""
        return Name(*self.components[:-1])

    def is_prefix_of(self, other: Name) -> bool:
        n = len(self.components)
        return other.components[:n] == self.components

    @property
    def is_internal(self) -> bool:
        return any(is_internal_component(c) for c in self.components)

    def __str__(self):
        if not self.components:
            return ANONYMOUS
        return ".".join(_component_str(c) for c in self.components)

    def __repr__(self):
        return f"Name({', '.join(repr(c) for c in self.components)})"


def parse_name(text: str, allow_internal: bool = False) -> Name:
    """
    Read a name from source text.

    Unless `allow_internal` is set, components that start with the internal
    marker are rejected, so that no user-authored text can spell a reserved
    component.
    """
    name = Name.parse(text)
    if not allow_internal:
        for c in name:
            if is_internal_component(c):
                raise ValueError(
                    f"Component {c!r} of {text!r} starts with the reserved "
                    f"marker {INTERNAL_MARKER!r}"
                )
    return name
