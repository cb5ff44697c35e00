from abc import ABC, abstractmethod
from collections.abc import Iterator

from .name import Name


class Term(ABC):
    """
    Base class for nodes that can be walked by the traversals in
    `namegen.symbolic.traversal`.
    """

    def names(self) -> Iterator[Name]:
        """Names held directly by this node, excluding those of its children."""
        return iter(())


class TermTree(Term):
    @property
    @abstractmethod
    def children(self) -> list[Term]:
        """Returns the children of the node."""
        ...
