from collections.abc import Iterator

from .name import Name
from .term import Term, TermTree


def PreOrderDFS(node: Term) -> Iterator[Term]:
    yield node
    if isinstance(node, TermTree):
        for arg in node.children:
            yield from PreOrderDFS(arg)


def reachable_names(node: Term) -> Iterator[Name]:
    """Every name held by `node` or one of its descendants, in pre-order."""
    for n in PreOrderDFS(node):
        yield from n.names()
