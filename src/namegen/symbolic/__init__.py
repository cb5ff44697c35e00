from .gensym import NameGenerator
from .name import INTERNAL_MARKER, Name, is_internal_component, parse_name
from .term import Term, TermTree
from .traversal import PreOrderDFS, reachable_names

__all__ = [
    "INTERNAL_MARKER",
    "Name",
    "NameGenerator",
    "PreOrderDFS",
    "Term",
    "TermTree",
    "is_internal_component",
    "parse_name",
    "reachable_names",
]
