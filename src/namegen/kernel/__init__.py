from .checker import KernelChecker
from .guard import KernelNameGuard
from .nodes import (
    App,
    BVar,
    Const,
    Declaration,
    FVar,
    KernelNode,
    KernelTree,
    Lam,
    Pi,
    Sort,
    instantiate,
)

__all__ = [
    "App",
    "BVar",
    "Const",
    "Declaration",
    "FVar",
    "KernelChecker",
    "KernelNameGuard",
    "KernelNode",
    "KernelTree",
    "Lam",
    "Pi",
    "Sort",
    "instantiate",
]
