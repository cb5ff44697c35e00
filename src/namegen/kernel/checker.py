import logging

from ..registry import (
    KERNEL_MODULE,
    KERNEL_PREFIX,
    InternalPrefixRegistry,
    static_root,
)
from ..symbolic import Name, NameGenerator
from ..util.logging import LOG_KERNEL_CHECKER
from .guard import KernelNameGuard
from .nodes import (
    App,
    BVar,
    Const,
    Declaration,
    FVar,
    KernelNode,
    Lam,
    Pi,
    Sort,
    instantiate,
)

logger = logging.getLogger(__name__)


class KernelChecker:
    """
    Entry point for declarations entering the kernel.

    Checks that a declaration is closed: every bound variable is in scope and
    no free variable leaks in from outside. Binders are opened with fresh free
    variables drawn from a generator rooted at the kernel prefix, constructed
    once per `check` call and never exposed.
    """

    def __init__(
        self,
        guard: KernelNameGuard | None = None,
        registry: InternalPrefixRegistry | None = None,
    ):
        if guard is None:
            guard = KernelNameGuard()
        self.guard = guard
        self.registry = registry

    def check(self, decl: Declaration) -> tuple[Name, ...]:
        self.guard.check(decl)
        gen = static_root(KERNEL_PREFIX, KERNEL_MODULE, registry=self.registry)
        introduced: list[Name] = []
        self._walk(gen, decl.type, introduced)
        if decl.value is not None:
            self._walk(gen, decl.value, introduced)
        logger.debug(
            "checked %s, opened %d binders",
            decl.name,
            len(introduced),
            extra=LOG_KERNEL_CHECKER,
        )
        return tuple(introduced)

    def _walk(
        self, gen: NameGenerator, node: KernelNode, introduced: list[Name]
    ) -> None:
        match node:
            case BVar(idx):
                raise ValueError(f"Loose bound variable #{idx}")
            case FVar(name):
                if name not in introduced:
                    raise ValueError(f"Free variable {name} is not in scope")
            case Const() | Sort():
                pass
            case App(fn, arg):
                self._walk(gen, fn, introduced)
                self._walk(gen, arg, introduced)
            case Lam(_, ty, body) | Pi(_, ty, body):
                self._walk(gen, ty, introduced)
                local = gen.next()
                introduced.append(local)
                self._walk(gen, instantiate(body, FVar(local)), introduced)
            case _:
                raise ValueError(f"Unknown kernel node: {node!r}")
