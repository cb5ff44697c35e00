"""
Notes on the kernel term IR:
These are the terms that cross the boundary into the type checker. Bound
variables are de Bruijn indices (`BVar`), so binders carry their name only as
a display hint. Free variables (`FVar`) and constants (`Const`) are referred to
by `Name`. The checker opens binders by substituting a fresh `FVar` for the
bound variable, which is why it needs fresh names of its own.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from ..symbolic import Name, Term, TermTree


class KernelNode(Term):
    def __str__(self):
        """Returns a string representation of the node."""
        return self.fmt()

    def fmt(self) -> str:
        raise NotImplementedError


class KernelTree(KernelNode, TermTree):
    pass


@dataclass(eq=True, frozen=True)
class BVar(KernelNode):
    """
    Bound variable, as a de Bruijn index counting binders outward.
    """

    idx: int

    def fmt(self) -> str:
        return f"#{self.idx}"


@dataclass(eq=True, frozen=True)
class FVar(KernelNode):
    """
    Free variable named `name`.
    """

    name: Name

    def names(self) -> Iterator[Name]:
        yield self.name

    def fmt(self) -> str:
        return str(self.name)


@dataclass(eq=True, frozen=True)
class Const(KernelNode):
    """
    Reference to a global declaration, with universe level parameter names.
    """

    name: Name
    levels: tuple[Name, ...] = ()

    def names(self) -> Iterator[Name]:
        yield self.name
        yield from self.levels

    def fmt(self) -> str:
        if not self.levels:
            return str(self.name)
        return f"{self.name}.{{{', '.join(str(lvl) for lvl in self.levels)}}}"


@dataclass(eq=True, frozen=True)
class Sort(KernelNode):
    level: int = 0

    def fmt(self) -> str:
        return f"Sort {self.level}"


@dataclass(eq=True, frozen=True)
class App(KernelTree):
    fn: KernelNode
    arg: KernelNode

    @property
    def children(self):
        return [self.fn, self.arg]

    def fmt(self) -> str:
        return f"({self.fn} {self.arg})"


@dataclass(eq=True, frozen=True)
class Lam(KernelTree):
    """
    Lambda abstraction. `binder` is the user-facing name of the bound
    variable; occurrences in `body` are `BVar`s.
    """

    binder: Name
    type: KernelNode
    body: KernelNode

    @property
    def children(self):
        return [self.type, self.body]

    def names(self) -> Iterator[Name]:
        yield self.binder

    def fmt(self) -> str:
        return f"(fun ({self.binder} : {self.type}) => {self.body})"


@dataclass(eq=True, frozen=True)
class Pi(KernelTree):
    binder: Name
    type: KernelNode
    body: KernelNode

    @property
    def children(self):
        return [self.type, self.body]

    def names(self) -> Iterator[Name]:
        yield self.binder

    def fmt(self) -> str:
        return f"(({self.binder} : {self.type}) -> {self.body})"


@dataclass(eq=True, frozen=True)
class Declaration(KernelTree):
    """
    A named top-level declaration submitted to the kernel. `value` is `None`
    for axioms.
    """

    name: Name
    type: KernelNode
    value: KernelNode | None = None
    univ_params: tuple[Name, ...] = ()

    @property
    def children(self):
        if self.value is None:
            return [self.type]
        return [self.type, self.value]

    def names(self) -> Iterator[Name]:
        yield self.name
        yield from self.univ_params

    def fmt(self) -> str:
        head = f"def {self.name} : {self.type}"
        return head if self.value is None else f"{head} := {self.value}"


def instantiate(body: KernelNode, value: KernelNode, depth: int = 0) -> KernelNode:
    """
    Replace the loose bound variable at `depth` in `body` by `value`, and
    lower the indices of the loose variables above it. `value` must be closed.
    """
    match body:
        case BVar(idx) if idx == depth:
            return value
        case BVar(idx) if idx > depth:
            return BVar(idx - 1)
        case App(fn, arg):
            return App(instantiate(fn, value, depth), instantiate(arg, value, depth))
        case Lam(binder, ty, b):
            return Lam(
                binder, instantiate(ty, value, depth), instantiate(b, value, depth + 1)
            )
        case Pi(binder, ty, b):
            return Pi(
                binder, instantiate(ty, value, depth), instantiate(b, value, depth + 1)
            )
        case _:
            return body
