import logging
from collections.abc import Iterable

from ..exceptions import ForgedInternalName
from ..registry import KERNEL_PREFIX
from ..symbolic import Name, Term, reachable_names
from ..util.logging import LOG_KERNEL_GUARD

logger = logging.getLogger(__name__)


class KernelNameGuard:
    """
    Rejects externally supplied input that mentions the kernel-reserved
    prefix anywhere.

    The type checker never receives a generator, so it cannot defend its own
    fresh names the way other modules do. Instead every untrusted entry point
    runs this guard first: the checker only ever produces names under the
    reserved prefix, and the guard makes sure input never contains it.
    Offending input is rejected as ill-formed, never renamed.
    """

    def __init__(self, prefix: str = KERNEL_PREFIX):
        self.prefix = prefix

    def _check_name(self, name: Name) -> None:
        if self.prefix in name.components:
            logger.info("rejected forged name %s", name, extra=LOG_KERNEL_GUARD)
            raise ForgedInternalName(name, self.prefix)

    def check(self, term: Term | Name | Iterable[Term | Name]) -> None:
        match term:
            case Name():
                self._check_name(term)
            case Term():
                for name in reachable_names(term):
                    self._check_name(name)
            case str() | bytes():
                raise TypeError(
                    f"Expected a term or a name, got text {term!r}; parse it first"
                )
            case Iterable():
                for t in term:
                    self.check(t)
            case _:
                raise TypeError(f"Cannot check {type(term).__name__} for names")

    def __call__(self, term) -> None:
        self.check(term)
