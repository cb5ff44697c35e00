"""
Process-wide table of reserved internal prefixes.

Modules that want private fresh names pick an atomic prefix starting with the
internal marker (`_inst`, `_kernel`, ...) and register it once at import time.
The registry only arbitrates between independently authored modules; telling
an internal name apart from a user-visible one is a purely structural check
(`is_internal`) that never consults it.
"""

import logging
import threading

from .exceptions import InvalidPrefix, PrefixAlreadyReserved
from .symbolic import INTERNAL_MARKER, Name, NameGenerator, is_internal_component
from .util.logging import LOG_REGISTRY

logger = logging.getLogger(__name__)

KERNEL_PREFIX = "_kernel"
KERNEL_MODULE = "kernel"

# Tagged children put an integer right after the tag, so a string segment
# there is out of their reach.
STATIC_SEGMENT = "static"


def _atomic_prefix(prefix: Name | str) -> str:
    if isinstance(prefix, Name):
        if not prefix.is_atomic:
            raise InvalidPrefix(f"Prefix {prefix} must be a single component")
        prefix = prefix.last  # type: ignore[assignment]
    if not isinstance(prefix, str) or not is_internal_component(prefix):
        raise InvalidPrefix(
            f"Prefix {prefix!r} must be a string component starting with "
            f"{INTERNAL_MARKER!r}"
        )
    return prefix


def is_internal(name: Name) -> bool:
    return name.is_internal


class InternalPrefixRegistry:
    def __init__(self):
        self._owners: dict[str, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_defaults(cls) -> "InternalPrefixRegistry":
        """A registry with the kernel prefix already reserved."""
        registry = cls()
        registry.register(KERNEL_MODULE, KERNEL_PREFIX)
        return registry

    def register(self, module_id: str, prefix: Name | str) -> None:
        """
        Reserve `prefix` for `module_id`.

        Registering the same prefix again for the same module is a no-op.
        """
        tag = _atomic_prefix(prefix)
        with self._lock:
            owner = self._owners.get(tag)
            if owner is not None and owner != module_id:
                raise PrefixAlreadyReserved(tag, owner, module_id)
            self._owners[tag] = module_id
        logger.debug(
            "reserved prefix %s for module %s", tag, module_id, extra=LOG_REGISTRY
        )

    def owner(self, prefix: Name | str) -> str | None:
        return self._owners.get(_atomic_prefix(prefix))

    def is_registered(self, prefix: Name | str, module: str | None = None) -> bool:
        try:
            owner = self.owner(prefix)
        except InvalidPrefix:
            return False
        if owner is None:
            return False
        return module is None or owner == module

    def prefixes(self) -> dict[str, str]:
        return dict(self._owners)

    def is_internal(self, name: Name) -> bool:
        return is_internal(name)

    def __contains__(self, prefix) -> bool:
        return self.is_registered(prefix)

    def __len__(self) -> int:
        return len(self._owners)


_DEFAULT_REGISTRY = InternalPrefixRegistry.with_defaults()


def set_default_registry(registry: InternalPrefixRegistry | None = None):
    global _DEFAULT_REGISTRY

    if registry is None:
        registry = InternalPrefixRegistry.with_defaults()
    _DEFAULT_REGISTRY = registry
    return registry


def get_default_registry() -> InternalPrefixRegistry:
    return _DEFAULT_REGISTRY


def register(module_id: str, prefix: Name | str) -> None:
    get_default_registry().register(module_id, prefix)


def validate_tag(
    prefix: Name | str,
    module: str,
    registry: InternalPrefixRegistry | None = None,
) -> str:
    """
    Check that `prefix` is owned by `module` and may tag a child generator,
    and return it as a bare component. Raises `InvalidPrefix` otherwise.
    """
    if registry is None:
        registry = get_default_registry()
    tag = _atomic_prefix(prefix)
    owner = registry.owner(tag)
    if owner is None:
        raise InvalidPrefix(f"Prefix {tag!r} is not registered")
    if owner != module:
        raise InvalidPrefix(
            f"Prefix {tag!r} is registered to {owner!r}, not to {module!r}"
        )
    return tag


def static_root(
    prefix: Name | str,
    module: str,
    registry: InternalPrefixRegistry | None = None,
) -> NameGenerator:
    """
    Generator rooted at `[prefix, "static"]`, for modules that need private fresh names
    and have no ambient generator to derive one from.

    Each call starts from counter zero. Call it once at module entry (or once
    per self-contained unit of work, as the kernel checker does) and thread
    the result internally.
    """
    tag = validate_tag(prefix, module=module, registry=registry)
    return NameGenerator.root(Name(tag, STATIC_SEGMENT))
