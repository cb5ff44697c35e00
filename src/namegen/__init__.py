from .cache import CacheInvalidationHook, NameCache
from .exceptions import (
    ForgedInternalName,
    InvalidPrefix,
    NameGenError,
    PrefixAlreadyReserved,
)
from .kernel import KernelChecker, KernelNameGuard
from .registry import (
    KERNEL_MODULE,
    KERNEL_PREFIX,
    InternalPrefixRegistry,
    get_default_registry,
    is_internal,
    register,
    set_default_registry,
    static_root,
)
from .snapshot import Snapshot, SnapshotManager
from .symbolic import Name, NameGenerator, parse_name

__all__ = [
    "KERNEL_MODULE",
    "KERNEL_PREFIX",
    "CacheInvalidationHook",
    "ForgedInternalName",
    "InternalPrefixRegistry",
    "InvalidPrefix",
    "KernelChecker",
    "KernelNameGuard",
    "Name",
    "NameCache",
    "NameGenError",
    "NameGenerator",
    "PrefixAlreadyReserved",
    "Snapshot",
    "SnapshotManager",
    "get_default_registry",
    "is_internal",
    "parse_name",
    "register",
    "set_default_registry",
    "static_root",
]
