class NameGenError(Exception):
    """Base class for every error raised by namegen."""


class InvalidPrefix(NameGenError, ValueError):
    """
    A tagged-child or registration request used a prefix that is not a single
    marker-carrying component, or that is not registered for the caller.
    """


class PrefixAlreadyReserved(NameGenError, ValueError):
    """Another module already owns the requested internal prefix."""

    def __init__(self, prefix: str, owner: str, requested_by: str):
        super().__init__(
            f"Prefix {prefix!r} is already reserved by module {owner!r}, "
            f"cannot reserve it for {requested_by!r}"
        )
        self.prefix = prefix
        self.owner = owner
        self.requested_by = requested_by


class ForgedInternalName(NameGenError, ValueError):
    """An untrusted term mentions the kernel-reserved prefix."""

    def __init__(self, name, prefix: str):
        super().__init__(
            f"Name {name} uses the reserved kernel prefix {prefix!r}; "
            "externally supplied terms may not contain it"
        )
        self.name = name
        self.prefix = prefix
