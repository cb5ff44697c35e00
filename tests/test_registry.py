import pytest

from namegen import (
    KERNEL_MODULE,
    KERNEL_PREFIX,
    InternalPrefixRegistry,
    InvalidPrefix,
    Name,
    NameGenerator,
    PrefixAlreadyReserved,
    get_default_registry,
    is_internal,
    register,
    set_default_registry,
    static_root,
)


def test_register_collision():
    reg = InternalPrefixRegistry()
    reg.register("A", "_inst")
    with pytest.raises(PrefixAlreadyReserved) as excinfo:
        reg.register("B", "_inst")
    assert excinfo.value.owner == "A"
    assert excinfo.value.requested_by == "B"
    assert reg.owner("_inst") == "A"


def test_register_is_idempotent_for_owner():
    reg = InternalPrefixRegistry()
    reg.register("A", Name("_inst"))
    reg.register("A", "_inst")
    assert reg.prefixes() == {"_inst": "A"}
    assert len(reg) == 1


@pytest.mark.parametrize("prefix", ["inst", Name("_a", "b"), Name(0), Name(), "x_"])
def test_register_rejects_malformed_prefix(prefix):
    reg = InternalPrefixRegistry()
    with pytest.raises(InvalidPrefix):
        reg.register("A", prefix)
    assert len(reg) == 0


def test_lookup():
    reg = InternalPrefixRegistry()
    reg.register("A", "_inst")
    assert reg.is_registered("_inst")
    assert reg.is_registered("_inst", module="A")
    assert not reg.is_registered("_inst", module="B")
    assert not reg.is_registered("_other")
    assert not reg.is_registered("not_internal")
    assert "_inst" in reg
    assert reg.owner("_other") is None


def test_defaults_reserve_kernel_prefix():
    reg = InternalPrefixRegistry.with_defaults()
    assert reg.owner(KERNEL_PREFIX) == KERNEL_MODULE
    with pytest.raises(PrefixAlreadyReserved):
        reg.register("elab", KERNEL_PREFIX)


def test_is_internal_is_structural():
    reg = InternalPrefixRegistry()
    # Classification does not depend on registration.
    assert is_internal(Name("_never_registered", 0))
    assert reg.is_internal(Name("_never_registered", 0))
    assert not is_internal(Name("Nat", "succ"))


def test_default_registry(registry):
    assert get_default_registry() is registry
    register("elab", "_inst")
    assert registry.owner("_inst") == "elab"
    assert registry.owner(KERNEL_PREFIX) == KERNEL_MODULE


def test_set_default_registry():
    previous = get_default_registry()
    try:
        custom = InternalPrefixRegistry()
        assert set_default_registry(custom) is custom
        assert get_default_registry() is custom
    finally:
        set_default_registry(previous)
    assert get_default_registry() is previous


def test_static_root(registry):
    registry.register("tactic", "_tac")
    g = static_root("_tac", "tactic")
    assert g.base == Name("_tac", "static")
    assert g.next() == Name("_tac", "static", 0)
    assert is_internal(g.mk_child().next())
    # Independent calls start over, so callers must construct it once per scope.
    assert static_root(Name("_tac"), "tactic") == NameGenerator.root(
        Name("_tac", "static")
    )


def test_static_root_is_disjoint_from_tagged_children(registry, rng):
    registry.register("tactic", "_tac")
    static = static_root("_tac", "tactic")
    ambient = NameGenerator.root()
    tagged = [ambient.mk_tagged_child("_tac", module="tactic") for _ in range(4)]

    def drain(g):
        names = []
        for _ in range(50):
            if rng.integers(2):
                names.append(g.next())
            else:
                names.append(g.mk_child().next())
        return names

    static_names = set(drain(static))
    tagged_names = {n for t in tagged for n in drain(t)}
    assert static_names.isdisjoint(tagged_names)
    assert static.mk_child().next() != tagged[0].mk_child().next()


def test_static_root_requires_ownership(registry):
    registry.register("tactic", "_tac")
    with pytest.raises(InvalidPrefix):
        static_root("_tac", "elab")
    with pytest.raises(InvalidPrefix):
        static_root("_unknown", "tactic")
