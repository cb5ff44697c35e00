from collections import Counter

from namegen import Name
from namegen.kernel import App, BVar, Const, Declaration, FVar, Lam, Pi, Sort
from namegen.symbolic import PreOrderDFS, reachable_names


def _prog():
    f = Const(Name("f"))
    body = App(App(f, BVar(0)), FVar(Name("y")))
    return Declaration(
        Name("d"),
        Pi(Name("x"), Sort(0), Sort(0)),
        Lam(Name("x"), Sort(0), body),
    )


def test_preorder_dfs():
    prog = _prog()
    preorder = list(PreOrderDFS(prog))

    assert preorder[0] is prog
    assert Counter(type(x).__name__ for x in preorder) == Counter(
        {
            "Declaration": 1,
            "Pi": 1,
            "Lam": 1,
            "App": 2,
            "Sort": 3,
            "Const": 1,
            "BVar": 1,
            "FVar": 1,
        }
    )

    pos = {}
    for i, obj in enumerate(preorder):
        k = id(obj)
        if k in pos:
            continue
        pos[k] = i
    for node in preorder:
        for child in getattr(node, "children", ()):
            assert pos[id(node)] < pos[id(child)]


def test_reachable_names():
    assert list(reachable_names(_prog())) == [
        Name("d"),
        Name("x"),
        Name("x"),
        Name("f"),
        Name("y"),
    ]


def test_reachable_names_of_leaf():
    assert list(reachable_names(Sort(0))) == []
    assert list(reachable_names(FVar(Name("z")))) == [Name("z")]
