from lark import Lark, Token, Tree
from lark.exceptions import LarkError

lark_parser = Lark(
    """
    %ignore " "           // Disregard spaces in text

    start: component ("." component)*
    component: NUMBER | IDENT | ESCAPED

    NUMBER: /[0-9]+/
    IDENT: /[A-Za-z_][A-Za-z0-9_']*/
    ESCAPED: /«[^«»]+»/
    """,
    parser="lalr",
)


def _parse_component(t: Tree) -> str | int:
    match t:
        case Tree("component", [Token() as tok]) if tok.type == "NUMBER":
            return int(tok)
        case Tree("component", [Token() as tok]) if tok.type == "IDENT":
            return str(tok)
        case Tree("component", [Token() as tok]) if tok.type == "ESCAPED":
            return str(tok)[1:-1]
        case _:
            raise ValueError(f"Unknown tree structure: {t}")


def parse_components(text: str) -> tuple[str | int, ...]:
    """
    Parse the dotted textual encoding of a name into its components.

    Integer components are written as decimal digits, plain identifiers as
    themselves, and any other string component is wrapped in `«»`.
    """
    try:
        tree = lark_parser.parse(text)
    except LarkError as e:
        raise ValueError(f"Malformed name {text!r}: {e}") from e
    match tree:
        case Tree("start", components):
            return tuple(_parse_component(c) for c in components)  # type: ignore[arg-type]
        case _:
            raise ValueError(f"Expected a dotted name, got {tree.data}")
