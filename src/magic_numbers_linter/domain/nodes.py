"""Host-neutral syntax tree consumed by the magic number rules."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Union


class NodeKind(Enum):
    """Kinds of syntax nodes the rules understand."""

    INT = "int"
    FLOAT = "float"
    LITERAL = "literal"
    SEND = "send"
    LVAR = "lvar"
    SELF = "self"
    LVASGN = "lvasgn"
    IVASGN = "ivasgn"
    GVASGN = "gvasgn"
    CVASGN = "cvasgn"
    OP_ASGN = "op_asgn"
    MASGN = "masgn"
    MLHS = "mlhs"
    ARRAY = "array"
    HASH = "hash"
    PAIR = "pair"
    SPLAT = "splat"
    NEGATE = "negate"
    DEF = "def"
    CLASS = "class"
    ARGS = "args"
    ARG = "arg"
    OPTARG = "optarg"
    KWARG = "kwarg"
    KWOPTARG = "kwoptarg"
    RESTARG = "restarg"
    KWRESTARG = "kwrestarg"
    RETURN = "return"
    BEGIN = "begin"
    IF = "if"
    OTHER = "other"


NUMERIC_KINDS: frozenset[NodeKind] = frozenset({NodeKind.INT, NodeKind.FLOAT})


@dataclass(frozen=True)
class SyntaxNode:
    """
    One node of the inspected tree.

    A SEND node keeps its receiver as the first child; the receiver is None for
    receiver-less calls. ``origin`` points back at the host node and takes no
    part in equality.
    """

    kind: NodeKind
    children: tuple[Optional["SyntaxNode"], ...] = ()
    name: Optional[str] = None
    value: Union[int, float, None] = None
    raw: Optional[str] = None
    origin: Any = field(default=None, compare=False, repr=False)

    @property
    def is_literal(self) -> bool:
        return self.kind in NUMERIC_KINDS

    @property
    def receiver(self) -> Optional["SyntaxNode"]:
        """Receiver of a SEND node."""
        if self.kind is not NodeKind.SEND or not self.children:
            return None
        return self.children[0]

    @property
    def arguments(self) -> tuple[Optional["SyntaxNode"], ...]:
        """Arguments of a SEND node."""
        if self.kind is not NodeKind.SEND:
            return ()
        return self.children[1:]

    def walk(
        self, ancestors: tuple["SyntaxNode", ...] = ()
    ) -> Iterator[tuple["SyntaxNode", tuple["SyntaxNode", ...]]]:
        """Yield (node, ancestors) pairs in pre-order, outermost ancestor first."""
        stack: list[tuple[SyntaxNode, tuple[SyntaxNode, ...]]] = [(self, ancestors)]
        while stack:
            node, path = stack.pop()
            yield node, path
            child_path = path + (node,)
            for child in reversed(node.children):
                if child is not None:
                    stack.append((child, child_path))


# Builders, mostly for host adapters and tests.


def int_lit(value: int, raw: Optional[str] = None, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.INT, value=value, raw=raw if raw is not None else repr(value), origin=origin)


def float_lit(value: float, raw: Optional[str] = None, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.FLOAT, value=value, raw=raw if raw is not None else repr(value), origin=origin)


def negate(operand: SyntaxNode, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.NEGATE, (operand,), name="-@", origin=origin)


def lvar(name: str, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.LVAR, name=name, origin=origin)


def self_node(origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.SELF, name="self", origin=origin)


def send(
    receiver: Optional[SyntaxNode],
    name: str,
    *arguments: SyntaxNode,
    origin: Any = None,
) -> SyntaxNode:
    return SyntaxNode(NodeKind.SEND, (receiver, *arguments), name=name, origin=origin)


def pair(key: str, value: SyntaxNode, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.PAIR, (value,), name=key, origin=origin)


def assign(kind: NodeKind, name: str, value: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    """Build an LVASGN/IVASGN/GVASGN/CVASGN node; targets inside MLHS carry no value."""
    children = (value,) if value is not None else ()
    return SyntaxNode(kind, children, name=name, origin=origin)


def lvasgn(name: str, value: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    return assign(NodeKind.LVASGN, name, value, origin)


def ivasgn(name: str, value: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    return assign(NodeKind.IVASGN, name, value, origin)


def gvasgn(name: str, value: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    return assign(NodeKind.GVASGN, name, value, origin)


def cvasgn(name: str, value: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    return assign(NodeKind.CVASGN, name, value, origin)


def masgn(targets: list[SyntaxNode], values: SyntaxNode, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.MASGN,
        (SyntaxNode(NodeKind.MLHS, tuple(targets)), values),
        origin=origin,
    )


def array(*elements: SyntaxNode, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.ARRAY, tuple(elements), origin=origin)


def begin(*statements: SyntaxNode, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.BEGIN, tuple(statements), origin=origin)


def return_(value: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.RETURN, (value,) if value is not None else (), origin=origin)


def param(kind: NodeKind, name: str, default: Optional[SyntaxNode] = None, origin: Any = None) -> SyntaxNode:
    return SyntaxNode(kind, (default,) if default is not None else (), name=name, origin=origin)


def def_(
    name: str,
    params: list[SyntaxNode],
    body: Optional[SyntaxNode] = None,
    origin: Any = None,
) -> SyntaxNode:
    """Build a DEF node: children are (ARGS, body) with body possibly None."""
    return SyntaxNode(
        NodeKind.DEF,
        (SyntaxNode(NodeKind.ARGS, tuple(params)), body),
        name=name,
        origin=origin,
    )
