"""Literal classification and the configurable forbidden numeric set."""

from enum import Enum
from typing import Optional, Union

from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode

Number = Union[int, float]


class NumericKind(Enum):
    INTEGER = "Integer"
    FLOAT = "Float"


_KIND_BY_NODE_KIND: dict[NodeKind, NumericKind] = {
    NodeKind.INT: NumericKind.INTEGER,
    NodeKind.FLOAT: NumericKind.FLOAT,
}


class ForbiddenNumericSet(Enum):
    """Which numeric kinds count as magic numbers (the ForbiddenNumerics option)."""

    ALL = "All"
    INTEGER_ONLY = "Integer"
    FLOAT_ONLY = "Float"

    @classmethod
    def from_option(cls, value: str) -> "ForbiddenNumericSet":
        """Return the set named by a ForbiddenNumerics option value."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(value)

    @property
    def numeric_kinds(self) -> frozenset[NumericKind]:
        if self is ForbiddenNumericSet.INTEGER_ONLY:
            return frozenset({NumericKind.INTEGER})
        if self is ForbiddenNumericSet.FLOAT_ONLY:
            return frozenset({NumericKind.FLOAT})
        return frozenset(NumericKind)

    @property
    def node_kinds(self) -> frozenset[NodeKind]:
        """Tree node kinds of the forbidden literals, for building patterns."""
        return frozenset(
            node_kind
            for node_kind, numeric_kind in _KIND_BY_NODE_KIND.items()
            if numeric_kind in self.numeric_kinds
        )


class LiteralClassifier:
    """
    Categorizes literal nodes as Integer or Float.

    A NEGATE node wrapping a numeric literal is a literal of the same kind with
    the negated value, so ``-1`` is classified exactly like ``1``.
    """

    def classify(self, node: Optional[SyntaxNode]) -> Optional[NumericKind]:
        literal = self._unwrap(node)
        if literal is None:
            return None
        return _KIND_BY_NODE_KIND[literal.kind]

    def is_forbidden(self, forbidden: ForbiddenNumericSet, kind: Optional[NumericKind]) -> bool:
        return kind is not None and kind in forbidden.numeric_kinds

    def is_forbidden_literal(self, forbidden: ForbiddenNumericSet, node: Optional[SyntaxNode]) -> bool:
        return self.is_forbidden(forbidden, self.classify(node))

    def literal_value(self, node: Optional[SyntaxNode]) -> Optional[Number]:
        """Decoded numeric value of a (possibly negated) literal node."""
        literal = self._unwrap(node)
        if literal is None or literal.value is None:
            return None
        if node is not None and node.kind is NodeKind.NEGATE:
            return -literal.value
        return literal.value

    def _unwrap(self, node: Optional[SyntaxNode]) -> Optional[SyntaxNode]:
        if node is None:
            return None
        if node.kind is NodeKind.NEGATE:
            if len(node.children) != 1:
                return None
            node = node.children[0]
            if node is None:
                return None
        if node.kind in _KIND_BY_NODE_KIND:
            return node
        return None
