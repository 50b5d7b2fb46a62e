"""No Return Rule (W7210) - magic numbers returned from methods and lambdas."""

from typing import Optional

from magic_numbers_linter.domain.config import (
    RETURN_DEFAULTS,
    RETURN_EXPLICIT,
    RETURN_IMPLICIT,
    RuleConfig,
    resolve,
)
from magic_numbers_linter.domain.messages import RETURN, RULE_NO_RETURN
from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.domain.patterns import Matcher, match, node
from magic_numbers_linter.domain.rules import Diagnostic, forbidden_literal_pattern

MAX_IMPLICIT_RETURN_DEPTH: int = 64


class ReturnRule:
    """
    Flags explicit and implicit returns of magic numbers.

    The implicit return of a definition is found by following the last
    statement of nested BEGIN bodies; conditional branches are not entered.
    Diagnostics point at the returned literal.

    A trailing bare expression statement counts as the implicit return, as in
    expression-bodied hosts, even though a Python function evaluates it and
    returns None. Lambdas are the case where that return is real.
    """

    rule_id: str = RULE_NO_RETURN
    description: str = "Do not return bare numeric literals from a method or proc."
    node_kinds: frozenset[NodeKind] = frozenset({NodeKind.DEF, NodeKind.RETURN})

    def __init__(
        self,
        config: Optional[RuleConfig] = None,
        classifier: Optional[LiteralClassifier] = None,
        matcher: Matcher = match,
    ) -> None:
        self.config = config if config is not None else resolve(None, RETURN_DEFAULTS)
        self._classifier = classifier or LiteralClassifier()
        self._match = matcher

        self._literal_pattern = forbidden_literal_pattern(self.config.forbidden_numerics)
        self._explicit_pattern = node(NodeKind.RETURN, self._literal_pattern)

    def evaluate(
        self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...] = ()
    ) -> Optional[Diagnostic]:
        if node.kind is NodeKind.RETURN:
            return self._check_explicit(node)
        if node.kind is NodeKind.DEF:
            return self._check_implicit(node)
        return None

    def _check_explicit(self, node: SyntaxNode) -> Optional[Diagnostic]:
        if self.config.allows_return(RETURN_EXPLICIT):
            return None
        result = self._match(node, self._explicit_pattern)
        return self._report(result.first.node if result else None)

    def _check_implicit(self, node: SyntaxNode) -> Optional[Diagnostic]:
        if self.config.allows_return(RETURN_IMPLICIT) or not node.children:
            return None
        final = self.implicit_return_value(node.children[-1])
        if final is None or not self._match(final, self._literal_pattern):
            return None
        return self._report(final)

    def implicit_return_value(self, body: Optional[SyntaxNode]) -> Optional[SyntaxNode]:
        """Return the final expression of a body by unwrapping nested BEGIN sequences."""
        current = body
        for _ in range(MAX_IMPLICIT_RETURN_DEPTH):
            if current is None or current.kind is not NodeKind.BEGIN:
                return current
            current = current.children[-1] if current.children else None
        return None

    def _report(self, literal: Optional[SyntaxNode]) -> Optional[Diagnostic]:
        if literal is None:
            return None
        if self._classifier.literal_value(literal) in self.config.permitted_return_values:
            return None
        return Diagnostic.from_definition(self.rule_id, RETURN, literal)
