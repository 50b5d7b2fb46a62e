"""No Argument Rule (W7207/W7208) - magic numbers passed to calls."""

from typing import Optional

from magic_numbers_linter.domain.config import ARGUMENT_DEFAULTS, RuleConfig, resolve
from magic_numbers_linter.domain.messages import ARGUMENT, RULE_NO_ARGUMENT, UNARY_METHOD
from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.domain.patterns import Contains, Matcher, Wildcard, either, match, node
from magic_numbers_linter.domain.rules import (
    Diagnostic,
    forbidden_literal_pattern,
    is_index_assignment,
    is_operator_name,
    is_setter_name,
    offending_captures,
)


class ArgumentRule:
    """
    Flags magic numbers used as call arguments.

    BAD:  shelf.bottles_on_the_wall(100)
    GOOD: shelf.bottles_on_the_wall(DEFAULT_BOTTLE_COUNT)

    Covers positional and keyword arguments and both operands of a binary
    operator (``x + 1`` and ``1 + x``). Augmented assignment such as
    ``count += 1`` is an OP_ASGN node, not a call, so it is never reported.
    Setter-style calls and item assignment (``items[0] = value``) are
    assignments, not calls, so neither their index nor their value is reported.
    """

    rule_id: str = RULE_NO_ARGUMENT
    description: str = "Do not pass bare numeric literals to methods; name them as constants."
    node_kinds: frozenset[NodeKind] = frozenset({NodeKind.SEND})

    def __init__(
        self,
        config: Optional[RuleConfig] = None,
        classifier: Optional[LiteralClassifier] = None,
        matcher: Matcher = match,
    ) -> None:
        self.config = config if config is not None else resolve(None, ARGUMENT_DEFAULTS)
        self._classifier = classifier or LiteralClassifier()
        self._match = matcher

        literal = forbidden_literal_pattern(self.config.forbidden_numerics)
        self._argument_pattern = node(
            NodeKind.SEND,
            Wildcard(),
            Contains(either(literal, node(NodeKind.PAIR, literal))),
        )
        self._left_operand_pattern = node(NodeKind.SEND, literal, Wildcard())

    def evaluate(
        self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...] = ()
    ) -> Optional[Diagnostic]:
        if node.kind is not NodeKind.SEND:
            return None
        if node.name in self.config.ignored_methods:
            return None
        if is_setter_name(node.name) or is_index_assignment(node.name):
            return None

        captures = (
            self._match(node, self._argument_pattern).captures
            + self._match(node, self._left_operand_pattern).captures
        )
        if not offending_captures(self._classifier, captures, self.config.permitted_values):
            return None

        if self.config.distinguish_unary_methods and is_operator_name(node.name):
            return Diagnostic.from_definition(self.rule_id, UNARY_METHOD, node)
        return Diagnostic.from_definition(self.rule_id, ARGUMENT, node)
