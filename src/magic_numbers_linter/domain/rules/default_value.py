"""No Default Rule (W7209) - magic numbers as parameter defaults."""

from typing import Optional

from magic_numbers_linter.domain.config import DEFAULT_VALUE_DEFAULTS, RuleConfig, resolve
from magic_numbers_linter.domain.messages import OPTIONAL_ARGUMENT_DEFAULT, RULE_NO_DEFAULT
from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.domain.patterns import Contains, Matcher, Wildcard, match, node
from magic_numbers_linter.domain.rules import Diagnostic, forbidden_literal_pattern, offending_captures


class DefaultValueRule:
    """
    Flags magic numbers used as default values of optional parameters.

    BAD:  def on_the_wall(bottles=100): ...
    GOOD: def on_the_wall(bottles=DEFAULT_BOTTLE_COUNT): ...

    Reports once per definition, however many parameters offend.
    """

    rule_id: str = RULE_NO_DEFAULT
    description: str = "Do not use bare numeric literals as parameter defaults."
    node_kinds: frozenset[NodeKind] = frozenset({NodeKind.DEF})

    def __init__(
        self,
        config: Optional[RuleConfig] = None,
        classifier: Optional[LiteralClassifier] = None,
        matcher: Matcher = match,
    ) -> None:
        self.config = config if config is not None else resolve(None, DEFAULT_VALUE_DEFAULTS)
        self._classifier = classifier or LiteralClassifier()
        self._match = matcher

        literal = forbidden_literal_pattern(self.config.forbidden_numerics)
        optional_parameter = node({NodeKind.OPTARG, NodeKind.KWOPTARG}, literal)
        self._pattern = node(NodeKind.DEF, node(NodeKind.ARGS, Contains(optional_parameter)), Wildcard())

    def evaluate(
        self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...] = ()
    ) -> Optional[Diagnostic]:
        if node.kind is not NodeKind.DEF:
            return None
        result = self._match(node, self._pattern)
        if not result:
            return None
        if not offending_captures(self._classifier, result.captures, self.config.permitted_values):
            return None
        return Diagnostic.from_definition(self.rule_id, OPTIONAL_ARGUMENT_DEFAULT, node)
