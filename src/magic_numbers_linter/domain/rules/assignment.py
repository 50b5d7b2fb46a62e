"""No Assignment Rule (W7201-W7206) - magic numbers bound to names."""

from typing import Callable, Optional

from magic_numbers_linter.domain.config import (
    ASSIGNMENT_DEFAULTS,
    CLASS_VARIABLES,
    GLOBAL_VARIABLES,
    INSTANCE_VARIABLES,
    LOCAL_VARIABLES,
    MULTIPLE_ASSIGNMENTS,
    PROPERTIES,
    RuleConfig,
    resolve,
)
from magic_numbers_linter.domain.messages import (
    CLASS_VARIABLE,
    GLOBAL_VARIABLE,
    INSTANCE_VARIABLE,
    LOCAL_VARIABLE,
    MULTIPLE_ASSIGNMENT,
    PROPERTY,
    RULE_NO_ASSIGNMENT,
    MessageDefinition,
)
from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.domain.patterns import Contains, Matcher, Pattern, Repeat, match, node
from magic_numbers_linter.domain.rules import (
    Diagnostic,
    forbidden_literal_pattern,
    is_setter_name,
    offending_captures,
    within_method,
)

_Handler = Callable[[SyntaxNode, tuple[SyntaxNode, ...]], Optional[Diagnostic]]

_MULTIPLE_ASSIGNMENT_TARGETS = frozenset(
    {NodeKind.LVASGN, NodeKind.IVASGN, NodeKind.GVASGN, NodeKind.CVASGN, NodeKind.SEND}
)

_TARGET_CONTEXTS: dict[NodeKind, str] = {
    NodeKind.GVASGN: GLOBAL_VARIABLES,
    NodeKind.CVASGN: CLASS_VARIABLES,
}


class AssignmentRule:
    """
    Flags magic numbers assigned to variables, properties and multiple targets.

    BAD:  hours = 24
    GOOD: HOURS_IN_ONE_DAY = 24

    Instance variables are only reported inside a method body. Global and
    class variables are exempt while their context is listed in
    AllowedAssignments, which is the default. A multiple assignment whose
    targets are all such exempt globals or class variables is exempt too.
    """

    rule_id: str = RULE_NO_ASSIGNMENT
    description: str = "Do not assign bare numeric literals; name them as constants."
    node_kinds: frozenset[NodeKind] = frozenset(
        {
            NodeKind.LVASGN,
            NodeKind.IVASGN,
            NodeKind.GVASGN,
            NodeKind.CVASGN,
            NodeKind.SEND,
            NodeKind.MASGN,
        }
    )

    def __init__(
        self,
        config: Optional[RuleConfig] = None,
        classifier: Optional[LiteralClassifier] = None,
        matcher: Matcher = match,
    ) -> None:
        self.config = config if config is not None else resolve(None, ASSIGNMENT_DEFAULTS)
        self._classifier = classifier or LiteralClassifier()
        self._match = matcher

        literal = forbidden_literal_pattern(self.config.forbidden_numerics)
        self._value_patterns: dict[NodeKind, Pattern] = {
            kind: node(kind, literal)
            for kind in (NodeKind.LVASGN, NodeKind.IVASGN, NodeKind.GVASGN, NodeKind.CVASGN)
        }
        self._setter_pattern = node(NodeKind.SEND, node(), literal)
        self._multiple_pattern = node(
            NodeKind.MASGN,
            node(NodeKind.MLHS, Repeat(node(_MULTIPLE_ASSIGNMENT_TARGETS))),
            node(NodeKind.ARRAY, Contains(literal)),
        )
        self._handlers: dict[NodeKind, _Handler] = {
            NodeKind.LVASGN: self._check_local_variable,
            NodeKind.IVASGN: self._check_instance_variable,
            NodeKind.GVASGN: self._check_global_variable,
            NodeKind.CVASGN: self._check_class_variable,
            NodeKind.SEND: self._check_setter,
            NodeKind.MASGN: self._check_multiple_assignment,
        }

    def evaluate(
        self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...] = ()
    ) -> Optional[Diagnostic]:
        handler = self._handlers.get(node.kind)
        if handler is None:
            return None
        return handler(node, ancestors)

    def _check_local_variable(self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> Optional[Diagnostic]:
        return self._check_variable(node, LOCAL_VARIABLES, LOCAL_VARIABLE)

    def _check_instance_variable(self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> Optional[Diagnostic]:
        if not within_method(ancestors):
            return None
        return self._check_variable(node, INSTANCE_VARIABLES, INSTANCE_VARIABLE)

    def _check_global_variable(self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> Optional[Diagnostic]:
        return self._check_variable(node, GLOBAL_VARIABLES, GLOBAL_VARIABLE)

    def _check_class_variable(self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> Optional[Diagnostic]:
        return self._check_variable(node, CLASS_VARIABLES, CLASS_VARIABLE)

    def _check_setter(self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> Optional[Diagnostic]:
        if self.config.allows_assignment(PROPERTIES) or not is_setter_name(node.name):
            return None
        return self._report_if_offending(node, self._setter_pattern, PROPERTY)

    def _check_multiple_assignment(self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> Optional[Diagnostic]:
        if self.config.allows_assignment(MULTIPLE_ASSIGNMENTS):
            return None
        targets = node.children[0].children if node.children and node.children[0] is not None else ()
        if targets and all(self._is_allowed_target(target) for target in targets):
            return None
        return self._report_if_offending(node, self._multiple_pattern, MULTIPLE_ASSIGNMENT)

    def _is_allowed_target(self, target: Optional[SyntaxNode]) -> bool:
        """Global and class targets follow their own AllowedAssignments context."""
        context = _TARGET_CONTEXTS.get(target.kind) if target is not None else None
        return context is not None and self.config.allows_assignment(context)

    def _check_variable(
        self, node: SyntaxNode, context: str, definition: MessageDefinition
    ) -> Optional[Diagnostic]:
        # Targets inside a multiple assignment carry no value and never match.
        if self.config.allows_assignment(context):
            return None
        return self._report_if_offending(node, self._value_patterns[node.kind], definition)

    def _report_if_offending(
        self, node: SyntaxNode, pattern: Pattern, definition: MessageDefinition
    ) -> Optional[Diagnostic]:
        result = self._match(node, pattern)
        if not result:
            return None
        if not offending_captures(self._classifier, result.captures, self.config.permitted_values):
            return None
        return Diagnostic.from_definition(self.rule_id, definition, node)
