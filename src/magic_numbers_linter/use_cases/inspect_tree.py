"""Single-pass inspection of a syntax tree with a set of magic number rules."""

import logging
from collections.abc import Sequence

from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode
from magic_numbers_linter.domain.rules import DiagnosticCollector, MagicNumberRule

logger = logging.getLogger(__name__)


class InspectTreeUseCase:
    """
    Walk a tree once and let every rule evaluate the nodes it cares about.

    Rules are independent detectors: a node may yield one diagnostic per rule
    and nothing is merged or suppressed across rules.
    """

    def __init__(self, rules: Sequence[MagicNumberRule]) -> None:
        self._rules = tuple(rules)
        self._dispatch: dict[NodeKind, tuple[MagicNumberRule, ...]] = {
            kind: tuple(rule for rule in self._rules if kind in rule.node_kinds)
            for kind in NodeKind
        }

    @property
    def rules(self) -> tuple[MagicNumberRule, ...]:
        return self._rules

    def execute(self, root: SyntaxNode) -> DiagnosticCollector:
        """Inspect ``root`` and return the diagnostics in traversal order."""
        collector = DiagnosticCollector()
        for node, ancestors in root.walk():
            for rule in self._dispatch[node.kind]:
                diagnostic = rule.evaluate(node, ancestors)
                if diagnostic is not None:
                    collector.add(diagnostic)
        logger.debug("Inspection produced %d magic number diagnostics", len(collector))
        return collector
