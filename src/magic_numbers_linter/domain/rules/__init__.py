"""Domain models for magic number rules and their diagnostics."""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol

from magic_numbers_linter.domain.config import RuleConfig
from magic_numbers_linter.domain.messages import MessageDefinition
from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode
from magic_numbers_linter.domain.numerics import ForbiddenNumericSet, LiteralClassifier, Number
from magic_numbers_linter.domain.patterns import Capture, Captured, Pattern, either, node

_SETTER_NAME = re.compile(r"^[A-Za-z_]\w*=$")
INDEX_ASSIGNMENT: str = "[]="


@dataclass(frozen=True)
class Diagnostic:
    """A single reported offense."""

    rule_id: str
    message: str
    node: SyntaxNode
    symbol: str

    @classmethod
    def from_definition(cls, rule_id: str, definition: MessageDefinition, node: SyntaxNode) -> "Diagnostic":
        return cls(rule_id=rule_id, message=definition.text, node=node, symbol=definition.symbol)


class MagicNumberRule(Protocol):
    """A detector evaluated once per node of the kinds it cares about."""

    rule_id: str
    description: str
    node_kinds: frozenset[NodeKind]
    config: RuleConfig

    def evaluate(
        self, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...] = ()
    ) -> Optional[Diagnostic]:
        """Return a diagnostic when ``node`` is an offense, otherwise None."""
        ...


class DiagnosticCollector:
    """Append-only record of the diagnostics raised during one traversal."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))

    def __len__(self) -> int:
        return len(self._diagnostics)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def by_rule(self, rule_id: str) -> list[Diagnostic]:
        return [diagnostic for diagnostic in self._diagnostics if diagnostic.rule_id == rule_id]

    def messages(self) -> list[str]:
        return [diagnostic.message for diagnostic in self._diagnostics]


def forbidden_literal_pattern(forbidden: ForbiddenNumericSet) -> Pattern:
    """Capturing pattern for a forbidden literal, bare or under unary minus."""
    literal = node(forbidden.node_kinds)
    return Capture(either(literal, node(NodeKind.NEGATE, literal)))


def offending_captures(
    classifier: LiteralClassifier,
    captures: tuple[Captured, ...],
    permitted: frozenset[Number],
) -> list[Captured]:
    """Captured literals whose decoded value is not permitted."""
    return [
        captured
        for captured in captures
        if classifier.literal_value(captured.node) not in permitted
    ]


def is_setter_name(name: Optional[str]) -> bool:
    """True for ``attr=`` style names; operators such as ``==`` or ``+=`` are not setters."""
    return bool(name) and _SETTER_NAME.match(name) is not None


def is_index_assignment(name: Optional[str]) -> bool:
    """True for item assignment such as ``items[0] = value`` or ``items[0] += step``."""
    return name == INDEX_ASSIGNMENT


def is_operator_name(name: Optional[str]) -> bool:
    """True for single-character operator calls such as ``+`` or ``<``."""
    return name is not None and len(name) == 1 and not (name.isalnum() or name == "_")


def within_method(ancestors: tuple[SyntaxNode, ...]) -> bool:
    return any(ancestor.kind is NodeKind.DEF for ancestor in ancestors)
