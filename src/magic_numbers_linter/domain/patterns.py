"""
Declarative structural patterns over SyntaxNode trees.

Patterns are plain frozen data. A rule builds its patterns once and asks
``match`` whether a subject node has the described shape:

    Node({INT, FLOAT})                        any numeric literal (int float)
    Node(SEND, (Wildcard(), Capture(...)))    a call with exactly one argument
    Node(MLHS, (Repeat(Node(LVASGN)),))       one or more local targets
    Node(ARRAY, (Contains(Node(INT)),))       an array holding an integer

The matcher knows nothing about magic numbers or configuration.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Union

from magic_numbers_linter.domain.nodes import NodeKind, SyntaxNode


@dataclass(frozen=True)
class Wildcard:
    """Matches exactly one position, whatever it holds (even an absent receiver)."""


@dataclass(frozen=True)
class Rest:
    """Matches zero or more remaining children."""


@dataclass(frozen=True)
class Node:
    """
    Matches a present node whose kind is one of ``kinds``.

    An empty ``kinds`` accepts any kind. ``children=None`` skips the children,
    otherwise the child sequence must match element by element.
    """

    kinds: frozenset[NodeKind] = frozenset()
    children: Optional[tuple["Pattern", ...]] = None


@dataclass(frozen=True)
class Capture:
    """Records the subject matched by ``inner``."""

    inner: "Pattern" = Wildcard()


@dataclass(frozen=True)
class Either:
    """Matches when any alternative matches; the first success wins."""

    alternatives: tuple["Pattern", ...]


@dataclass(frozen=True)
class Repeat:
    """Matches a run of one or more children, each matching ``inner``."""

    inner: "Pattern"


@dataclass(frozen=True)
class Contains:
    """Consumes the remaining children; at least one of them must match ``inner``."""

    inner: "Pattern"


Pattern = Union[Wildcard, Rest, Node, Capture, Either, Repeat, Contains]


@dataclass(frozen=True)
class Captured:
    kind: Optional[NodeKind]
    value: Any
    node: Optional[SyntaxNode]


@dataclass(frozen=True)
class MatchResult:
    matched: bool
    captures: tuple[Captured, ...] = ()

    def __bool__(self) -> bool:
        return self.matched

    @property
    def first(self) -> Optional[Captured]:
        return self.captures[0] if self.captures else None


NO_MATCH = MatchResult(False)

Matcher = Callable[[Optional[SyntaxNode], Pattern], MatchResult]

_Captures = list[Captured]


def node(kinds: Union[NodeKind, Iterable[NodeKind], None] = None, *children: Pattern) -> Node:
    """Shorthand for Node: ``node(SEND, Wildcard(), Rest())``; no children means any children."""
    if kinds is None:
        kind_set: frozenset[NodeKind] = frozenset()
    elif isinstance(kinds, NodeKind):
        kind_set = frozenset({kinds})
    else:
        kind_set = frozenset(kinds)
    return Node(kind_set, tuple(children) if children else None)


def either(*alternatives: Pattern) -> Either:
    return Either(tuple(alternatives))


def match(subject: Optional[SyntaxNode], pattern: Pattern) -> MatchResult:
    """Match ``subject`` against ``pattern``; captures are kept only on success."""
    captures = _match_one(subject, pattern)
    if captures is None:
        return NO_MATCH
    return MatchResult(True, tuple(captures))


def _match_one(subject: Optional[SyntaxNode], pattern: Pattern) -> Optional[_Captures]:
    if isinstance(pattern, Wildcard):
        return []
    if isinstance(pattern, Node):
        if subject is None:
            return None
        if pattern.kinds and subject.kind not in pattern.kinds:
            return None
        if pattern.children is None:
            return []
        return _match_sequence(subject.children, 0, pattern.children, 0)
    if isinstance(pattern, Capture):
        inner = _match_one(subject, pattern.inner)
        if inner is None:
            return None
        captured = Captured(
            kind=subject.kind if subject is not None else None,
            value=subject.value if subject is not None else None,
            node=subject,
        )
        return [captured, *inner]
    if isinstance(pattern, Either):
        for alternative in pattern.alternatives:
            result = _match_one(subject, alternative)
            if result is not None:
                return result
        return None
    # Sequence quantifiers used outside a child list apply to the single subject.
    return _match_sequence((subject,), 0, (pattern,), 0)


def _match_sequence(
    subjects: tuple[Optional[SyntaxNode], ...],
    start: int,
    patterns: tuple[Pattern, ...],
    index: int,
) -> Optional[_Captures]:
    if index == len(patterns):
        return [] if start == len(subjects) else None

    pattern = patterns[index]

    if isinstance(pattern, Rest):
        for stop in range(len(subjects), start - 1, -1):
            tail = _match_sequence(subjects, stop, patterns, index + 1)
            if tail is not None:
                return tail
        return None

    if isinstance(pattern, Repeat):
        run: list[_Captures] = []
        for subject in subjects[start:]:
            element = _match_one(subject, pattern.inner)
            if element is None:
                break
            run.append(element)
        for length in range(len(run), 0, -1):
            tail = _match_sequence(subjects, start + length, patterns, index + 1)
            if tail is not None:
                return [captured for element in run[:length] for captured in element] + tail
        return None

    if isinstance(pattern, Contains):
        found: _Captures = []
        any_match = False
        for subject in subjects[start:]:
            element = _match_one(subject, pattern.inner)
            if element is not None:
                any_match = True
                found.extend(element)
        if not any_match:
            return None
        tail = _match_sequence(subjects, len(subjects), patterns, index + 1)
        if tail is None:
            return None
        return found + tail

    if start >= len(subjects):
        return None
    head = _match_one(subjects[start], pattern)
    if head is None:
        return None
    tail = _match_sequence(subjects, start + 1, patterns, index + 1)
    if tail is None:
        return None
    return head + tail
