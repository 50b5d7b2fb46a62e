"""Unit tests for the structural pattern matcher."""

import unittest

from magic_numbers_linter.domain.nodes import (
    NodeKind,
    array,
    float_lit,
    int_lit,
    lvar,
    lvasgn,
    masgn,
    negate,
    send,
)
from magic_numbers_linter.domain.patterns import (
    NO_MATCH,
    Capture,
    Contains,
    Node,
    Repeat,
    Rest,
    Wildcard,
    either,
    match,
    node,
)

NUMERIC = node({NodeKind.INT, NodeKind.FLOAT})


class TestNodePatterns(unittest.TestCase):
    def test_kind_set_matches_any_listed_kind(self) -> None:
        assert match(int_lit(3), NUMERIC)
        assert match(float_lit(2.5), NUMERIC)
        assert not match(lvar("x"), NUMERIC)

    def test_empty_kinds_match_any_present_node(self) -> None:
        assert match(lvar("x"), node())
        assert not match(None, node())

    def test_wildcard_matches_absent_receiver(self) -> None:
        call = send(None, "puts", int_lit(1))
        assert match(call, node(NodeKind.SEND, Wildcard(), NUMERIC))

    def test_children_must_match_exactly(self) -> None:
        call = send(None, "foo", int_lit(1), int_lit(2))
        assert not match(call, node(NodeKind.SEND, Wildcard(), NUMERIC))
        assert match(call, node(NodeKind.SEND, Wildcard(), NUMERIC, NUMERIC))

    def test_children_none_skips_children(self) -> None:
        call = send(lvar("a"), "foo", int_lit(1), lvar("b"))
        assert match(call, Node(frozenset({NodeKind.SEND})))

    def test_no_match_is_falsy_without_captures(self) -> None:
        assert not NO_MATCH
        assert NO_MATCH.captures == ()
        assert NO_MATCH.first is None


class TestCapture(unittest.TestCase):
    def test_capture_records_kind_value_and_node(self) -> None:
        literal = int_lit(100)
        result = match(send(None, "foo", literal), node(NodeKind.SEND, Wildcard(), Capture(NUMERIC)))
        assert result
        assert result.first.kind is NodeKind.INT
        assert result.first.value == 100
        assert result.first.node is literal

    def test_captures_dropped_on_failure(self) -> None:
        call = send(None, "foo", int_lit(1), lvar("x"))
        result = match(call, node(NodeKind.SEND, Wildcard(), Capture(NUMERIC), NUMERIC))
        assert not result
        assert result.captures == ()

    def test_either_takes_first_matching_alternative(self) -> None:
        pattern = Capture(either(NUMERIC, node(NodeKind.NEGATE, NUMERIC)))
        negative = negate(int_lit(5))
        result = match(negative, pattern)
        assert result
        assert result.first.node is negative
        assert result.first.kind is NodeKind.NEGATE


class TestSequenceQuantifiers(unittest.TestCase):
    def test_rest_matches_zero_or_more(self) -> None:
        pattern = node(NodeKind.SEND, Wildcard(), Rest())
        assert match(send(None, "foo"), pattern)
        assert match(send(None, "foo", lvar("a"), lvar("b")), pattern)

    def test_rest_backtracks_for_following_pattern(self) -> None:
        pattern = node(NodeKind.SEND, Wildcard(), Rest(), Capture(NUMERIC))
        result = match(send(None, "foo", lvar("a"), int_lit(7)), pattern)
        assert result
        assert result.first.value == 7

    def test_repeat_requires_at_least_one(self) -> None:
        pattern = node(NodeKind.MLHS, Repeat(node(NodeKind.LVASGN)))
        assignment = masgn([lvasgn("a"), lvasgn("b")], array(int_lit(1), int_lit(2)))
        assert match(assignment.children[0], pattern)
        assert not match(masgn([], array()).children[0], pattern)

    def test_repeat_rejects_foreign_element(self) -> None:
        pattern = node(NodeKind.MLHS, Repeat(node(NodeKind.LVASGN)))
        assignment = masgn([lvasgn("a"), lvar("b")], array())
        assert not match(assignment.children[0], pattern)

    def test_repeat_backtracks_to_leave_room(self) -> None:
        pattern = node(NodeKind.ARRAY, Repeat(NUMERIC), Capture(NUMERIC))
        result = match(array(int_lit(1), int_lit(2), int_lit(3)), pattern)
        assert result
        assert [captured.value for captured in result.captures] == [3]

    def test_contains_collects_every_matching_child(self) -> None:
        pattern = node(NodeKind.ARRAY, Contains(Capture(NUMERIC)))
        result = match(array(int_lit(1), lvar("x"), float_lit(2.0)), pattern)
        assert result
        assert [captured.value for captured in result.captures] == [1, 2.0]

    def test_contains_requires_one_match(self) -> None:
        pattern = node(NodeKind.ARRAY, Contains(NUMERIC))
        assert not match(array(lvar("x")), pattern)
        assert not match(array(), pattern)

    def test_matching_is_deterministic(self) -> None:
        pattern = node(NodeKind.SEND, Wildcard(), Contains(Capture(NUMERIC)))
        call = send(lvar("a"), "foo", int_lit(1), int_lit(2))
        assert match(call, pattern) == match(call, pattern)
