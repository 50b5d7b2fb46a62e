"""Unit tests for ArgumentRule (W7207/W7208)."""

import unittest

from magic_numbers_linter.domain.config import ARGUMENT_DEFAULTS, resolve
from magic_numbers_linter.domain.nodes import (
    NodeKind,
    SyntaxNode,
    float_lit,
    int_lit,
    lvar,
    negate,
    pair,
    send,
)
from magic_numbers_linter.domain.rules.argument import ArgumentRule

ARGUMENT_MSG = "Do not use magic number arguments to methods"
UNARY_MSG = "Do not use magic numbers in unary methods"


def _rule(**options: object) -> ArgumentRule:
    return ArgumentRule(resolve(options, ARGUMENT_DEFAULTS))


class TestArgumentRule(unittest.TestCase):
    def test_method_argument_flagged(self) -> None:
        call = send(lvar("foo"), "bar", int_lit(1))
        diagnostic = _rule(IgnoredMethods=[]).evaluate(call)
        assert diagnostic is not None
        assert diagnostic.message == ARGUMENT_MSG
        assert diagnostic.rule_id == "MagicNumbers/NoArgument"
        assert diagnostic.node is call

    def test_ignored_method_not_flagged(self) -> None:
        call = send(lvar("foo"), "bar", int_lit(1))
        assert _rule(IgnoredMethods=["bar"]).evaluate(call) is None

    def test_subscript_ignored_by_default(self) -> None:
        call = send(lvar("items"), "[]", int_lit(0))
        assert ArgumentRule().evaluate(call) is None
        assert _rule(IgnoredMethods=[]).evaluate(call) is not None

    def test_receiverless_call_flagged(self) -> None:
        assert ArgumentRule().evaluate(send(None, "sleep", float_lit(0.5))) is not None

    def test_literal_among_several_arguments(self) -> None:
        call = send(None, "resize", lvar("image"), int_lit(640), lvar("height"))
        assert ArgumentRule().evaluate(call) is not None

    def test_keyword_argument_flagged(self) -> None:
        call = send(None, "connect", pair("timeout", int_lit(30)))
        assert ArgumentRule().evaluate(call) is not None

    def test_both_operands_of_binary_operator(self) -> None:
        rule = ArgumentRule()
        assert rule.evaluate(send(lvar("x"), "+", int_lit(1))) is not None
        assert rule.evaluate(send(int_lit(1), "+", lvar("x"))) is not None

    def test_negative_literal_argument(self) -> None:
        assert ArgumentRule().evaluate(send(None, "offset", negate(int_lit(3)))) is not None

    def test_non_literal_arguments_not_flagged(self) -> None:
        rule = ArgumentRule()
        assert rule.evaluate(send(lvar("x"), "+", lvar("y"))) is None
        assert rule.evaluate(send(None, "run")) is None
        assert rule.evaluate(send(None, "flag", SyntaxNode(NodeKind.LITERAL, raw="True"))) is None

    def test_permitted_values(self) -> None:
        rule = _rule(PermittedValues=[0, 1])
        assert rule.evaluate(send(lvar("x"), "+", int_lit(1))) is None
        assert rule.evaluate(send(lvar("x"), "+", int_lit(2))) is not None

    def test_permitted_value_does_not_permit_its_negation(self) -> None:
        rule = _rule(PermittedValues=[1])
        assert rule.evaluate(send(None, "step", negate(int_lit(1)))) is not None

    def test_any_unpermitted_literal_is_enough(self) -> None:
        rule = _rule(PermittedValues=[0])
        assert rule.evaluate(send(None, "clamp", int_lit(0), int_lit(255))) is not None

    def test_forbidden_numerics_float(self) -> None:
        rule = _rule(ForbiddenNumerics="Float")
        assert rule.evaluate(send(None, "foo", int_lit(1))) is None
        assert rule.evaluate(send(None, "foo", float_lit(1.5))) is not None

    def test_setter_left_to_assignment_rule(self) -> None:
        assert ArgumentRule().evaluate(send(lvar("obj"), "size=", int_lit(1))) is None

    def test_index_assignment_not_flagged(self) -> None:
        rule = _rule(IgnoredMethods=[])
        assert rule.evaluate(send(lvar("items"), "[]=", int_lit(0), lvar("value"))) is None
        assert rule.evaluate(send(lvar("items"), "[]=", int_lit(0))) is None

    def test_other_node_kinds_ignored(self) -> None:
        assert ArgumentRule().evaluate(int_lit(1)) is None

    def test_unary_message_for_operators(self) -> None:
        rule = _rule(DistinguishUnaryMethods=True)
        assert rule.evaluate(send(lvar("x"), "*", int_lit(2))).message == UNARY_MSG
        assert rule.evaluate(send(lvar("x"), "**", int_lit(2))).message == ARGUMENT_MSG
        assert rule.evaluate(send(None, "f", int_lit(2))).message == ARGUMENT_MSG

    def test_operators_use_argument_message_by_default(self) -> None:
        assert ArgumentRule().evaluate(send(lvar("x"), "*", int_lit(2))).message == ARGUMENT_MSG

    def test_idempotent(self) -> None:
        rule = ArgumentRule()
        call = send(lvar("foo"), "bar", int_lit(1), int_lit(2))
        assert rule.evaluate(call) == rule.evaluate(call)
