"""Unit tests for ReturnRule (W7210)."""

import unittest

import pytest

from magic_numbers_linter.domain.config import RETURN_DEFAULTS, ConfigurationError, resolve
from magic_numbers_linter.domain.nodes import (
    NodeKind,
    SyntaxNode,
    begin,
    def_,
    float_lit,
    int_lit,
    lvar,
    lvasgn,
    negate,
    return_,
    send,
)
from magic_numbers_linter.domain.rules.return_value import MAX_IMPLICIT_RETURN_DEPTH, ReturnRule

RETURN_MSG = "Do not return magic numbers from a method or proc"


def _rule(**options: object) -> ReturnRule:
    return ReturnRule(resolve(options, RETURN_DEFAULTS))


class TestImplicitReturns(unittest.TestCase):
    def test_last_expression_literal_flagged(self) -> None:
        literal = int_lit(42)
        definition = def_("answer", [], begin(send(None, "log"), literal))
        diagnostic = ReturnRule().evaluate(definition)
        assert diagnostic is not None
        assert diagnostic.message == RETURN_MSG
        assert diagnostic.node is literal

    def test_single_statement_body(self) -> None:
        assert ReturnRule().evaluate(def_("answer", [], float_lit(4.2))) is not None

    def test_nested_begin_unwrapped(self) -> None:
        body = begin(send(None, "log"), begin(lvasgn("x", lvar("y")), int_lit(42)))
        assert ReturnRule().evaluate(def_("answer", [], body)) is not None

    def test_literal_not_last_is_not_a_return(self) -> None:
        body = begin(int_lit(42), send(None, "log"))
        assert ReturnRule().evaluate(def_("answer", [], body)) is None

    def test_conditional_branches_not_entered(self) -> None:
        branch = SyntaxNode(NodeKind.IF, (lvar("flag"), int_lit(1), int_lit(2)))
        assert ReturnRule().evaluate(def_("pick", [], branch)) is None

    def test_empty_body(self) -> None:
        assert ReturnRule().evaluate(def_("noop", [])) is None

    def test_allowed_implicit(self) -> None:
        assert _rule(AllowedReturns=["Implicit"]).evaluate(def_("answer", [], int_lit(42))) is None

    def test_depth_bound(self) -> None:
        body: SyntaxNode = int_lit(42)
        for _ in range(MAX_IMPLICIT_RETURN_DEPTH + 1):
            body = begin(body)
        assert ReturnRule().evaluate(def_("deep", [], body)) is None


class TestExplicitReturns(unittest.TestCase):
    def test_explicit_return_flagged(self) -> None:
        literal = negate(int_lit(1))
        diagnostic = ReturnRule().evaluate(return_(literal))
        assert diagnostic is not None
        assert diagnostic.node is literal

    def test_bare_return_not_flagged(self) -> None:
        assert ReturnRule().evaluate(return_()) is None
        assert ReturnRule().evaluate(return_(lvar("value"))) is None

    def test_allowed_explicit(self) -> None:
        rule = _rule(AllowedReturns=["Explicit"])
        assert rule.evaluate(return_(int_lit(1))) is None
        assert rule.evaluate(def_("answer", [], int_lit(42))) is not None

    def test_allowed_none_exempts_nothing(self) -> None:
        rule = _rule(AllowedReturns=["None"])
        assert rule.evaluate(return_(int_lit(1))) is not None

    def test_permitted_return_values(self) -> None:
        rule = _rule(PermittedReturnValues=[0, -1])
        assert rule.evaluate(return_(int_lit(0))) is None
        assert rule.evaluate(return_(negate(int_lit(1)))) is None
        assert rule.evaluate(return_(int_lit(1))) is not None

    def test_permitted_values_do_not_apply_to_returns(self) -> None:
        assert _rule(PermittedValues=[0]).evaluate(return_(int_lit(0))) is not None

    def test_contradictory_config_raises_at_construction(self) -> None:
        with pytest.raises(ConfigurationError):
            _rule(AllowedReturns=["None", "Implicit"])

    def test_idempotent(self) -> None:
        rule = ReturnRule()
        definition = def_("answer", [], int_lit(42))
        assert rule.evaluate(definition) == rule.evaluate(definition)
