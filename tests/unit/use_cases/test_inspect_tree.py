"""Unit tests for InspectTreeUseCase."""

import unittest
from unittest.mock import MagicMock

from magic_numbers_linter.domain.nodes import NodeKind, begin, def_, int_lit, lvar, lvasgn, param, return_, send
from magic_numbers_linter.domain.rules.argument import ArgumentRule
from magic_numbers_linter.domain.rules.assignment import AssignmentRule
from magic_numbers_linter.domain.rules.catalog import build_rules
from magic_numbers_linter.domain.rules.default_value import DefaultValueRule
from magic_numbers_linter.domain.rules.return_value import ReturnRule
from magic_numbers_linter.use_cases.inspect_tree import InspectTreeUseCase


class TestInspectTreeUseCase(unittest.TestCase):
    def test_collects_diagnostics_in_traversal_order(self) -> None:
        tree = def_(
            "method",
            [],
            begin(lvasgn("hours", int_lit(24)), send(None, "sleep", int_lit(5)), return_(int_lit(7))),
        )
        collector = InspectTreeUseCase(build_rules()).execute(tree)
        assert [diagnostic.rule_id for diagnostic in collector] == [
            "MagicNumbers/NoAssignment",
            "MagicNumbers/NoArgument",
            "MagicNumbers/NoReturn",
        ]

    def test_rules_are_independent(self) -> None:
        tree = def_("method", [param(NodeKind.OPTARG, "retries", int_lit(3))], int_lit(42))
        collector = InspectTreeUseCase([DefaultValueRule(), ReturnRule()]).execute(tree)
        assert [diagnostic.rule_id for diagnostic in collector] == [
            "MagicNumbers/NoDefault",
            "MagicNumbers/NoReturn",
        ]

    def test_setter_reported_as_assignment_only(self) -> None:
        tree = send(lvar("obj"), "size=", int_lit(1))
        collector = InspectTreeUseCase([ArgumentRule(), AssignmentRule()]).execute(tree)
        assert collector.messages() == ["Do not use magic numbers to set properties"]

    def test_rules_only_see_their_node_kinds(self) -> None:
        rule = MagicMock()
        rule.node_kinds = frozenset({NodeKind.INT})
        rule.evaluate.return_value = None
        InspectTreeUseCase([rule]).execute(lvasgn("x", int_lit(1)))
        rule.evaluate.assert_called_once()
        node, ancestors = rule.evaluate.call_args.args
        assert node.kind is NodeKind.INT
        assert [ancestor.kind for ancestor in ancestors] == [NodeKind.LVASGN]

    def test_repeated_execution_is_identical(self) -> None:
        use_case = InspectTreeUseCase(build_rules())
        tree = begin(lvasgn("x", int_lit(1)), send(None, "f", int_lit(2)))
        assert use_case.execute(tree).diagnostics == use_case.execute(tree).diagnostics

    def test_exposes_rules(self) -> None:
        rules = build_rules()
        assert InspectTreeUseCase(rules).rules == tuple(rules)
