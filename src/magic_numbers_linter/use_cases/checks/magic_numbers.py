"""Magic number checks (W7201-W7210)."""

from typing import TYPE_CHECKING, Optional

import astroid  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from magic_numbers_linter.domain.config import ConfigurationLoader
from magic_numbers_linter.domain.messages import build_pylint_msgs
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.domain.rules.catalog import build_rules
from magic_numbers_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from magic_numbers_linter.use_cases.inspect_tree import InspectTreeUseCase


class MagicNumbersChecker(BaseChecker):
    """W7201-W7210: bare numeric literals in arguments, assignments, defaults and returns."""

    name: str = "magic-numbers"
    msgs = build_pylint_msgs()

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: Optional[AstroidGateway] = None,
        config_loader: Optional[ConfigurationLoader] = None,
        classifier: Optional[LiteralClassifier] = None,
    ) -> None:
        super().__init__(linter)
        self._ast_gateway = ast_gateway or AstroidGateway()
        self.config_loader = config_loader or ConfigurationLoader()
        self._classifier = classifier or LiteralClassifier()
        self._inspector: Optional[InspectTreeUseCase] = None

    @property
    def inspector(self) -> InspectTreeUseCase:
        """Rules are built on first use so configuration errors surface while linting."""
        if self._inspector is None:
            self._inspector = InspectTreeUseCase(build_rules(self.config_loader, self._classifier))
        return self._inspector

    def visit_module(self, node: astroid.nodes.Module) -> None:
        """Lower the module once and report every diagnostic at its source node."""
        inspector = self.inspector
        root = self._ast_gateway.lower(node)
        for diagnostic in inspector.execute(root):
            origin = diagnostic.node.origin
            self.add_message(diagnostic.symbol, node=origin if origin is not None else node)
