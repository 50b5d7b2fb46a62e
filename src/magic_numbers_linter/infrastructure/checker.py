"""
Pylint plugin entry point - composition root for the magic number checker.
Lives in infrastructure as it creates the container and wires dependencies.
"""

from pylint.lint import PyLinter

from magic_numbers_linter.infrastructure.di.container import MagicNumbersContainer
from magic_numbers_linter.use_cases.checks.magic_numbers import MagicNumbersChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = MagicNumbersContainer.get_instance()
    linter.register_checker(
        MagicNumbersChecker(
            linter,
            ast_gateway=container.get_astroid_gateway(),
            config_loader=container.get_config_loader(),
            classifier=container.get_classifier(),
        )
    )
