from unittest.mock import MagicMock

import pytest

from magic_numbers_linter.domain.config import ConfigurationLoader
from magic_numbers_linter.infrastructure.checker import register
from magic_numbers_linter.infrastructure.di.container import MagicNumbersContainer
from magic_numbers_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from magic_numbers_linter.use_cases.checks.magic_numbers import MagicNumbersChecker


class TestMagicNumbersContainer:
    def test_registers_defaults(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.magic-numbers]\nPermittedValues = [0]\n")
        monkeypatch.chdir(tmp_path)
        container = MagicNumbersContainer()
        assert isinstance(container.get_astroid_gateway(), AstroidGateway)
        assert isinstance(container.get_config_loader(), ConfigurationLoader)
        assert container.get_config_loader().config == {"PermittedValues": [0]}

    def test_get_instance_is_shared_until_reset(self) -> None:
        first = MagicNumbersContainer.get_instance()
        assert MagicNumbersContainer.get_instance() is first
        MagicNumbersContainer.reset()
        assert MagicNumbersContainer.get_instance() is not first

    def test_register_and_get_singleton(self) -> None:
        container = MagicNumbersContainer()
        dependency = {"foo": "bar"}
        container.register_singleton("MockDep", dependency)
        assert container.get("MockDep") is dependency

    def test_get_missing_dependency_raises_error(self) -> None:
        container = MagicNumbersContainer()
        with pytest.raises(ValueError, match=r"Dependency 'Missing' not registered\."):
            container.get("Missing")


def test_register_adds_checker() -> None:
    linter = MagicMock()
    register(linter)
    linter.register_checker.assert_called_once()
    (checker,) = linter.register_checker.call_args.args
    assert isinstance(checker, MagicNumbersChecker)
    container = MagicNumbersContainer.get_instance()
    assert checker.config_loader is container.get_config_loader()
