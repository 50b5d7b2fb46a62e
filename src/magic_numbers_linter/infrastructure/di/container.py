from typing import Any, Optional, cast

from magic_numbers_linter.domain.config import ConfigurationLoader
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.infrastructure.config_file_loader import ConfigFileLoader
from magic_numbers_linter.infrastructure.gateways.astroid_gateway import AstroidGateway


class MagicNumbersContainer:
    """Dependency Injection Container for the magic number linter."""

    _instance: Optional["MagicNumbersContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations."""
        config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("LiteralClassifier", LiteralClassifier())

    @classmethod
    def get_instance(cls) -> "MagicNumbersContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next lookup re-reads configuration."""
        cls._instance = None

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise ValueError(f"Dependency '{key}' not registered.")
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))

    def get_classifier(self) -> LiteralClassifier:
        return cast(LiteralClassifier, self.get("LiteralClassifier"))
