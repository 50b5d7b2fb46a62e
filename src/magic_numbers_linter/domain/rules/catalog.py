"""The built-in magic number rules and their configuration defaults."""

from dataclasses import dataclass
from typing import Callable, Optional

from magic_numbers_linter.domain.config import (
    ARGUMENT_DEFAULTS,
    ASSIGNMENT_DEFAULTS,
    DEFAULT_VALUE_DEFAULTS,
    RETURN_DEFAULTS,
    ConfigurationLoader,
    RuleConfig,
)
from magic_numbers_linter.domain.messages import (
    RULE_NO_ARGUMENT,
    RULE_NO_ASSIGNMENT,
    RULE_NO_DEFAULT,
    RULE_NO_RETURN,
)
from magic_numbers_linter.domain.numerics import LiteralClassifier
from magic_numbers_linter.domain.rules import MagicNumberRule
from magic_numbers_linter.domain.rules.argument import ArgumentRule
from magic_numbers_linter.domain.rules.assignment import AssignmentRule
from magic_numbers_linter.domain.rules.default_value import DefaultValueRule
from magic_numbers_linter.domain.rules.return_value import ReturnRule


@dataclass(frozen=True)
class RuleDefinition:
    rule_id: str
    factory: Callable[[RuleConfig, LiteralClassifier], MagicNumberRule]
    defaults: dict[str, object]


RULE_DEFINITIONS: tuple[RuleDefinition, ...] = (
    RuleDefinition(RULE_NO_ARGUMENT, ArgumentRule, ARGUMENT_DEFAULTS),
    RuleDefinition(RULE_NO_ASSIGNMENT, AssignmentRule, ASSIGNMENT_DEFAULTS),
    RuleDefinition(RULE_NO_DEFAULT, DefaultValueRule, DEFAULT_VALUE_DEFAULTS),
    RuleDefinition(RULE_NO_RETURN, ReturnRule, RETURN_DEFAULTS),
)


def build_rules(
    config_loader: Optional[ConfigurationLoader] = None,
    classifier: Optional[LiteralClassifier] = None,
) -> list[MagicNumberRule]:
    """
    Resolve each rule's configuration and build the enabled rules.

    Raises:
        ConfigurationError: when any rule's options are malformed.
    """
    loader = config_loader or ConfigurationLoader()
    shared_classifier = classifier or LiteralClassifier()
    rules: list[MagicNumberRule] = []
    for definition in RULE_DEFINITIONS:
        config = loader.rule_config(definition.rule_id, definition.defaults)
        if not config.enabled:
            continue
        rules.append(definition.factory(config, shared_classifier))
    return rules
