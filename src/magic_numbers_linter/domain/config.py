"""Rule configuration: defaults, overrides and validation."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from magic_numbers_linter.domain.numerics import ForbiddenNumericSet, Number

logger = logging.getLogger(__name__)

FORBIDDEN_NUMERICS: str = "ForbiddenNumerics"
PERMITTED_VALUES: str = "PermittedValues"
PERMITTED_RETURN_VALUES: str = "PermittedReturnValues"
IGNORED_METHODS: str = "IgnoredMethods"
ALLOWED_ASSIGNMENTS: str = "AllowedAssignments"
ALLOWED_RETURNS: str = "AllowedReturns"
DISTINGUISH_UNARY_METHODS: str = "DistinguishUnaryMethods"
ENABLED: str = "Enabled"

CLASS_VARIABLES: str = "class_variables"
GLOBAL_VARIABLES: str = "global_variables"
LOCAL_VARIABLES: str = "local_variables"
INSTANCE_VARIABLES: str = "instance_variables"
PROPERTIES: str = "properties"
MULTIPLE_ASSIGNMENTS: str = "multiple_assignments"

ASSIGNMENT_CONTEXTS: frozenset[str] = frozenset(
    {
        CLASS_VARIABLES,
        GLOBAL_VARIABLES,
        LOCAL_VARIABLES,
        INSTANCE_VARIABLES,
        PROPERTIES,
        MULTIPLE_ASSIGNMENTS,
    }
)

RETURN_EXPLICIT: str = "Explicit"
RETURN_IMPLICIT: str = "Implicit"
RETURN_NONE: str = "None"
RETURN_FORMS: frozenset[str] = frozenset({RETURN_EXPLICIT, RETURN_IMPLICIT, RETURN_NONE})

BASE_DEFAULTS: dict[str, object] = {
    FORBIDDEN_NUMERICS: ForbiddenNumericSet.ALL.value,
    PERMITTED_VALUES: [],
    PERMITTED_RETURN_VALUES: [],
    IGNORED_METHODS: [],
    ALLOWED_ASSIGNMENTS: [],
    ALLOWED_RETURNS: [],
    DISTINGUISH_UNARY_METHODS: False,
    ENABLED: True,
}

ARGUMENT_DEFAULTS: dict[str, object] = {IGNORED_METHODS: ["[]"]}
ASSIGNMENT_DEFAULTS: dict[str, object] = {ALLOWED_ASSIGNMENTS: [CLASS_VARIABLES, GLOBAL_VARIABLES]}
DEFAULT_VALUE_DEFAULTS: dict[str, object] = {}
RETURN_DEFAULTS: dict[str, object] = {ALLOWED_RETURNS: []}


class ConfigurationError(ValueError):
    """A rule option has the wrong shape or contradicts another option."""


@dataclass(frozen=True)
class RuleConfig:
    """Resolved, validated options for one rule instance."""

    forbidden_numerics: ForbiddenNumericSet = ForbiddenNumericSet.ALL
    permitted_values: frozenset[Number] = frozenset()
    permitted_return_values: frozenset[Number] = frozenset()
    ignored_methods: frozenset[str] = frozenset()
    allowed_assignments: frozenset[str] = frozenset()
    allowed_returns: frozenset[str] = frozenset()
    distinguish_unary_methods: bool = False
    enabled: bool = True

    def allows_assignment(self, context: str) -> bool:
        return context in self.allowed_assignments

    def allows_return(self, form: str) -> bool:
        return form in self.allowed_returns


def resolve(
    raw_options: Optional[Mapping[str, object]],
    defaults: Optional[Mapping[str, object]] = None,
) -> RuleConfig:
    """
    Merge rule defaults with supplied overrides and validate the result.

    Overrides replace defaults key by key (an explicit empty IgnoredMethods
    clears the default list). Unknown keys are ignored.

    Raises:
        ConfigurationError: when a recognized option has the wrong shape.
    """
    merged: dict[str, object] = dict(BASE_DEFAULTS)
    merged.update(defaults or {})
    for key, value in (raw_options or {}).items():
        if key not in BASE_DEFAULTS:
            logger.debug("Ignoring unknown magic number option %r", key)
            continue
        merged[key] = value

    return RuleConfig(
        forbidden_numerics=_forbidden_numerics(merged[FORBIDDEN_NUMERICS]),
        permitted_values=_numbers(PERMITTED_VALUES, merged[PERMITTED_VALUES]),
        permitted_return_values=_numbers(PERMITTED_RETURN_VALUES, merged[PERMITTED_RETURN_VALUES]),
        ignored_methods=_strings(IGNORED_METHODS, merged[IGNORED_METHODS]),
        allowed_assignments=_choices(ALLOWED_ASSIGNMENTS, merged[ALLOWED_ASSIGNMENTS], ASSIGNMENT_CONTEXTS),
        allowed_returns=_allowed_returns(merged[ALLOWED_RETURNS]),
        distinguish_unary_methods=_flag(DISTINGUISH_UNARY_METHODS, merged[DISTINGUISH_UNARY_METHODS]),
        enabled=_flag(ENABLED, merged[ENABLED]),
    )


def _forbidden_numerics(value: object) -> ForbiddenNumericSet:
    if not isinstance(value, str):
        raise ConfigurationError(f"{FORBIDDEN_NUMERICS} must be a string, got {value!r}")
    try:
        return ForbiddenNumericSet.from_option(value)
    except ValueError:
        choices = ", ".join(member.value for member in ForbiddenNumericSet)
        raise ConfigurationError(
            f"{FORBIDDEN_NUMERICS} must be one of {choices}, got {value!r}"
        ) from None


def _as_list(key: str, value: object) -> list[object]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    raise ConfigurationError(f"{key} must be a list, got {value!r}")


def _numbers(key: str, value: object) -> frozenset[Number]:
    numbers: set[Number] = set()
    for item in _as_list(key, value):
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ConfigurationError(f"{key} entries must be numbers, got {item!r}")
        numbers.add(item)
    return frozenset(numbers)


def _strings(key: str, value: object) -> frozenset[str]:
    items = _as_list(key, value)
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError(f"{key} entries must be strings, got {item!r}")
    return frozenset(str(item) for item in items)


def _choices(key: str, value: object, allowed: frozenset[str]) -> frozenset[str]:
    items = _strings(key, value)
    unknown = items - allowed
    if unknown:
        joined = ", ".join(sorted(unknown))
        choices = ", ".join(sorted(allowed))
        raise ConfigurationError(f"Unknown {key} values: {joined}. Expected any of: {choices}")
    return items


def _allowed_returns(value: object) -> frozenset[str]:
    forms = _choices(ALLOWED_RETURNS, value, RETURN_FORMS)
    if RETURN_NONE in forms and len(forms) > 1:
        raise ConfigurationError(
            f"{ALLOWED_RETURNS} cannot combine {RETURN_NONE!r} with other return forms"
        )
    return forms - {RETURN_NONE}


def _flag(key: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{key} must be true or false, got {value!r}")
    return value


class ConfigurationLoader:
    """
    Per-rule option lookup over the raw ``[tool.magic-numbers]`` table.

    Top-level scalar and list keys are shared by every rule; a sub-table named
    after the rule (``NoArgument``) or its full id (``MagicNumbers/NoArgument``)
    overrides them for that rule.
    """

    def __init__(self, config: Optional[Mapping[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})

    @property
    def config(self) -> dict[str, object]:
        return self._config

    def rule_options(self, rule_id: str) -> dict[str, object]:
        """Return the raw options for one rule, shared keys first."""
        options: dict[str, object] = {
            key: value for key, value in self._config.items() if not isinstance(value, Mapping)
        }
        short_name = rule_id.rsplit("/", 1)[-1]
        for table_name in (short_name, rule_id):
            table = self._config.get(table_name)
            if table is None:
                continue
            if not isinstance(table, Mapping):
                raise ConfigurationError(f"Options for {table_name} must be a table, got {table!r}")
            options.update(table)
        return options

    def rule_config(self, rule_id: str, defaults: Optional[Mapping[str, object]] = None) -> RuleConfig:
        """Resolve the options of one rule against its defaults."""
        return resolve(self.rule_options(rule_id), defaults)
