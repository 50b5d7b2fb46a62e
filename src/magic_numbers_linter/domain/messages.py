"""Rule identifiers and the canonical diagnostic messages."""

from dataclasses import dataclass

RULE_NO_ARGUMENT: str = "MagicNumbers/NoArgument"
RULE_NO_ASSIGNMENT: str = "MagicNumbers/NoAssignment"
RULE_NO_DEFAULT: str = "MagicNumbers/NoDefault"
RULE_NO_RETURN: str = "MagicNumbers/NoReturn"


@dataclass(frozen=True)
class MessageDefinition:
    """A diagnostic message and the pylint msgid/symbol it is reported under."""

    msgid: str
    symbol: str
    text: str
    description: str


LOCAL_VARIABLE = MessageDefinition(
    "W7201",
    "magic-number-local-variable",
    "Do not use magic number local variables",
    "Used when a bare numeric literal is assigned to a local variable.",
)
INSTANCE_VARIABLE = MessageDefinition(
    "W7202",
    "magic-number-instance-variable",
    "Do not use magic number instance variables",
    "Used when a bare numeric literal is assigned to an instance variable inside a method.",
)
PROPERTY = MessageDefinition(
    "W7203",
    "magic-number-property",
    "Do not use magic numbers to set properties",
    "Used when a bare numeric literal is assigned through a setter or attribute.",
)
MULTIPLE_ASSIGNMENT = MessageDefinition(
    "W7204",
    "magic-number-multiple-assignment",
    "Do not use magic numbers in multiple assignments",
    "Used when the right-hand side of a multiple assignment holds a bare numeric literal.",
)
GLOBAL_VARIABLE = MessageDefinition(
    "W7205",
    "magic-number-global-variable",
    "Do not use magic number global variables",
    "Used when a bare numeric literal is assigned to a global and global_variables "
    "is not in AllowedAssignments.",
)
CLASS_VARIABLE = MessageDefinition(
    "W7206",
    "magic-number-class-variable",
    "Do not use magic number class variables",
    "Used when a bare numeric literal is assigned to a class variable and "
    "class_variables is not in AllowedAssignments.",
)
ARGUMENT = MessageDefinition(
    "W7207",
    "magic-number-argument",
    "Do not use magic number arguments to methods",
    "Used when a bare numeric literal is passed as an argument or operand.",
)
UNARY_METHOD = MessageDefinition(
    "W7208",
    "magic-number-unary-method",
    "Do not use magic numbers in unary methods",
    "Used, with DistinguishUnaryMethods enabled, when a bare numeric literal is an "
    "operand of a single-character operator.",
)
OPTIONAL_ARGUMENT_DEFAULT = MessageDefinition(
    "W7209",
    "magic-number-default",
    "Do not use magic number optional argument defaults",
    "Used when a parameter default is a bare numeric literal.",
)
RETURN = MessageDefinition(
    "W7210",
    "magic-number-return",
    "Do not return magic numbers from a method or proc",
    "Used when a method or lambda returns a bare numeric literal.",
)

ALL_MESSAGES: tuple[MessageDefinition, ...] = (
    LOCAL_VARIABLE,
    INSTANCE_VARIABLE,
    PROPERTY,
    MULTIPLE_ASSIGNMENT,
    GLOBAL_VARIABLE,
    CLASS_VARIABLE,
    ARGUMENT,
    UNARY_METHOD,
    OPTIONAL_ARGUMENT_DEFAULT,
    RETURN,
)


def build_pylint_msgs() -> dict[str, tuple[str, str, str]]:
    """Return ``{msgid: (template, symbol, description)}`` for a pylint checker."""
    return {
        definition.msgid: (definition.text, definition.symbol, definition.description)
        for definition in ALL_MESSAGES
    }
