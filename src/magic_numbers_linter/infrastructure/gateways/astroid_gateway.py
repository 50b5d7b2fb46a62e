"""Lowering of astroid trees into the host-neutral SyntaxNode model."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import astroid  # type: ignore[import-untyped]

from magic_numbers_linter.domain.nodes import (
    NodeKind,
    SyntaxNode,
    array,
    assign,
    begin,
    def_,
    float_lit,
    int_lit,
    lvar,
    masgn,
    negate,
    pair,
    param,
    return_,
    self_node,
    send,
)

logger = logging.getLogger(__name__)

_SCOPE_NODES = (
    astroid.nodes.FunctionDef,
    astroid.nodes.AsyncFunctionDef,
    astroid.nodes.ClassDef,
    astroid.nodes.Lambda,
)

_SCOPE_MODULE: str = "module"
_SCOPE_FUNCTION: str = "function"
_SCOPE_CLASS: str = "class"


@dataclass(frozen=True)
class _Scope:
    kind: str
    global_names: frozenset[str] = frozenset()

    def binding_kind(self, name: str) -> NodeKind:
        """Which assignment kind a bare name binds to in this scope."""
        if self.kind == _SCOPE_CLASS:
            return NodeKind.CVASGN
        if self.kind == _SCOPE_MODULE or name in self.global_names:
            return NodeKind.GVASGN
        return NodeKind.LVASGN


_MODULE_SCOPE = _Scope(_SCOPE_MODULE)

_Handler = Callable[[astroid.nodes.NodeNG, _Scope], SyntaxNode]


class AstroidGateway:
    """
    Converts astroid modules into SyntaxNode trees.

    Names bound inside a function are locals unless declared ``global``;
    names bound at module level are globals and names bound in a class body
    are class variables. Attribute assignment, including ``self.attr = 1``,
    becomes a setter call named ``attr=``. Python has no sigil instance
    variables, so no IVASGN node is ever produced.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, _Handler] = {
            astroid.nodes.Module: self._lower_module,
            astroid.nodes.FunctionDef: self._lower_function,
            astroid.nodes.AsyncFunctionDef: self._lower_function,
            astroid.nodes.Lambda: self._lower_lambda,
            astroid.nodes.ClassDef: self._lower_class,
            astroid.nodes.Assign: self._lower_assign,
            astroid.nodes.AnnAssign: self._lower_annotated_assign,
            astroid.nodes.AugAssign: self._lower_augmented_assign,
            astroid.nodes.NamedExpr: self._lower_named_expression,
            astroid.nodes.AssignName: self._lower_target,
            astroid.nodes.AssignAttr: self._lower_target,
            astroid.nodes.Expr: self._lower_expression_statement,
            astroid.nodes.Return: self._lower_return,
            astroid.nodes.If: self._lower_if,
            astroid.nodes.IfExp: self._lower_if_expression,
            astroid.nodes.Const: self._lower_const,
            astroid.nodes.Name: self._lower_name,
            astroid.nodes.Attribute: self._lower_attribute,
            astroid.nodes.Call: self._lower_call,
            astroid.nodes.BinOp: self._lower_binary_operation,
            astroid.nodes.Compare: self._lower_compare,
            astroid.nodes.UnaryOp: self._lower_unary_operation,
            astroid.nodes.Subscript: self._lower_subscript,
            astroid.nodes.Tuple: self._lower_sequence,
            astroid.nodes.List: self._lower_sequence,
            astroid.nodes.Set: self._lower_sequence,
            astroid.nodes.Dict: self._lower_dict,
            astroid.nodes.Starred: self._lower_starred,
        }

    def parse_source(self, source: str, module_name: str = "") -> astroid.nodes.Module:
        """Parse Python source into an astroid module."""
        return astroid.parse(source, module_name)

    def lower(self, module: astroid.nodes.Module) -> SyntaxNode:
        """Lower an astroid module into a BEGIN node holding its statements."""
        root = self._lower(module, _MODULE_SCOPE)
        logger.debug("Lowered module %s", getattr(module, "name", "") or "<string>")
        return root

    def _lower(self, node: astroid.nodes.NodeNG, scope: _Scope) -> SyntaxNode:
        handler = self._handlers.get(type(node), self._lower_other)
        return handler(node, scope)

    def _lower_optional(self, node: Optional[astroid.nodes.NodeNG], scope: _Scope) -> Optional[SyntaxNode]:
        return self._lower(node, scope) if node is not None else None

    def _lower_body(self, statements: list[astroid.nodes.NodeNG], scope: _Scope) -> Optional[SyntaxNode]:
        """A single statement stands alone; several are wrapped in a BEGIN."""
        lowered = [self._lower(statement, scope) for statement in statements]
        if not lowered:
            return None
        if len(lowered) == 1:
            return lowered[0]
        return begin(*lowered)

    def _decorated(self, node: astroid.nodes.NodeNG, lowered: SyntaxNode, scope: _Scope) -> SyntaxNode:
        decorators = getattr(node, "decorators", None)
        if decorators is None or not decorators.nodes:
            return lowered
        calls = tuple(self._lower(decorator, scope) for decorator in decorators.nodes)
        return SyntaxNode(NodeKind.OTHER, (*calls, lowered), name="decorated", origin=node)

    # Definitions

    def _lower_module(self, node: astroid.nodes.Module, scope: _Scope) -> SyntaxNode:
        return begin(*(self._lower(statement, scope) for statement in node.body), origin=node)

    def _lower_function(self, node: astroid.nodes.FunctionDef, scope: _Scope) -> SyntaxNode:
        function_scope = _Scope(_SCOPE_FUNCTION, self._declared_globals(node))
        definition = def_(
            node.name,
            self._lower_parameters(node.args, scope),
            self._lower_body(node.body, function_scope),
            origin=node,
        )
        return self._decorated(node, definition, scope)

    def _lower_lambda(self, node: astroid.nodes.Lambda, scope: _Scope) -> SyntaxNode:
        return def_(
            "<lambda>",
            self._lower_parameters(node.args, scope),
            self._lower(node.body, _Scope(_SCOPE_FUNCTION)),
            origin=node,
        )

    def _lower_class(self, node: astroid.nodes.ClassDef, scope: _Scope) -> SyntaxNode:
        body = self._lower_body(node.body, _Scope(_SCOPE_CLASS))
        definition = SyntaxNode(NodeKind.CLASS, (body,) if body is not None else (), name=node.name, origin=node)
        return self._decorated(node, definition, scope)

    def _lower_parameters(self, arguments: astroid.nodes.Arguments, scope: _Scope) -> list[SyntaxNode]:
        """Lower parameters; defaults are evaluated in the enclosing scope."""
        params: list[SyntaxNode] = []
        positional = list(arguments.posonlyargs or []) + list(arguments.args or [])
        defaults = list(arguments.defaults or [])
        first_default = len(positional) - len(defaults)
        for index, argument in enumerate(positional):
            if index >= first_default:
                default = self._lower(defaults[index - first_default], scope)
                params.append(param(NodeKind.OPTARG, argument.name, default, origin=argument))
            else:
                params.append(param(NodeKind.ARG, argument.name, origin=argument))
        if arguments.vararg:
            params.append(param(NodeKind.RESTARG, arguments.vararg))
        kw_defaults = list(arguments.kw_defaults or [])
        for index, argument in enumerate(arguments.kwonlyargs or []):
            default_node = kw_defaults[index] if index < len(kw_defaults) else None
            if default_node is None:
                params.append(param(NodeKind.KWARG, argument.name, origin=argument))
            else:
                default = self._lower(default_node, scope)
                params.append(param(NodeKind.KWOPTARG, argument.name, default, origin=argument))
        if arguments.kwarg:
            params.append(param(NodeKind.KWRESTARG, arguments.kwarg))
        return params

    def _declared_globals(self, function: astroid.nodes.FunctionDef) -> frozenset[str]:
        names: set[str] = set()
        for global_node in function.nodes_of_class(astroid.nodes.Global, skip_klass=_SCOPE_NODES):
            names.update(global_node.names)
        return frozenset(names)

    # Assignments

    def _lower_assign(self, node: astroid.nodes.Assign, scope: _Scope) -> SyntaxNode:
        # a = b = 1 nests like (a = (b = 1)): only the innermost target holds the literal.
        lowered = self._lower(node.value, scope)
        for target in reversed(node.targets):
            lowered = self._assignment(target, lowered, scope, origin=node)
        return lowered

    def _lower_annotated_assign(self, node: astroid.nodes.AnnAssign, scope: _Scope) -> SyntaxNode:
        value = self._lower_optional(node.value, scope)
        return self._assignment(node.target, value, scope, origin=node)

    def _lower_augmented_assign(self, node: astroid.nodes.AugAssign, scope: _Scope) -> SyntaxNode:
        target = self._assignment(node.target, None, scope, origin=node.target)
        return SyntaxNode(
            NodeKind.OP_ASGN,
            (target, self._lower(node.value, scope)),
            name=node.op,
            origin=node,
        )

    def _lower_named_expression(self, node: astroid.nodes.NamedExpr, scope: _Scope) -> SyntaxNode:
        return self._assignment(node.target, self._lower(node.value, scope), scope, origin=node)

    def _lower_target(self, node: astroid.nodes.NodeNG, scope: _Scope) -> SyntaxNode:
        """Targets bound outside an assignment statement (loops, with, except) carry no value."""
        return self._assignment(node, None, scope, origin=node)

    def _assignment(
        self,
        target: astroid.nodes.NodeNG,
        value: Optional[SyntaxNode],
        scope: _Scope,
        origin: astroid.nodes.NodeNG,
    ) -> SyntaxNode:
        if isinstance(target, astroid.nodes.AssignName):
            return assign(scope.binding_kind(target.name), target.name, value, origin=origin)
        if isinstance(target, astroid.nodes.AssignAttr):
            receiver = self._lower(target.expr, scope)
            arguments = (value,) if value is not None else ()
            return send(receiver, f"{target.attrname}=", *arguments, origin=origin)
        if isinstance(target, astroid.nodes.Subscript):
            receiver = self._lower(target.value, scope)
            arguments = self._subscript_arguments(target.slice, scope)
            if value is not None:
                arguments.append(value)
            return send(receiver, "[]=", *arguments, origin=origin)
        if isinstance(target, (astroid.nodes.Tuple, astroid.nodes.List)):
            targets = [self._assignment(element, None, scope, origin=element) for element in target.elts]
            values = value if value is not None else array()
            return masgn(targets, values, origin=origin)
        if isinstance(target, astroid.nodes.Starred):
            inner = self._assignment(target.value, None, scope, origin=target)
            return SyntaxNode(NodeKind.SPLAT, (inner,), origin=target)
        return self._lower_other(target, scope)

    # Statements

    def _lower_expression_statement(self, node: astroid.nodes.Expr, scope: _Scope) -> SyntaxNode:
        return self._lower(node.value, scope)

    def _lower_return(self, node: astroid.nodes.Return, scope: _Scope) -> SyntaxNode:
        return return_(self._lower_optional(node.value, scope), origin=node)

    def _lower_if(self, node: astroid.nodes.If, scope: _Scope) -> SyntaxNode:
        return SyntaxNode(
            NodeKind.IF,
            (
                self._lower(node.test, scope),
                self._lower_body(node.body, scope),
                self._lower_body(node.orelse, scope),
            ),
            origin=node,
        )

    def _lower_if_expression(self, node: astroid.nodes.IfExp, scope: _Scope) -> SyntaxNode:
        return SyntaxNode(
            NodeKind.IF,
            (
                self._lower(node.test, scope),
                self._lower(node.body, scope),
                self._lower(node.orelse, scope),
            ),
            origin=node,
        )

    # Expressions

    def _lower_const(self, node: astroid.nodes.Const, scope: _Scope) -> SyntaxNode:
        value = node.value
        if isinstance(value, bool):
            return SyntaxNode(NodeKind.LITERAL, raw=node.as_string(), origin=node)
        if isinstance(value, int):
            return int_lit(value, node.as_string(), origin=node)
        if isinstance(value, float):
            return float_lit(value, node.as_string(), origin=node)
        return SyntaxNode(NodeKind.LITERAL, raw=node.as_string(), origin=node)

    def _lower_name(self, node: astroid.nodes.Name, scope: _Scope) -> SyntaxNode:
        if node.name == "self":
            return self_node(origin=node)
        return lvar(node.name, origin=node)

    def _lower_attribute(self, node: astroid.nodes.Attribute, scope: _Scope) -> SyntaxNode:
        return send(self._lower(node.expr, scope), node.attrname, origin=node)

    def _lower_call(self, node: astroid.nodes.Call, scope: _Scope) -> SyntaxNode:
        func = node.func
        receiver: Optional[SyntaxNode]
        if isinstance(func, astroid.nodes.Attribute):
            receiver, name = self._lower(func.expr, scope), func.attrname
        elif isinstance(func, astroid.nodes.Name):
            receiver, name = None, func.name
        else:
            receiver, name = self._lower(func, scope), "call"
        arguments = [self._lower(argument, scope) for argument in node.args or []]
        for keyword in node.keywords or []:
            value = self._lower(keyword.value, scope)
            if keyword.arg is None:
                arguments.append(SyntaxNode(NodeKind.SPLAT, (value,), name="**", origin=keyword))
            else:
                arguments.append(pair(keyword.arg, value, origin=keyword))
        return send(receiver, name, *arguments, origin=node)

    def _lower_binary_operation(self, node: astroid.nodes.BinOp, scope: _Scope) -> SyntaxNode:
        return send(self._lower(node.left, scope), node.op, self._lower(node.right, scope), origin=node)

    def _lower_compare(self, node: astroid.nodes.Compare, scope: _Scope) -> SyntaxNode:
        left = self._lower(node.left, scope)
        comparisons: list[SyntaxNode] = []
        for operator, right_node in node.ops:
            right = self._lower(right_node, scope)
            comparisons.append(send(left, operator, right, origin=node))
            left = right
        if len(comparisons) == 1:
            return comparisons[0]
        return SyntaxNode(NodeKind.OTHER, tuple(comparisons), name="and", origin=node)

    def _lower_unary_operation(self, node: astroid.nodes.UnaryOp, scope: _Scope) -> SyntaxNode:
        operand = self._lower(node.operand, scope)
        if node.op == "-":
            return negate(operand, origin=node)
        if node.op == "+":
            return operand
        name = "!" if node.op == "not" else node.op
        return send(operand, name, origin=node)

    def _lower_subscript(self, node: astroid.nodes.Subscript, scope: _Scope) -> SyntaxNode:
        if node.ctx == astroid.Context.Store:
            return self._assignment(node, None, scope, origin=node)
        receiver = self._lower(node.value, scope)
        return send(receiver, "[]", *self._subscript_arguments(node.slice, scope), origin=node)

    def _subscript_arguments(self, index: astroid.nodes.NodeNG, scope: _Scope) -> list[SyntaxNode]:
        if isinstance(index, astroid.nodes.Tuple):
            return [self._lower(element, scope) for element in index.elts]
        return [self._lower(index, scope)]

    def _lower_sequence(self, node: astroid.nodes.NodeNG, scope: _Scope) -> SyntaxNode:
        if getattr(node, "ctx", None) == astroid.Context.Store:
            return self._assignment(node, None, scope, origin=node)
        return array(*(self._lower(element, scope) for element in node.elts), origin=node)

    def _lower_dict(self, node: astroid.nodes.Dict, scope: _Scope) -> SyntaxNode:
        children: list[SyntaxNode] = []
        for key, value in node.items:
            children.append(self._lower(key, scope))
            children.append(self._lower(value, scope))
        return SyntaxNode(NodeKind.HASH, tuple(children), origin=node)

    def _lower_starred(self, node: astroid.nodes.Starred, scope: _Scope) -> SyntaxNode:
        if node.ctx == astroid.Context.Store:
            return self._assignment(node, None, scope, origin=node)
        return SyntaxNode(NodeKind.SPLAT, (self._lower(node.value, scope),), origin=node)

    def _lower_other(self, node: astroid.nodes.NodeNG, scope: _Scope) -> SyntaxNode:
        children = tuple(self._lower(child, scope) for child in node.get_children())
        return SyntaxNode(NodeKind.OTHER, children, name=type(node).__name__, origin=node)
