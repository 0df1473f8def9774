"""Syntax tree nodes and C++ code generation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pseudocode.lexer import TokenType

_COMPARISONS = frozenset({"<", ">", "<=", ">=", "==", "!="})
_STRING_TYPES = frozenset({"STRING", "string"})


@dataclass
class CodeGenContext:
    """Variables declared so far while generating code."""

    variables: set[str] = field(default_factory=set)
    string_vars: set[str] = field(default_factory=set)

    def is_string(self, expr: ExprNode) -> bool:
        """True if ``expr`` is a variable known to hold a string."""
        return isinstance(expr, VariableExpr) and expr.name in self.string_vars


class ExprNode(ABC):
    """An expression."""

    @abstractmethod
    def generate(self, ctx: CodeGenContext) -> str:
        """Return the C++ code for this expression."""

    @abstractmethod
    def __str__(self) -> str: ...


class StatementNode(ABC):
    """A statement."""

    @abstractmethod
    def generate(self, ctx: CodeGenContext) -> str:
        """Return the C++ code for this statement."""


def _to_int(expr: ExprNode, ctx: CodeGenContext) -> str:
    code = expr.generate(ctx)
    return f"stoi({code})" if ctx.is_string(expr) else code


def _block(statements: list[StatementNode], ctx: CodeGenContext) -> str:
    return "".join(stmt.generate(ctx) for stmt in statements)


@dataclass
class VariableExpr(ExprNode):
    name: str

    def __str__(self) -> str:
        return self.name

    def generate(self, ctx: CodeGenContext) -> str:
        return self.name


@dataclass
class LiteralExpr(ExprNode):
    value: str
    type: TokenType

    def __str__(self) -> str:
        if self.type is TokenType.STRING:
            return f'"{self.value}"'
        return self.value

    def generate(self, ctx: CodeGenContext) -> str:
        return str(self)


@dataclass
class BinaryExpr(ExprNode):
    op: str
    left: ExprNode
    right: ExprNode

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"

    def generate(self, ctx: CodeGenContext) -> str:
        left_str = ctx.is_string(self.left)
        right_str = ctx.is_string(self.right)

        if self.op in _COMPARISONS or (self.op == "%" and (left_str or right_str)):
            left = _to_int(self.left, ctx)
            right = _to_int(self.right, ctx)
            return f"({left} {self.op} {right})"

        if self.op == "+" and (left_str or right_str):
            left = self.left.generate(ctx)
            right = self.right.generate(ctx)
            if left_str and not right_str:
                return f"{left} + to_string({right})"
            if right_str and not left_str:
                return f"to_string({left}) + {right}"
            return f"{left} + {right}"

        left = self.left.generate(ctx)
        right = self.right.generate(ctx)
        return f"({left} {self.op} {right})"


@dataclass
class IndexExpr(ExprNode):
    base: ExprNode
    index: ExprNode

    def __str__(self) -> str:
        return f"{self.base}[{self.index}]"

    def generate(self, ctx: CodeGenContext) -> str:
        base = self.base.generate(ctx)
        return f"{base}[{_to_int(self.index, ctx)}]"


@dataclass
class ProgramNode(StatementNode):
    statements: list[StatementNode] = field(default_factory=list)
    var_types: dict[str, str] = field(default_factory=dict)

    def generate(self, ctx: CodeGenContext) -> str:
        return _block(self.statements, ctx)


@dataclass
class InputNode(StatementNode):
    variable_name: str

    def generate(self, ctx: CodeGenContext) -> str:
        declaration = ""
        if self.variable_name not in ctx.variables:
            declaration = f"\tstring {self.variable_name};\n"
            ctx.variables.add(self.variable_name)
            ctx.string_vars.add(self.variable_name)
        return f"{declaration}\tcin >> {self.variable_name};\n"


@dataclass
class OutputNode(StatementNode):
    value: str
    type: TokenType

    def generate(self, ctx: CodeGenContext) -> str:
        if self.type is TokenType.STRING:
            return f'\tcout << "{self.value}" << endl;\n'
        return f"\tcout << {self.value} << endl;\n"


@dataclass
class OutputExprNode(StatementNode):
    expr: ExprNode

    def generate(self, ctx: CodeGenContext) -> str:
        return f"\tcout << {self.expr.generate(ctx)} << endl;\n"


@dataclass
class AssignNode(StatementNode):
    variable_name: str
    expr: ExprNode
    type_name: str

    def generate(self, ctx: CodeGenContext) -> str:
        name = self.variable_name
        declared_string = self.type_name in _STRING_TYPES
        if name not in ctx.variables:
            head = f"\t{self.type_name} {name} = "
            if declared_string:
                ctx.string_vars.add(name)
            ctx.variables.add(name)
        else:
            head = f"\t{name} = "

        is_string_var = declared_string or name in ctx.string_vars
        expr = self.expr
        if (
            is_string_var
            and isinstance(expr, BinaryExpr)
            and isinstance(expr.left, VariableExpr)
            and expr.left.name == name
            and isinstance(expr.right, LiteralExpr)
            and expr.right.type is TokenType.NUMBER
        ):
            body = f"to_string(stoi({name}) {expr.op} {expr.right.generate(ctx)})"
        elif is_string_var and isinstance(expr, BinaryExpr) and expr.op != "+":
            body = f"to_string({expr.generate(ctx)})"
        else:
            body = expr.generate(ctx)
        return f"{head}{body};\n"


@dataclass
class IfNode(StatementNode):
    condition: ExprNode
    then_branch: list[StatementNode] = field(default_factory=list)
    else_branch: list[StatementNode] = field(default_factory=list)

    def generate(self, ctx: CodeGenContext) -> str:
        parts = [f"\tif ({self.condition.generate(ctx)}) {{\n"]
        parts.append(_block(self.then_branch, ctx))
        parts.append("\t}")
        if self.else_branch:
            parts.append(" else {\n")
            parts.append(_block(self.else_branch, ctx))
            parts.append("\t}")
        parts.append("\n")
        return "".join(parts)


@dataclass
class WhileNode(StatementNode):
    condition: ExprNode
    body: list[StatementNode] = field(default_factory=list)

    def generate(self, ctx: CodeGenContext) -> str:
        head = f"\twhile ({self.condition.generate(ctx)}) {{\n"
        return f"{head}{_block(self.body, ctx)}\t}}\n"


@dataclass
class ForNode(StatementNode):
    iterator: str
    start: str
    end: str
    step: str
    body: list[StatementNode] = field(default_factory=list)

    def generate(self, ctx: CodeGenContext) -> str:
        it = self.iterator
        end = f"stoi({self.end})" if self.end in ctx.string_vars else self.end
        head = f"\tfor (int {it} = {self.start}; {it} <= {end}; {it} += {self.step}) {{\n"
        return f"{head}{_block(self.body, ctx)}\t}}\n"


@dataclass
class RepeatUntilNode(StatementNode):
    condition: ExprNode
    body: list[StatementNode] = field(default_factory=list)

    def generate(self, ctx: CodeGenContext) -> str:
        body = _block(self.body, ctx)
        return f"\tdo {{\n{body}}} while (!({self.condition}));\n"