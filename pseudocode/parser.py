"""Recursive-descent parser producing the syntax tree."""

from __future__ import annotations

from collections.abc import Sequence

from pseudocode.lexer import Token, TokenType, tokenize
from pseudocode.nodes import (
    AssignNode,
    BinaryExpr,
    ExprNode,
    ForNode,
    IfNode,
    IndexExpr,
    InputNode,
    LiteralExpr,
    OutputExprNode,
    ProgramNode,
    RepeatUntilNode,
    StatementNode,
    VariableExpr,
    WhileNode,
)

_END_TOKEN = Token(TokenType.END, "")
_PRIMARY_TYPES = frozenset({TokenType.NUMBER, TokenType.STRING, TokenType.IDENTIFIER})


class ParseError(Exception):
    """Raised when the token stream does not form a valid program."""


class Parser:
    """Parses a list of tokens into a :class:`ProgramNode`."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        if not self._tokens:
            return _END_TOKEN
        return self._tokens[min(self._pos, len(self._tokens) - 1)]

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.peek()
        self._pos += 1
        return token

    def _has_more(self) -> bool:
        return self._pos < len(self._tokens)

    def match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has ``token_type``."""
        if self._has_more() and self._tokens[self._pos].type is token_type:
            self._pos += 1
            return True
        return False

    def expect(self, token_type: TokenType, message: str) -> Token:
        """Consume a token of ``token_type`` or raise :class:`ParseError`."""
        if self._has_more() and self._tokens[self._pos].type is token_type:
            token = self._tokens[self._pos]
            self._pos += 1
            return token
        raise ParseError(f"Parser error: {message}")

    def parse_literal(self) -> ExprNode:
        """Parse a single identifier or literal token."""
        token = self.advance()
        if token.type is TokenType.IDENTIFIER:
            return VariableExpr(token.value)
        return LiteralExpr(token.value, token.type)

    def parse_primary(self) -> ExprNode:
        """Parse a literal or variable, with any trailing ``[index]`` parts."""
        if self.peek().type not in _PRIMARY_TYPES:
            raise ParseError("Expected primary expression")
        expr = self.parse_literal()
        while self.peek().type is TokenType.LPAREN and self.peek().value == "[":
            self.advance()
            index = self.parse_expression()
            self.expect(TokenType.RPAREN, "Expected ] after index")
            expr = IndexExpr(expr, index)
        return expr

    def parse_expression(self) -> ExprNode:
        """Parse a full binary expression."""
        return self.parse_binary_op_rhs(0, self.parse_primary())

    def get_precedence(self, op: str) -> int:
        """Binding strength of ``op``; comparisons bind loosest."""
        if op in ("+", "-"):
            return 1
        if op in ("*", "/", "%"):
            return 2
        return 0

    def parse_binary_op_rhs(self, expr_prec: int, lhs: ExprNode) -> ExprNode:
        """Extend ``lhs`` with operators binding at least ``expr_prec``."""
        while True:
            token = self.peek()
            if token.type is not TokenType.OPERATOR:
                return lhs
            prec = self.get_precedence(token.value)
            if prec < expr_prec:
                return lhs
            self.advance()
            rhs = self.parse_primary()
            following = self.peek()
            if (
                following.type is TokenType.OPERATOR
                and prec < self.get_precedence(following.value)
            ):
                rhs = self.parse_binary_op_rhs(prec + 1, rhs)
            lhs = BinaryExpr(token.value, lhs, rhs)

    def _parse_until(self, *stops: TokenType) -> list[StatementNode]:
        body: list[StatementNode] = []
        while self.peek().type not in stops:
            body.append(self.parse_statement())
        return body

    def parse_if(self) -> IfNode:
        """Parse ``IF cond THEN ... [ELSE ...] ENDIF``."""
        self.advance()
        condition = self.parse_expression()
        self.expect(TokenType.THEN, "Expected THEN after IF condition")

        then_branch: list[StatementNode] = []
        while (
            self.peek().type not in (TokenType.ELSE, TokenType.ENDIF)
            and self._has_more()
        ):
            then_branch.append(self.parse_statement())

        else_branch: list[StatementNode] = []
        if self.peek().type is TokenType.ELSE:
            self.advance()
            while self.peek().type is not TokenType.ENDIF and self._has_more():
                else_branch.append(self.parse_statement())

        self.expect(TokenType.ENDIF, "Expected ENDIF after IF block")
        return IfNode(condition, then_branch, else_branch)

    def _parse_assignment(self) -> AssignNode:
        name = self.advance().value
        self.advance()
        expr = self.parse_expression()
        last_type = self._tokens[self._pos - 1].type
        if last_type is TokenType.STRING:
            type_name = "string"
        elif last_type is TokenType.NUMBER:
            type_name = "int"
        else:
            type_name = "auto"
        return AssignNode(name, expr, type_name)

    def _parse_while(self) -> WhileNode:
        self.advance()
        condition = self.parse_expression()
        body = self._parse_until(TokenType.ENDWHILE)
        self.expect(TokenType.ENDWHILE, "Expected ENDWHILE after WHILE loop")
        return WhileNode(condition, body)

    def _parse_repeat(self) -> RepeatUntilNode:
        self.advance()
        body = self._parse_until(TokenType.UNTIL)
        self.advance()
        condition = self.parse_expression()
        return RepeatUntilNode(condition, body)

    def _parse_for(self) -> ForNode:
        self.advance()
        iterator = self.expect(TokenType.IDENTIFIER, "Expected loop variable after FOR").value
        self.expect(TokenType.ASSIGN, "Expected ← after loop variable")
        start = self.expect(TokenType.NUMBER, "Expected start value").value
        self.expect(TokenType.TO, "Expected TO after start value")
        end = self.expect(TokenType.IDENTIFIER, "Expected end value").value
        body = self._parse_until(TokenType.NEXT)
        self.expect(TokenType.NEXT, "Expected NEXT to close FOR loop")
        return ForNode(iterator, start, end, "1", body)

    def parse_statement(self) -> StatementNode:
        """Parse one statement."""
        current = self.peek()
        kind = current.type

        if kind is TokenType.IF:
            return self.parse_if()
        if kind is TokenType.INPUT:
            self.advance()
            var = self.expect(TokenType.IDENTIFIER, "Expected identifier after INPUT")
            return InputNode(var.value)
        if kind is TokenType.OUTPUT:
            self.advance()
            return OutputExprNode(self.parse_expression())
        if (
            kind is TokenType.IDENTIFIER
            and self._pos + 1 < len(self._tokens)
            and self._tokens[self._pos + 1].type is TokenType.ASSIGN
        ):
            return self._parse_assignment()
        if kind is TokenType.WHILE:
            return self._parse_while()
        if kind is TokenType.REPEAT:
            return self._parse_repeat()
        if kind is TokenType.FOR:
            return self._parse_for()

        raise ParseError(f"Unknown statement starting with: {current.value}")

    def parse_program(self) -> ProgramNode:
        """Parse statements until the END token."""
        program = ProgramNode()
        while self.peek().type is not TokenType.END:
            program.statements.append(self.parse_statement())
        return program


def parse(code: str) -> ProgramNode:
    """Tokenize and parse ``code``."""
    return Parser(tokenize(code)).parse_program()