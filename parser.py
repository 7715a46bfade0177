import logging

from ast_nodes import (
    Assign, Binary, Block, ExpressionStmt, Grouping, If, Literal, Logical, Unary, VarDecl, Variable, While,
)
from errors import ParseError, ParseErrors
from tokens import LITERAL_KINDS, RESERVED, TokenKind

# Tokens that can start a statement; panic mode stops in front of them.
STATEMENT_START = frozenset({
    TokenKind.IF,
    TokenKind.WHILE,
    TokenKind.FOR,
    TokenKind.LET,
    TokenKind.FUNC,
    TokenKind.STRUCT,
    TokenKind.RETURN,
})

EQUALITY_OPS = (TokenKind.EQUAL_EQUAL, TokenKind.BANG_EQUAL)
COMPARISON_OPS = (TokenKind.GREATER, TokenKind.GREATER_EQUAL, TokenKind.LESS, TokenKind.LESS_EQUAL)
SHIFT_OPS = (TokenKind.LESS_LESS, TokenKind.GREATER_GREATER)
TERM_OPS = (TokenKind.PLUS, TokenKind.MINUS)
FACTOR_OPS = (TokenKind.STAR, TokenKind.SLASH)
UNARY_OPS = (TokenKind.BANG, TokenKind.MINUS)


class Parser:
    # groupings, unary and assignment chains and blocks all count towards this
    MAX_NESTING_DEPTH = 32

    def __init__(self, tokens):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token sequence must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.errors = []
        self.depth = 0

    @property
    def current_token(self):
        return self.tokens[self.pos]

    @property
    def next_token(self):
        return self.tokens[min(self.pos + 1, len(self.tokens) - 1)]

    def at_end(self):
        return self.current_token.kind is TokenKind.EOF

    def advance(self):
        tok = self.current_token
        if not self.at_end():
            self.pos += 1
        return tok

    def check(self, *kinds):
        return self.current_token.kind in kinds

    def match(self, *kinds):
        if self.current_token.kind in kinds:
            return self.advance()
        return None

    # move to next token, but only if it matches what we expect
    def eat(self, kind, message=None):
        if self.current_token.kind is kind:
            return self.advance()
        self.error_here(message or f"Expected '{kind.value}'.")

    def error_here(self, message):
        raise ParseError(message, self.current_token)

    def report(self, message, token):
        # record an error without unwinding; parsing carries on as normal
        self.errors.append(ParseError(message, token))

    def enter(self):
        self.depth += 1
        if self.depth > self.MAX_NESTING_DEPTH:
            self.depth -= 1
            self.error_here("Expression nesting is too deep.")

    def leave(self):
        self.depth -= 1

    # ---------- TOP LEVEL ----------
    def parse(self):
        logging.debug("Parsing %d tokens...", len(self.tokens))
        statements = self.statement_list(until=None)
        logging.debug("Parsing finished: %d statements, %d errors.", len(statements), len(self.errors))
        if self.errors:
            raise ParseErrors(self.errors)
        return statements

    def statement_list(self, until):
        statements = []
        while not self.at_end() and (until is None or not self.check(until)):
            start = self.pos
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
            if self.pos == start:
                # nothing consumed (error right on a sync token); skip it so we always move on
                self.advance()
        return statements

    def declaration(self):
        try:
            return self.statement()
        except ParseError as e:
            self.errors.append(e)
            self.synchronize()
            return None

    # panic mode: drop tokens until a statement boundary
    def synchronize(self):
        while not self.at_end():
            if self.current_token.kind in STATEMENT_START or self.check(TokenKind.RBRACE):
                return
            tok = self.advance()
            if tok.kind is TokenKind.SEMICOLON:
                return

    # ---------- STATEMENTS ----------
    def statement(self):
        kind = self.current_token.kind

        if kind is TokenKind.IF:
            return self.if_statement()

        if kind in (TokenKind.WHILE, TokenKind.FOR):
            return self.while_statement()

        if kind is TokenKind.LBRACE:
            brace = self.current_token
            return Block(brace, self.block("Expected '{'."))

        if kind in RESERVED:
            self.error_here(f"'{self.current_token.lexeme}' is a reserved keyword.")

        # name := value;   name : type = value;
        if kind is TokenKind.IDENTIFIER and self.next_token.kind in (TokenKind.COLON_EQUAL, TokenKind.COLON):
            return self.var_declaration()

        return self.expression_statement()

    def var_declaration(self):
        name = self.eat(TokenKind.IDENTIFIER)

        type_annotation = None
        if self.match(TokenKind.COLON):
            type_annotation = self.eat(TokenKind.IDENTIFIER, "Expected type name after ':'.")
            self.eat(TokenKind.EQUAL, "Expected '=' after type annotation.")
        else:
            self.eat(TokenKind.COLON_EQUAL)

        initializer = self.expression()
        self.eat(TokenKind.SEMICOLON, "Expected ';' after variable declaration.")
        return VarDecl(name, type_annotation, initializer)

    def if_statement(self):
        # Grammar:
        #   IF expr block (ELSE (if_statement | block))?
        # else-if chains become a nested If as the only statement of else_block.
        keyword = self.eat(TokenKind.IF)
        condition = self.expression()
        then_block = self.block("Expected '{' after if condition.")

        else_block = None
        if self.match(TokenKind.ELSE):
            if self.check(TokenKind.IF):
                else_block = [self.if_statement()]
            else:
                else_block = self.block("Expected '{' after else.")

        return If(keyword, condition, then_block, else_block)

    def while_statement(self):
        keyword = self.advance()  # WHILE or FOR
        condition = self.expression()
        body = self.block(f"Expected '{{' after {keyword.lexeme} condition.")
        return While(keyword, condition, body)

    def block(self, message):
        self.eat(TokenKind.LBRACE, message)
        self.enter()
        try:
            statements = self.statement_list(until=TokenKind.RBRACE)
        finally:
            self.leave()
        self.eat(TokenKind.RBRACE, "Expected '}' after block.")
        return statements

    def expression_statement(self):
        expr = self.expression()
        self.eat(TokenKind.SEMICOLON, "Expected ';' after expression.")
        return ExpressionStmt(expr)

    # ---------- EXPRESSIONS ----------
    # expr -> assignment
    def expression(self):
        self.enter()
        try:
            return self.assignment()
        finally:
            self.leave()

    # assignment -> IDENT "=" assignment | or_expr
    def assignment(self):
        expr = self.or_expr()

        if self.check(TokenKind.EQUAL):
            equals = self.advance()
            self.enter()
            try:
                value = self.assignment()
            finally:
                self.leave()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            self.report("Invalid assignment target.", equals)

        return expr

    # or_expr -> and_expr (|| and_expr)*
    def or_expr(self):
        node = self.and_expr()
        while self.check(TokenKind.OR_OR):
            op_token = self.advance()
            node = Logical(node, op_token, self.and_expr())
        return node

    # and_expr -> equality (&& equality)*
    def and_expr(self):
        node = self.equality()
        while self.check(TokenKind.AND_AND):
            op_token = self.advance()
            node = Logical(node, op_token, self.equality())
        return node

    # equality -> comparison ((==|!=) comparison)*
    def equality(self):
        return self.binary_level(self.comparison, EQUALITY_OPS)

    # comparison -> shift ((<|<=|>|>=) shift)*
    def comparison(self):
        return self.binary_level(self.shift, COMPARISON_OPS)

    # shift -> term ((<<|>>) term)*
    def shift(self):
        return self.binary_level(self.term, SHIFT_OPS)

    # term -> factor ((+|-) factor)*
    def term(self):
        return self.binary_level(self.factor, TERM_OPS)

    # factor -> unary ((*|/) unary)*
    def factor(self):
        return self.binary_level(self.unary, FACTOR_OPS)

    def binary_level(self, operand, ops):
        node = operand()
        while self.check(*ops):
            op_token = self.advance()
            node = Binary(node, op_token, operand())
        return node

    # unary -> (!|-) unary | primary
    def unary(self):
        if self.check(*UNARY_OPS):
            op_token = self.advance()
            self.enter()
            try:
                return Unary(op_token, self.unary())
            finally:
                self.leave()
        return self.primary()

    # primary -> INTEGER | FLOAT | STRING | true | false | nil | IDENT | (expr)
    def primary(self):
        tok = self.current_token

        if tok.kind in LITERAL_KINDS:
            self.advance()
            return Literal(tok)

        if tok.kind is TokenKind.IDENTIFIER:
            self.advance()
            return Variable(tok)

        if tok.kind is TokenKind.LPAREN:
            self.advance()
            inner = self.expression()
            self.eat(TokenKind.RPAREN, "Expected ')' after expression.")
            return Grouping(tok, inner)

        if tok.kind in RESERVED:
            self.error_here(f"'{tok.lexeme}' is a reserved keyword.")

        self.error_here("Expected expression.")


def parse(tokens):
    """Parse a full token list; raises ParseErrors listing every syntax error found."""
    return Parser(tokens).parse()
