import logging

import values
from ast_nodes import (
    Assign, Binary, Block, ExpressionStmt, Grouping, If, Literal, Logical, Unary, VarDecl, Variable, While,
)
from errors import InterpreterError, ScopeError
from tokens import TokenKind
from values import EMPTY, FALSE, TRUE, EmptyValue, LiteralValue, OptionalValue

EMPTY_VALUE_OPERATION = "Cannot execute an operation in an empty value."
OPTIONAL_VALUE_OPERATION = "Cannot execute an operation in an optional value. Try unwrapping it first."

ARITHMETIC = {
    TokenKind.PLUS: values.add,
    TokenKind.MINUS: values.subtract,
    TokenKind.STAR: values.multiply,
    TokenKind.SLASH: values.divide,
}

MAX_SHIFT = 64

COMPARISON = {
    TokenKind.GREATER: lambda a, b: a > b,
    TokenKind.GREATER_EQUAL: lambda a, b: a >= b,
    TokenKind.LESS: lambda a, b: a < b,
    TokenKind.LESS_EQUAL: lambda a, b: a <= b,
}


class Interpreter:
    def __init__(self, trace: bool = False):
        self.trace = trace

    def interpret(self, environment, statements):
        logging.debug("Interpreting %d statements...", len(statements))
        result = EMPTY
        for stmt in statements:
            try:
                result = self.execute(stmt, environment)
            except RecursionError:
                raise InterpreterError("Maximum evaluation depth exceeded.", stmt, show_node=False) from None
        logging.debug("Interpreting finished: %r", result)
        return result

    # -------- statements --------
    def execute_block(self, statements, environment):
        result = EMPTY
        for stmt in statements:
            result = self.execute(stmt, environment)
        return result

    def execute(self, stmt, env):
        if self.trace:
            print(f"TRACE line={stmt.line} {stmt.__class__.__name__} depth={env.depth}")

        if isinstance(stmt, ExpressionStmt):
            return self.evaluate(stmt.expression, env)

        if isinstance(stmt, VarDecl):
            # evaluated before the name exists, so `x := x;` sees only outer scopes
            value = self.evaluate(stmt.initializer, env)
            try:
                env.define(stmt.name.lexeme, value)
            except ScopeError as e:
                raise InterpreterError(e.message, stmt) from None
            return EMPTY

        if isinstance(stmt, Block):
            return self.execute_block(stmt.statements, env.child())

        if isinstance(stmt, If):
            if self.condition(stmt.condition, env):
                return self.execute_block(stmt.then_block, env.child())
            if stmt.else_block is not None:
                return self.execute_block(stmt.else_block, env.child())
            return EMPTY

        if isinstance(stmt, While):
            while self.condition(stmt.condition, env):
                self.execute_block(stmt.body, env.child())
            return EMPTY

        raise TypeError(f"Unknown statement node: {stmt.__class__.__name__}")

    def condition(self, expr, env):
        value = self.evaluate(expr, env)
        if isinstance(value, LiteralValue) and value.is_boolean:
            return value.value
        raise InterpreterError(f"Expected boolean condition, got {value.kind}.", expr)

    # -------- expressions --------
    def evaluate(self, expr, env):
        if isinstance(expr, Literal):
            return self.literal(expr)

        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression, env)

        if isinstance(expr, Unary):
            return self.unary(expr, env)

        if isinstance(expr, Logical):
            return self.logical(expr, env)

        if isinstance(expr, Binary):
            return self.binary(expr, env)

        if isinstance(expr, Variable):
            try:
                return env.get(expr.name.lexeme)
            except ScopeError as e:
                raise InterpreterError(e.message, expr) from None

        if isinstance(expr, Assign):
            name = expr.name.lexeme
            # the target must already exist somewhere up the chain; never declares
            owner = env.resolve(name)
            if owner is None:
                raise InterpreterError(f"Cannot assign to undeclared variable '{name}'.", expr)
            owner.assign(name, self.evaluate(expr.value, env))
            return EMPTY

        raise TypeError(f"Unknown expression node: {expr.__class__.__name__}")

    def literal(self, expr):
        tok = expr.value
        if tok.kind is TokenKind.NIL:
            return OptionalValue(None)
        assert tok.literal is not None, f"literal token without a value: {tok!r}"
        return LiteralValue(tok.literal)

    def unwrap(self, value, expr):
        if isinstance(value, EmptyValue):
            raise InterpreterError(EMPTY_VALUE_OPERATION, expr)
        if isinstance(value, OptionalValue):
            raise InterpreterError(OPTIONAL_VALUE_OPERATION, expr)
        return value

    def number(self, value, expr):
        literal = self.unwrap(value, expr)
        if not literal.is_number:
            raise InterpreterError(f"Expected number, got {literal.kind}.", expr)
        return literal.value

    def boolean(self, value, expr):
        literal = self.unwrap(value, expr)
        if not literal.is_boolean:
            raise InterpreterError(
                f"Operator '{expr.operator.lexeme}' expects boolean operands, got {literal.kind}.", expr
            )
        return literal.value

    def unary(self, expr, env):
        operand = self.unwrap(self.evaluate(expr.operand, env), expr)
        op = expr.operator.kind

        if op is TokenKind.MINUS:
            if not operand.is_number:
                raise InterpreterError(f"Cannot use operator '-' on non-numeric value {operand.kind}.", expr)
            return LiteralValue(-operand.value)

        if op is TokenKind.BANG:
            if not operand.is_boolean:
                raise InterpreterError(f"Cannot negate non-boolean value {operand.kind}.", expr)
            return LiteralValue(not operand.value)

        raise InterpreterError(f"'{expr.operator.lexeme}' is not a valid unary operator.", expr)

    def logical(self, expr, env):
        left = self.boolean(self.evaluate(expr.left, env), expr)

        if expr.operator.kind is TokenKind.AND_AND:
            if not left:
                return FALSE
        else:
            if left:
                return TRUE

        right = self.boolean(self.evaluate(expr.right, env), expr)
        return TRUE if right else FALSE

    def binary(self, expr, env):
        left_value = self.evaluate(expr.left, env)
        right_value = self.evaluate(expr.right, env)
        op = expr.operator.kind

        if op in ARITHMETIC:
            left = self.number(left_value, expr)
            right = self.number(right_value, expr)
            try:
                return LiteralValue(ARITHMETIC[op](left, right))
            except ZeroDivisionError:
                raise InterpreterError("Division by zero.", expr) from None
            except OverflowError:
                raise InterpreterError("Integer too large to convert to Float.", expr) from None

        if op in COMPARISON:
            left = self.number(left_value, expr)
            right = self.number(right_value, expr)
            return LiteralValue(COMPARISON[op](left, right))

        if op in (TokenKind.EQUAL_EQUAL, TokenKind.BANG_EQUAL):
            left = self.unwrap(left_value, expr)
            right = self.unwrap(right_value, expr)
            if left.category != right.category:
                raise InterpreterError(f"Can't compare {left.kind} with {right.kind}.", expr)
            equal = left.value == right.value
            return LiteralValue(equal if op is TokenKind.EQUAL_EQUAL else not equal)

        if op in (TokenKind.LESS_LESS, TokenKind.GREATER_GREATER):
            return self.shift(expr, left_value, right_value)

        raise InterpreterError(f"'{expr.operator.lexeme}' is not a valid binary operator.", expr)

    def shift(self, expr, left_value, right_value):
        left = self.unwrap(left_value, expr)
        right = self.unwrap(right_value, expr)
        if not (left.is_integer and right.is_integer):
            raise InterpreterError(
                f"Operator '{expr.operator.lexeme}' expects Integer operands, got {left.kind} and {right.kind}.",
                expr,
            )
        if right.value < 0:
            raise InterpreterError("Negative shift count.", expr)
        if right.value > MAX_SHIFT:
            raise InterpreterError(f"Shift count {right.value} is out of range (0..{MAX_SHIFT}).", expr)
        if expr.operator.kind is TokenKind.LESS_LESS:
            return LiteralValue(left.value << right.value)
        return LiteralValue(left.value >> right.value)


def interpret(environment, statements, trace: bool = False):
    """Run statements against environment and return the value of the last one."""
    return Interpreter(trace=trace).interpret(environment, statements)
