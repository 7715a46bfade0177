class ASTNode:
    # The token that locates this node in the source. Subclasses set it.
    token = None

    @property
    def line(self) -> int | None:
        return self.token.line if self.token is not None else None

    @property
    def column(self) -> int | None:
        return self.token.column if self.token is not None else None


# ---------- expressions ----------
class Expr(ASTNode):
    pass


class Binary(Expr):
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator  # Token
        self.right = right
        self.token = operator


class Logical(Expr):
    # && and || (short-circuit, so kept apart from Binary)
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right
        self.token = operator


class Unary(Expr):
    def __init__(self, operator, operand):
        self.operator = operator
        self.operand = operand
        self.token = operator


class Literal(Expr):
    def __init__(self, value):
        self.value = value  # the literal Token
        self.token = value


class Grouping(Expr):
    def __init__(self, paren, expression):
        self.paren = paren  # opening "(" token
        self.expression = expression
        self.token = paren


class Variable(Expr):
    def __init__(self, name):
        self.name = name  # IDENTIFIER token
        self.token = name


class Assign(Expr):
    def __init__(self, name, value):
        self.name = name
        self.value = value
        self.token = name


# ---------- statements ----------
class Stmt(ASTNode):
    pass


class ExpressionStmt(Stmt):
    def __init__(self, expression):
        self.expression = expression
        self.token = expression.token


class VarDecl(Stmt):
    def __init__(self, name, type_annotation, initializer):
        self.name = name                        # IDENTIFIER token
        self.type_annotation = type_annotation  # IDENTIFIER token or None, not checked
        self.initializer = initializer
        self.token = name


class Block(Stmt):
    def __init__(self, brace, statements):
        self.brace = brace
        self.statements = statements
        self.token = brace


class If(Stmt):
    def __init__(self, keyword, condition, then_block, else_block=None):
        self.keyword = keyword
        self.condition = condition
        self.then_block = then_block  # list[Stmt]
        self.else_block = else_block  # list[Stmt] | None
        self.token = keyword


class While(Stmt):
    # both `while` and `for` loops end up here
    def __init__(self, keyword, condition, body):
        self.keyword = keyword
        self.condition = condition
        self.body = body  # list[Stmt]
        self.token = keyword
