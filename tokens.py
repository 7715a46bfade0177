from enum import Enum


class TokenKind(Enum):
    # punctuation
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    DOT = "."
    SEMICOLON = ";"
    COLON = ":"

    # operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    COLON_EQUAL = ":="
    GREATER = ">"
    GREATER_EQUAL = ">="
    GREATER_GREATER = ">>"
    LESS = "<"
    LESS_EQUAL = "<="
    LESS_LESS = "<<"
    AND_AND = "&&"
    OR_OR = "||"

    # literals
    IDENTIFIER = "identifier"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"

    # keywords
    ELSE = "else"
    FALSE = "false"
    FOR = "for"
    FUNC = "func"
    IF = "if"
    LET = "let"
    NIL = "nil"
    RETURN = "return"
    STRUCT = "struct"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    WHILE = "while"

    EOF = "end of input"

    def __repr__(self):
        return f"TokenKind.{self.name}"


KEYWORDS = {
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "func": TokenKind.FUNC,
    "if": TokenKind.IF,
    "let": TokenKind.LET,
    "nil": TokenKind.NIL,
    "return": TokenKind.RETURN,
    "struct": TokenKind.STRUCT,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "while": TokenKind.WHILE,
}

# Scanned but without any meaning to the parser or interpreter yet.
RESERVED = frozenset({
    TokenKind.FUNC,
    TokenKind.LET,
    TokenKind.RETURN,
    TokenKind.STRUCT,
    TokenKind.SUPER,
    TokenKind.THIS,
})

LITERAL_KINDS = frozenset({
    TokenKind.INTEGER,
    TokenKind.FLOAT,
    TokenKind.STRING,
    TokenKind.TRUE,
    TokenKind.FALSE,
    TokenKind.NIL,
})


class Token:
    __slots__ = ("kind", "lexeme", "line", "column", "literal")

    def __init__(self, kind, lexeme, line=1, column=1, literal=None):
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "column", column)
        object.__setattr__(self, "literal", literal)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.lexeme == other.lexeme
            and self.line == other.line
            and self.column == other.column
            and type(self.literal) is type(other.literal)
            and self.literal == other.literal
        )

    def __hash__(self):
        return hash((self.kind, self.lexeme, self.line, self.column))

    def __repr__(self):
        if self.literal is not None:
            return f"{self.kind.name}({self.literal!r})@{self.line}:{self.column}"
        return f"{self.kind.name}@{self.line}:{self.column}"
