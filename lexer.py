import logging

from errors import ScanError
from source import SourceCursor
from tokens import KEYWORDS, Token, TokenKind

INT64_MAX = 2**63 - 1

SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
}

# first char -> ((second char, two-char kind), ...), single-char fallback or None
OPERATOR_TOKENS = {
    "!": ((("=", TokenKind.BANG_EQUAL),), TokenKind.BANG),
    "=": ((("=", TokenKind.EQUAL_EQUAL),), TokenKind.EQUAL),
    ":": ((("=", TokenKind.COLON_EQUAL),), TokenKind.COLON),
    ">": ((("=", TokenKind.GREATER_EQUAL), (">", TokenKind.GREATER_GREATER)), TokenKind.GREATER),
    "<": ((("=", TokenKind.LESS_EQUAL), ("<", TokenKind.LESS_LESS)), TokenKind.LESS),
    "&": ((("&", TokenKind.AND_AND),), None),
    "|": ((("|", TokenKind.OR_OR),), None),
}

DIGITS = "0123456789"


def is_digit(ch) -> bool:
    return ch is not None and ch in DIGITS


def is_alpha(ch) -> bool:
    return ch is not None and ch.isascii() and ch.isalpha()


def is_ident_mid(ch) -> bool:
    return ch is not None and ch.isascii() and (ch.isalnum() or ch == "_")


class Lexer:
    def __init__(self, text):
        self.source = SourceCursor(text)
        self.line = 1
        self.column = 1
        # position of the first character of the token being scanned
        self.start_line = 1
        self.start_column = 1

    def advance(self):
        ch = self.source.advance()
        if ch == "\n":
            self.line += 1
            self.column = 1
        elif ch is not None:
            self.column += 1
        return ch

    def peek(self):
        return self.source.peek()

    def match(self, expected):
        if self.source.peek() != expected:
            return False
        self.advance()
        return True

    def error(self, message, line=None, column=None):
        raise ScanError(
            message,
            self.start_line if line is None else line,
            self.start_column if column is None else column,
        )

    def make_token(self, kind, literal=None):
        lexeme = self.source.pop_lexeme()
        return Token(kind, lexeme, line=self.start_line, column=self.start_column, literal=literal)

    def skip_comment(self):
        while self.peek() is not None and self.peek() != "\n":
            self.advance()

    def read_identifier(self):
        while is_ident_mid(self.peek()):
            self.advance()

        text = self.source.text[self.source.lexeme_start:self.source.offset]
        kind = KEYWORDS.get(text)
        if kind is TokenKind.TRUE:
            return self.make_token(kind, True)
        if kind is TokenKind.FALSE:
            return self.make_token(kind, False)
        if kind is not None:
            return self.make_token(kind)
        return self.make_token(TokenKind.IDENTIFIER, text)

    def read_number(self):
        while is_digit(self.peek()):
            self.advance()

        is_float = False
        if self.peek() == ".":
            is_float = True
            self.advance()
            if not is_digit(self.peek()):
                # point at whatever follows the dot
                self.error("Invalid number: expected a digit after '.'", line=self.line, column=self.column)
            while is_digit(self.peek()):
                self.advance()

        text = self.source.text[self.source.lexeme_start:self.source.offset]
        if is_float:
            return self.make_token(TokenKind.FLOAT, float(text))

        # int() refuses very long digit strings, so check the length first
        if len(text.lstrip("0")) > len(str(INT64_MAX)) or int(text) > INT64_MAX:
            self.error("Invalid number (integer literal out of range)")
        return self.make_token(TokenKind.INTEGER, int(text))

    def read_string(self):
        # opening quote already consumed
        while self.peek() is not None and self.peek() != '"':
            self.advance()

        if self.peek() is None:
            self.error("Unterminated string")

        self.advance()  # closing quote
        lexeme = self.source.text[self.source.lexeme_start:self.source.offset]
        return self.make_token(TokenKind.STRING, lexeme[1:-1])

    def read_operator(self, ch):
        pairs, fallback = OPERATOR_TOKENS[ch]
        for second, kind in pairs:
            if self.match(second):
                return self.make_token(kind)
        if fallback is None:
            self.error(f"Unknown token: '{ch}'")
        return self.make_token(fallback)

    def get_next_token(self):
        while True:
            # drop whatever was skipped (whitespace, comments) before this token
            self.source.pop_lexeme()
            self.start_line, self.start_column = self.line, self.column

            ch = self.advance()
            if ch is None:
                return Token(TokenKind.EOF, "", line=self.line, column=self.column)

            if ch in " \t\r\n":
                continue

            if ch == "/":
                if self.match("/"):
                    self.skip_comment()
                    continue
                return self.make_token(TokenKind.SLASH)

            if ch in SINGLE_CHAR_TOKENS:
                return self.make_token(SINGLE_CHAR_TOKENS[ch])

            if ch in OPERATOR_TOKENS:
                return self.read_operator(ch)

            if ch == '"':
                return self.read_string()

            if is_digit(ch):
                return self.read_number()

            if is_alpha(ch):
                return self.read_identifier()

            self.error(f"Unknown token: '{ch}'")

    def scan_tokens(self):
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                return tokens


def scan(text: str) -> list[Token]:
    """Scan the whole text, stopping at the first lexical error."""
    logging.debug("Scanning %d characters...", len(text))
    tokens = Lexer(text).scan_tokens()
    logging.debug("Scanning finished: %d tokens.", len(tokens))
    return tokens
