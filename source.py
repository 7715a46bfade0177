class SourceCursor:
    """Forward-only cursor over the source text.

    The scanner consumes characters one at a time and asks for the text it has
    consumed since the last checkpoint with pop_lexeme(). Line and column
    tracking is the scanner's job, not ours.
    """

    def __init__(self, text: str):
        self.text = text
        self.offset = 0
        self.lexeme_start = 0

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str | None:
        if self.offset >= len(self.text):
            return None
        return self.text[self.offset]

    def peek_next(self) -> str | None:
        nxt = self.offset + 1
        if nxt >= len(self.text):
            return None
        return self.text[nxt]

    def advance(self) -> str | None:
        if self.offset >= len(self.text):
            return None
        ch = self.text[self.offset]
        self.offset += 1
        return ch

    def pop_lexeme(self) -> str:
        lexeme = self.text[self.lexeme_start:self.offset]
        self.lexeme_start = self.offset
        return lexeme
