from source import SourceCursor


def test_peek_does_not_consume():
    cursor = SourceCursor("ab")
    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.offset == 0


def test_advance_and_end():
    cursor = SourceCursor("ab")
    assert cursor.advance() == "a"
    assert cursor.peek_next() is None
    assert cursor.advance() == "b"
    assert cursor.at_end
    assert cursor.advance() is None
    assert cursor.peek() is None
    assert cursor.offset == 2


def test_pop_lexeme_returns_text_since_checkpoint():
    cursor = SourceCursor("let x")
    for _ in range(3):
        cursor.advance()
    assert cursor.pop_lexeme() == "let"
    assert cursor.pop_lexeme() == ""
    cursor.advance()
    cursor.advance()
    assert cursor.pop_lexeme() == " x"


def test_unicode_is_one_char_per_code_point():
    cursor = SourceCursor("é\"")
    assert cursor.advance() == "é"
    assert cursor.pop_lexeme() == "é"
    assert cursor.peek() == '"'
