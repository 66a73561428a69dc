import pytest

from bfast.errors import LexError
from bfast.lexer import count_instructions, format_tokens, tokenize
from bfast.types import Token, TokenType


def test_each_instruction_maps_to_its_tag():
    tokens = tokenize(b'+-<>,.[]')
    assert [t.type for t in tokens] == [
        TokenType.ADD, TokenType.SUB, TokenType.SHIFT_LEFT, TokenType.SHIFT_RIGHT,
        TokenType.READ, TokenType.WRITE, TokenType.BEGIN_LOOP, TokenType.END_LOOP,
    ]
    assert [t.offset for t in tokens] == list(range(8))
    assert all(t.line == 1 for t in tokens)


def test_whitespace_is_skipped_and_newlines_counted():
    tokens = tokenize(b' +\t-\r\n>\n\n.')
    assert tokens == [
        Token(TokenType.ADD, 1, 1),
        Token(TokenType.SUB, 3, 1),
        Token(TokenType.SHIFT_RIGHT, 6, 2),
        Token(TokenType.WRITE, 9, 4),
    ]


def test_empty_source_gives_no_tokens():
    assert tokenize(b'') == []
    assert tokenize(b' \n\t') == []


def test_str_source_is_accepted():
    assert tokenize('+.') == tokenize(b'+.')


def test_unknown_character_is_reported_with_line():
    with pytest.raises(LexError) as excinfo:
        tokenize(b'++$')
    err = excinfo.value
    assert err.byte == ord('$')
    assert err.line == 1
    assert err.offset == 2
    assert err.stage == 'Lex'


def test_unknown_character_on_later_line():
    with pytest.raises(LexError) as excinfo:
        tokenize(b'+\n+\n+ a')
    assert excinfo.value.byte == ord('a')
    assert excinfo.value.line == 3


def test_token_count_matches_instruction_count():
    source = b'++[>+<-]\n.,'
    assert len(tokenize(source)) == count_instructions(source) == 10


def test_lexing_is_repeatable():
    source = b'+[->+<]\n>.'
    assert tokenize(source) == tokenize(source)


def test_format_tokens():
    assert format_tokens(tokenize(b'+\n]')) == 'Add 0 1\nEndLoop 2 2'
