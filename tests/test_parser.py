import pytest

from bfast.ast import Add, Loop, Program, Read, ShiftLeft, ShiftRight, Sub, Write, count_nodes, max_depth
from bfast.errors import LexError, UnbalancedClose, UnbalancedOpen
from bfast.lexer import tokenize
from bfast.parser import build, parse_program
from bfast.types import TokenType


def test_flat_program():
    program = parse_program(b'+-<>,.')
    assert program == Program([Add(), Sub(), ShiftLeft(), ShiftRight(), Read(), Write()])


def test_loop_body_is_attached():
    program = parse_program(b'+[->+<]')
    assert program == Program([
        Add(),
        Loop([Sub(), ShiftRight(), Add(), ShiftLeft()]),
    ])


def test_nested_loops():
    program = parse_program(b'[[+]-[.]]')
    assert program == Program([
        Loop([Loop([Add()]), Sub(), Loop([Write()])]),
    ])
    assert max_depth(program) == 2


def test_empty_loop():
    assert parse_program(b'[]') == Program([Loop([])])


def test_node_count_matches_non_closing_tokens():
    source = b'++[>++[>+<-]<-]>>.[,]'
    tokens = tokenize(source)
    program = build(tokens)
    expected = sum(1 for t in tokens if t.type is not TokenType.END_LOOP)
    assert count_nodes(program) == expected


def test_deep_nesting():
    depth = 500
    program = parse_program(b'[' * depth + b'+' + b']' * depth)
    assert max_depth(program) == depth
    assert count_nodes(program) == depth + 1


def test_stray_close():
    with pytest.raises(UnbalancedClose) as excinfo:
        parse_program(b']')
    assert excinfo.value.line == 1
    assert excinfo.value.offset == 0
    assert excinfo.value.stage == 'Parse'


def test_extra_close_after_balanced_loop():
    with pytest.raises(UnbalancedClose) as excinfo:
        parse_program(b'[-]\n]')
    assert excinfo.value.line == 2


def test_unterminated_loop():
    with pytest.raises(UnbalancedOpen) as excinfo:
        parse_program(b'+[')
    assert excinfo.value.open_loops == 1
    assert excinfo.value.offset == 1


def test_unterminated_reports_innermost_open_loop():
    with pytest.raises(UnbalancedOpen) as excinfo:
        parse_program(b'[[-]\n[')
    assert excinfo.value.open_loops == 2
    assert excinfo.value.line == 2


def test_lex_error_stops_before_building():
    with pytest.raises(LexError):
        parse_program(b']x')


def test_builders_are_independent():
    first = build(tokenize(b'[+]'))
    second = build(tokenize(b'[-]'))
    assert first == Program([Loop([Add()])])
    assert second == Program([Loop([Sub()])])
