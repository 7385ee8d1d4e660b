import logging

import pytest

from indra.atom import Kind, equivalent, iter_chain, validate
from indra.config import ReaderConfig
from indra.diagnostics import DiagnosticKind
from indra.reader import Reader, parse


def shape(atom):
    """Nested python lists of (kind name, value), sentinels dropped."""
    out = []
    for each in iter_chain(atom):
        if each.kind is Kind.BRANCH:
            out.append(shape(each.child))
        else:
            out.append((each.kind.name, each.value))
    return out


def kinds(reader):
    return [each.kind for each in reader.diagnostics]


def test_simple_list():
    root = validate(parse('(+ 1 2)'))
    assert root.kind is Kind.BRANCH
    assert root.next.kind is Kind.NIL
    assert root.next.next is None
    plus = root.child
    assert (plus.kind, plus.value) == (Kind.SYMBOL, '+')
    assert (plus.next.kind, plus.next.value) == (Kind.INT, 1)
    assert (plus.next.next.kind, plus.next.next.value) == (Kind.INT, 2)
    assert plus.next.next.next.kind is Kind.NIL
    assert plus.next.next.next.next is None


def test_nested_lists():
    root = validate(parse('(a (b c) d)'))
    assert shape(root) == [[
        ('SYMBOL', 'a'),
        [('SYMBOL', 'b'), ('SYMBOL', 'c')],
        ('SYMBOL', 'd'),
    ]]


def test_empty_list_owns_a_sentinel():
    root = validate(parse('()'))
    assert root.kind is Kind.BRANCH
    assert root.child.kind is Kind.NIL
    assert shape(root) == [[]]


def test_several_top_level_forms():
    assert shape(parse('1 (x) "s"')) == [('INT', 1), [('SYMBOL', 'x')],
                                         ('STRING', 's')]


def test_token_followed_by_open_paren():
    assert shape(parse('f(x)')) == [('SYMBOL', 'f'), [('SYMBOL', 'x')]]


def test_all_whitespace_separates_tokens():
    assert shape(parse('a\tb\nc\rd e')) == [('SYMBOL', c) for c in 'abcde']


def test_comment_line_is_ignored():
    assert equivalent(parse('; comment\n(x)'), parse('(x)'))


def test_comment_ends_pending_token():
    assert shape(parse('(a;b c\nd)')) == [[('SYMBOL', 'a'), ('SYMBOL', 'd')]]


def test_comment_at_end_of_input():
    assert shape(parse('x ; trailing')) == [('SYMBOL', 'x')]


def test_quote_is_a_sibling_marker():
    root = validate(parse("'x"))
    assert root.kind is Kind.QUOTE
    assert (root.next.kind, root.next.value) == (Kind.SYMBOL, 'x')
    assert root.next.next.kind is Kind.NIL
    assert root.child is None


def test_quoted_list():
    assert shape(parse("'(1 2)")) == [('QUOTE', "'"), [('INT', 1), ('INT', 2)]]


def test_quote_inside_token_is_kept():
    assert shape(parse("don't")) == [('ERROR', "Can't parse: <don't>")]


def test_string_atom():
    assert shape(parse('"hello"')) == [('STRING', 'hello')]


def test_string_keeps_delimiters_and_comment_chars():
    assert shape(parse('("a (b) ; c" d)')) == [[('STRING', 'a (b) ; c'),
                                                ('SYMBOL', 'd')]]


def test_escaped_quote_inside_string():
    assert shape(parse(r'"say \"hi\""')) == [('STRING', 'say "hi"')]


def test_backslash_is_dropped_before_any_character():
    assert shape(parse(r'"a\nb\\c"')) == [('STRING', 'anbc')]


def test_string_ends_token_without_whitespace():
    assert shape(parse('"a"b')) == [('STRING', 'a'), ('SYMBOL', 'b')]


def test_error_atoms_do_not_stop_parsing():
    root = validate(parse('(1 12a x)'))
    assert shape(root) == [[('INT', 1), ('ERROR', "Can't parse: <12a>"),
                            ('SYMBOL', 'x')]]


def test_floats_in_lists():
    assert shape(parse('(1.5 -2.e1)')) == [[('FLOAT', 1.5), ('FLOAT', -20.0)]]


def test_pending_token_flushed_at_end_of_input():
    assert shape(parse('abc')) == [('SYMBOL', 'abc')]


def test_empty_input_is_single_sentinel():
    root = parse('')
    assert root.kind is Kind.NIL
    assert root.next is None


def test_exhausted_reader_returns_sentinel_again():
    reader = Reader('(a)')
    reader.parse()
    assert reader.exhausted
    root = reader.parse()
    assert root.kind is Kind.NIL
    assert root.next is None


def test_stray_quote_is_dropped(caplog):
    reader = Reader('(ab"c)')
    with caplog.at_level(logging.WARNING, logger='indra.reader'):
        root = reader.parse()
    assert shape(root) == [[('SYMBOL', 'abc')]]
    assert kinds(reader) == [DiagnosticKind.STRAY_QUOTE]
    assert reader.diagnostics[0].position == 3
    assert 'stray-quote' in caplog.text


def test_stray_close_stops_top_level():
    reader = Reader('a) b')
    assert shape(reader.parse()) == [('SYMBOL', 'a')]
    assert kinds(reader) == [DiagnosticKind.STRAY_CLOSE]
    assert reader.remaining == ' b'
    assert shape(reader.parse()) == [('SYMBOL', 'b')]
    assert reader.exhausted


def test_unterminated_list_yields_partial_tree():
    reader = Reader('(a (b c')
    root = validate(reader.parse())
    assert shape(root) == [[('SYMBOL', 'a'), [('SYMBOL', 'b'), ('SYMBOL', 'c')]]]
    assert kinds(reader) == [DiagnosticKind.UNTERMINATED_LIST] * 2
    assert reader.truncated


def test_unterminated_string_is_discarded():
    reader = Reader('(a "abc')
    root = validate(reader.parse())
    assert shape(root) == [[('SYMBOL', 'a')]]
    assert kinds(reader) == [
        DiagnosticKind.UNTERMINATED_STRING, DiagnosticKind.UNTERMINATED_LIST
    ]


def test_unterminated_forms_reported_as_errors_when_strict():
    reader = Reader('(a "abc', ReaderConfig(report_unterminated=True))
    root = validate(reader.parse())
    assert shape(root) == [[
        ('SYMBOL', 'a'),
        ('ERROR', 'Unterminated string: <"abc>'),
        ('ERROR', 'Unterminated list'),
    ]]


def test_complete_input_has_no_diagnostics():
    reader = Reader('(define (f x) (* x 2)) ; done\n')
    reader.parse()
    assert reader.diagnostics == []
    assert not reader.truncated


def test_deep_nesting_does_not_exhaust_stack():
    depth = 5000
    root = validate(parse('(' * depth + 'x' + ')' * depth))
    atom = root
    for _ in range(depth):
        assert atom.kind is Kind.BRANCH
        atom = atom.child
    assert (atom.kind, atom.value) == (Kind.SYMBOL, 'x')


def test_nesting_beyond_limit_becomes_error():
    reader = Reader('(a (b (c)) d)', ReaderConfig(max_depth=2))
    root = validate(reader.parse())
    assert shape(root) == [[
        ('SYMBOL', 'a'),
        [('SYMBOL', 'b'), ('ERROR', 'Nesting too deep: 2')],
        ('SYMBOL', 'd'),
    ]]
    assert kinds(reader) == [DiagnosticKind.NESTING_TOO_DEEP]
    assert reader.diagnostics[0].position == 6
    assert reader.exhausted


@pytest.mark.parametrize('source', [
    '(+ 1 2)',
    "(define (f x) '(x \"y\" 1.5))",
    '((()))',
    '; only a comment',
    'a b c',
])
def test_trees_are_well_formed(source):
    validate(parse(source))
