import pytest

from indra.atom import Atom, Kind
from indra.classify import (classify, classify_into, is_float, is_int,
                            is_quote, is_string, is_symbol)


@pytest.mark.parametrize('token, value', [
    ('0', 0),
    ('42', 42),
    ('-7', -7),
    ('007', 7),
    ('-0', 0),
    ('123456789012345678901234567890', 123456789012345678901234567890),
])
def test_integers(token, value):
    assert classify(token) == (Kind.INT, value)


@pytest.mark.parametrize('token', ['', '-', '12a', '--1', '+1', '1-', '١٢'])
def test_not_integers(token):
    assert not is_int(token)


def test_natural_numbers_reject_sign():
    assert is_int('12', natural=True)
    assert not is_int('-12', natural=True)
    assert not is_int('', natural=True)


@pytest.mark.parametrize('token, value', [
    ('1.5', 1.5),
    ('-2.25', -2.25),
    ('3.', 3.0),
    ('.5', 0.5),
    ('1.5e3', 1500.0),
    ('1.5E3', 1500.0),
    ('2.e2', 200.0),
    ('1.0e-2', 0.01),
    ('-1.25E-1', -0.125),
])
def test_floats(token, value):
    kind, parsed = classify(token)
    assert kind is Kind.FLOAT
    assert parsed == pytest.approx(value)


def test_float_without_mantissa_digits_is_zero():
    assert classify('.e5') == (Kind.FLOAT, 0.0)


@pytest.mark.parametrize('token', [
    '1.2.3', 'abc.1', '.', '1', '1.5e', '1.5e+3', '1.x', '-.5', '1.5e3.0'
])
def test_not_floats(token):
    assert not is_float(token)


def test_strings():
    assert classify('"hello"') == (Kind.STRING, 'hello')
    assert classify('""') == (Kind.STRING, '')
    assert classify('"1.5"') == (Kind.STRING, '1.5')
    assert not is_string('"')
    assert not is_string('"abc')


@pytest.mark.parametrize('token', ['x', '+', '-', '.', 'list->vector', 'a1', '#t'])
def test_symbols(token):
    assert classify(token) == (Kind.SYMBOL, token)


@pytest.mark.parametrize('token', ['', '1abc', "'a", "a'", 'a"b', 'a\\b', '\\'])
def test_not_symbols(token):
    assert not is_symbol(token)


def test_quote_marker():
    assert is_quote("'")
    assert not is_quote("''")
    assert classify("'") == (Kind.QUOTE, "'")


@pytest.mark.parametrize('token', ['12a', "don't", 'a\\b', "''", '1.5e+3'])
def test_errors_carry_token(token):
    assert classify(token) == (Kind.ERROR, "Can't parse: <{}>".format(token))


def test_classify_into_writes_atom_in_place():
    atom = Atom()
    assert classify_into(atom, '-3') is atom
    assert atom.kind is Kind.INT
    assert atom.value == -3
    assert atom.next is None


def test_integers_of_any_length():
    digits = '12345' * 1000
    kind, value = classify('-' + digits)
    assert kind is Kind.INT
    assert value % 100000 == -12345 % 100000
    assert value < -10**4999
