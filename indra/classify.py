"""Decide which literal a token denotes.

The predicates are total and independent; `classify` tries them in a fixed
order (int, float, string, symbol, quote) and falls back to an error.
"""
from indra.atom import Atom, Kind
from typing import Tuple, Union

__all__ = [
    'is_int', 'is_float', 'is_string', 'is_symbol', 'is_quote', 'classify',
    'classify_into'
]

DIGITS = frozenset('0123456789')
INVALID_FIRST = frozenset('0123456789\'"\\')
INVALID_ANY = frozenset('\'"\\')
QUOTE = "'"

Value = Union[int, float, str, None]


def is_int(token: str, natural: bool = False) -> bool:
    if not natural and token.startswith('-'):
        token = token[1:]
    return bool(token) and all(c in DIGITS for c in token)


def _exponent_at(fraction: str) -> int:
    pos = fraction.find('e')
    if pos < 0:
        pos = fraction.find('E')
    return pos


def is_float(token: str) -> bool:
    whole, dot, fraction = token.partition('.')
    if not dot:
        return False
    if whole and not is_int(whole):
        return False
    if not whole and not fraction:
        return False
    pos = _exponent_at(fraction)
    if pos < 0:
        return not fraction or is_int(fraction, natural=True)
    digits, exponent = fraction[:pos], fraction[pos + 1:]
    if digits and not is_int(digits, natural=True):
        return False
    return is_int(exponent)


def is_string(token: str) -> bool:
    return len(token) > 1 and token[0] == '"' and token[-1] == '"'


def is_symbol(token: str) -> bool:
    if not token or token[0] in INVALID_FIRST:
        return False
    return not any(c in INVALID_ANY for c in token)


def is_quote(token: str) -> bool:
    return token == QUOTE


# int() refuses very long digit strings, so convert in chunks
CHUNK = 1000


def int_value(token: str) -> int:
    digits = token.lstrip('-')
    value = 0
    for i in range(0, len(digits), CHUNK):
        chunk = digits[i:i + CHUNK]
        value = value * 10**len(chunk) + int(chunk)
    return -value if token.startswith('-') else value


def _float_value(token: str) -> float:
    whole, _, fraction = token.partition('.')
    pos = _exponent_at(fraction)
    mantissa = whole + (fraction if pos < 0 else fraction[:pos])
    if not any(c in DIGITS for c in mantissa):
        # `.e5` is accepted but has no digits to convert
        return 0.0
    return float(token)


def classify(token: str) -> Tuple[Kind, Value]:
    if is_int(token):
        return Kind.INT, int_value(token)
    if is_float(token):
        return Kind.FLOAT, _float_value(token)
    if is_string(token):
        return Kind.STRING, token[1:-1]
    if is_symbol(token):
        return Kind.SYMBOL, token
    if is_quote(token):
        return Kind.QUOTE, token
    return Kind.ERROR, "Can't parse: <{}>".format(token)


def classify_into(atom: Atom, token: str) -> Atom:
    atom.kind, atom.value = classify(token)
    return atom
