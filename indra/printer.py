"""Render atom trees back to text.

`Style.PLAIN` and `Style.SOURCE` print forms the way they are written.
`Style.UNICODE` and `Style.ASCII` are debugging views that show every sentinel
of the sibling chains, so the tree shape stays visible.
"""
from enum import Enum, auto as enum
from indra.atom import Atom, Kind
from indra.classify import CHUNK
from typing import List, Optional

__all__ = ['Style', 'render']

NIL_MARK = '⦉'
SYMBOL_MARK = '⧼𝔰⧽'
CHUNK_LIMIT = 10**CHUNK
INF = float('inf')


class Style(Enum):
    PLAIN = enum()
    SOURCE = enum()
    UNICODE = enum()
    ASCII = enum()

    @property
    def decorated(self) -> bool:
        return self in (Style.UNICODE, Style.ASCII)


def _quoted(s: str) -> str:
    # the reader drops every backslash, so only quotes can be escaped
    return '"{}"'.format(s.replace('"', '\\"'))


def int_text(n: int) -> str:
    """`str` for ints of any length."""
    if -CHUNK_LIMIT < n < CHUNK_LIMIT:
        return str(n)
    sign, n = ('-', -n) if n < 0 else ('', n)
    chunks = []
    while n >= CHUNK_LIMIT:
        n, low = divmod(n, CHUNK_LIMIT)
        chunks.append('{:0{}d}'.format(low, CHUNK))
    chunks.append(str(n))
    return sign + ''.join(reversed(chunks))


def _source_float(f: float) -> str:
    if f in (INF, -INF):
        # overflows back to infinity when read
        return '1.0e999' if f > 0 else '-1.0e999'
    s = repr(f).replace('e+', 'e')
    if '.' in s:
        return s
    if 'e' in s:
        mantissa, exponent = s.split('e')
        return '{}.0e{}'.format(mantissa, exponent)
    return s + '.0'


def text_of(atom: Atom, style: Style) -> str:
    kind = atom.kind
    if kind is Kind.NIL:
        return NIL_MARK if style is Style.UNICODE else ''
    if kind is Kind.ERROR:
        return '<Error: {}>'.format(atom.value)
    if kind is Kind.BRANCH:
        return '('
    if kind is Kind.INT:
        return int_text(atom.value)
    if kind is Kind.FLOAT:
        if style is Style.SOURCE:
            return _source_float(atom.value)
        return '{:f}'.format(atom.value)
    if kind is Kind.STRING:
        if style is Style.PLAIN:
            return atom.value
        return _quoted(atom.value)
    if kind is Kind.QUOTE:
        return "'"
    if style is Style.UNICODE:
        return SYMBOL_MARK + atom.value
    return atom.value


def _render_forms(root: Atom, style: Style, parts: List[str]):
    # work items: literal text, or (chain head, is first in its list, glued)
    work = [(root, True, False)]
    while work:
        item = work.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        atom, first, glued = item
        while atom is not None and atom.kind is not Kind.NIL:
            if not first and not glued:
                parts.append(' ')
            first = False
            glued = atom.kind is Kind.QUOTE
            if atom.kind is Kind.BRANCH:
                parts.append('(')
                work.append((atom.next, False, False))
                work.append(')')
                work.append((atom.child, True, False))
                break
            parts.append(text_of(atom, style))
            atom = atom.next


def _render_decorated(root: Atom, style: Style, parts: List[str]):
    work = [root]
    while work:
        item = work.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        atom = item  # type: Optional[Atom]
        while atom is not None:
            parts.append(text_of(atom, style))
            if atom.child is not None:
                if atom.next is not None:
                    work.append(atom.next)
                    work.append(' ')
                work.append(')')
                work.append(atom.child)
                break
            if atom.next is not None and atom.kind is not Kind.QUOTE:
                parts.append(' ')
            atom = atom.next


def render(root: Atom, style: Style = Style.PLAIN) -> str:
    """Render the chain starting at `root`, including every nested list."""
    parts = []  # type: List[str]
    if style.decorated:
        _render_decorated(root, style, parts)
    else:
        _render_forms(root, style, parts)
    return ''.join(parts)
