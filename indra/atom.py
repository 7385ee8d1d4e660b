"""The tagged nodes a parsed program is built from.

An `Atom` owns at most one `next` atom, the rest of the sequence it belongs to,
and a `BRANCH` atom additionally owns its `child`, the head of the list between
its parentheses. Every sequence ends with a trailing `NIL` atom, the sentinel,
which never links further.

For `(+ 1 2)` the reader builds

    BRANCH ─child─▶ SYMBOL(+) ─▶ INT(1) ─▶ INT(2) ─▶ NIL
      │
      └─next─▶ NIL
"""
import attr
from enum import Enum, auto as enum
from typing import Iterator, Optional

__all__ = ['Kind', 'Atom', 'TreeError', 'iter_chain', 'equivalent', 'validate']


class Kind(Enum):
    NIL = enum()
    ERROR = enum()
    INT = enum()
    FLOAT = enum()
    STRING = enum()
    SYMBOL = enum()
    QUOTE = enum()
    BRANCH = enum()


class TreeError(ValueError):
    """An atom tree breaks one of the structural invariants."""


@attr.s(eq=False, repr=False)
class Atom:
    kind = attr.ib(default=Kind.NIL)  # type: Kind
    # int, float, str, or None for NIL and BRANCH
    value = attr.ib(default=None)
    next = attr.ib(default=None)  # type: Optional[Atom]
    child = attr.ib(default=None)  # type: Optional[Atom]

    def __repr__(self):
        if self.value is None:
            return 'Atom({})'.format(self.kind.name)
        return 'Atom({}, {!r})'.format(self.kind.name, self.value)

    @property
    def is_nil(self) -> bool:
        return self.kind is Kind.NIL

    def siblings(self) -> Iterator['Atom']:
        return iter_chain(self)

    def children(self) -> Iterator['Atom']:
        return iter_chain(self.child)


def iter_chain(atom: Optional[Atom]) -> Iterator[Atom]:
    """Yield the atoms of a sibling chain, stopping before the sentinel."""
    while atom is not None and atom.kind is not Kind.NIL:
        yield atom
        atom = atom.next


def equivalent(l: Optional[Atom], r: Optional[Atom]) -> bool:
    """Compare two trees by kind, value and shape, without recursion."""
    pending = [(l, r)]
    while pending:
        l, r = pending.pop()
        while l is not None or r is not None:
            if l is None or r is None:
                return False
            if l.kind is not r.kind or l.value != r.value:
                return False
            if (l.child is None) != (r.child is None):
                return False
            if l.child is not None:
                pending.append((l.child, r.child))
            l, r = l.next, r.next
    return True


def validate(root: Atom) -> Atom:
    """Check the structural invariants of a tree and return its root.

    Raises `TreeError` when a chain is missing its sentinel, a sentinel links
    further, `child` is set on anything but a branch (or missing on a branch),
    or an atom is reachable from two owners.
    """
    seen = set()
    pending = [root]
    while pending:
        atom = pending.pop()
        while True:
            if id(atom) in seen:
                raise TreeError('atom {!r} has more than one owner'.format(atom))
            seen.add(id(atom))
            if atom.kind is Kind.BRANCH:
                if atom.child is None:
                    raise TreeError('branch without child sequence')
                pending.append(atom.child)
            elif atom.child is not None:
                raise TreeError('{} atom owns a child'.format(atom.kind.name))
            if atom.kind is Kind.NIL:
                if atom.next is not None:
                    raise TreeError('sentinel links to {!r}'.format(atom.next))
                break
            if atom.next is None:
                raise TreeError(
                    'sequence ends at {!r} without a sentinel'.format(atom))
            atom = atom.next
    return root
