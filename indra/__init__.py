"""A minimal S-expression reader.

`parse` turns text into a tree of typed atoms; `render` turns a tree back
into text.

    >>> from indra import parse, render
    >>> tree = parse("(+ 1 2.5 'x)")
    >>> [atom.kind.name for atom in tree.children()]
    ['SYMBOL', 'INT', 'FLOAT', 'QUOTE', 'SYMBOL']
    >>> render(tree)
    "(+ 1 2.500000 'x)"

Malformed tokens never raise; they become `Kind.ERROR` atoms in the tree,
and structural anomalies are collected on `Reader.diagnostics`.
"""
from indra.atom import Atom, Kind, TreeError, iter_chain, equivalent, validate
from indra.classify import classify
from indra.config import ReaderConfig, ReplConfig
from indra.diagnostics import Diagnostic, DiagnosticKind
from indra.printer import Style, render
from indra.reader import Reader, parse

__all__ = [
    'Atom',
    'Kind',
    'TreeError',
    'iter_chain',
    'equivalent',
    'validate',
    'classify',
    'ReaderConfig',
    'ReplConfig',
    'Diagnostic',
    'DiagnosticKind',
    'Style',
    'render',
    'Reader',
    'parse',
]
