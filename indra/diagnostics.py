"""Structured reports of structural anomalies found while reading.

Diagnostics never abort reading and never become atoms on their own; the
reader collects them and logs each one as it is found.
"""
import attr
from enum import Enum


class DiagnosticKind(Enum):
    STRAY_QUOTE = 'stray-quote'
    STRAY_CLOSE = 'stray-close'
    UNTERMINATED_STRING = 'unterminated-string'
    UNTERMINATED_LIST = 'unterminated-list'
    NESTING_TOO_DEEP = 'nesting-too-deep'


# end of input reached before the form was complete
TRUNCATION = frozenset(
    [DiagnosticKind.UNTERMINATED_STRING, DiagnosticKind.UNTERMINATED_LIST])


@attr.s(frozen=True)
class Diagnostic:
    kind = attr.ib()  # type: DiagnosticKind
    message = attr.ib()  # type: str
    # offset into the reader's text
    position = attr.ib()  # type: int

    @property
    def is_truncation(self) -> bool:
        return self.kind in TRUNCATION

    def __str__(self):
        return '{} at {}: {}'.format(self.kind.value, self.position,
                                     self.message)
