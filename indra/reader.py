"""Character-by-character reader turning text into an atom tree.

The reader is a three-state machine (plain text, inside a string, inside a
comment) combined with recursive descent on `(`. Each nesting level is a
generator driven by `indra.scheduling.scheduling`, so deep nesting does not
exhaust the interpreter stack.

Malformed input never raises:

- tokens matching no literal become `ERROR` atoms in place;
- structural anomalies are recorded as `Diagnostic`s and logged;
- input ending inside a string or list yields what was read so far.
"""
import logging
from enum import Enum, auto as enum
from typing import List, Optional
from indra.atom import Atom, Kind
from indra.classify import classify_into, QUOTE
from indra.config import ReaderConfig
from indra.diagnostics import Diagnostic, DiagnosticKind
from indra.scheduling import scheduling

__all__ = ['ParseState', 'Reader', 'parse']

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(' \t\n\r')


class ParseState(Enum):
    PLAIN = enum()
    INSIDE_STRING = enum()
    INSIDE_COMMENT = enum()


class Reader:
    """Reads atoms from an immutable text buffer.

    `position` is the read cursor; every character before it has been
    consumed. A `parse()` call stops at the end of the text or at a `)`
    closing the top level, so calling it again continues with the rest.
    """

    def __init__(self, text: str, config: Optional[ReaderConfig] = None):
        self.text = text
        self.position = 0
        self.config = config or ReaderConfig()
        self.diagnostics = []  # type: List[Diagnostic]

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.text)

    @property
    def truncated(self) -> bool:
        """Whether input ended inside a string or a list."""
        return any(each.is_truncation for each in self.diagnostics)

    def parse(self) -> Atom:
        return scheduling(self._sequence(0, self.position))

    def _report(self, kind: DiagnosticKind, message: str, position: int,
                level=logging.WARNING):
        diagnostic = Diagnostic(kind, message, position)
        self.diagnostics.append(diagnostic)
        logger.log(level, '%s', diagnostic)

    @staticmethod
    def _flush(slot: Atom, token: List[str]) -> Atom:
        classify_into(slot, ''.join(token))
        token.clear()
        slot.next = Atom()
        return slot.next

    def _error(self, slot: Atom, message: str) -> Atom:
        slot.kind = Kind.ERROR
        slot.value = message
        slot.next = Atom()
        return slot.next

    def _branch(self, slot: Atom, child: Atom, depth: int, opened_at: int):
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            message = 'Nesting too deep: {}'.format(max_depth)
            self._report(DiagnosticKind.NESTING_TOO_DEEP, message, opened_at)
            return self._error(slot, message)
        slot.kind = Kind.BRANCH
        slot.child = child
        slot.next = Atom()
        return slot.next

    def _sequence(self, depth: int, opened_at: int):
        text = self.text
        end = len(text)
        state = ParseState.PLAIN
        token = []  # type: List[str]
        escaped = False
        start = slot = Atom()

        while self.position < end:
            c = text[self.position]
            self.position += 1

            if state is ParseState.PLAIN:
                if c == '(':
                    if token:
                        slot = self._flush(slot, token)
                    paren = self.position - 1
                    child = yield self._sequence(depth + 1, paren)
                    slot = self._branch(slot, child, depth + 1, paren)
                elif c == ')':
                    if token:
                        slot = self._flush(slot, token)
                    if depth == 0:
                        self._report(DiagnosticKind.STRAY_CLOSE,
                                     'unmatched `)`, rest left unread',
                                     self.position - 1)
                    return start
                elif c == ';':
                    if token:
                        slot = self._flush(slot, token)
                    state = ParseState.INSIDE_COMMENT
                elif c == QUOTE:
                    if token:
                        # kept inside the token, as in `don't`
                        token.append(c)
                    else:
                        slot = self._flush(slot, [c])
                elif c in WHITESPACE:
                    if token:
                        slot = self._flush(slot, token)
                elif c == '"':
                    if token:
                        self._report(
                            DiagnosticKind.STRAY_QUOTE,
                            '`"` after <{}> dropped'.format(''.join(token)),
                            self.position - 1)
                    else:
                        state = ParseState.INSIDE_STRING
                        escaped = False
                        token.append(c)
                else:
                    token.append(c)

            elif state is ParseState.INSIDE_COMMENT:
                if c == '\n':
                    state = ParseState.PLAIN
                    token.clear()

            else:
                if c == '\\':
                    escaped = True
                elif c == '"' and not escaped:
                    token.append(c)
                    slot = self._flush(slot, token)
                    state = ParseState.PLAIN
                else:
                    token.append(c)
                    escaped = False

        if state is ParseState.PLAIN and token:
            slot = self._flush(slot, token)
        elif state is ParseState.INSIDE_STRING:
            pending = ''.join(token)
            self._report(DiagnosticKind.UNTERMINATED_STRING,
                         'string <{}> not closed'.format(pending), end,
                         logging.DEBUG)
            if self.config.report_unterminated:
                slot = self._error(slot,
                                   'Unterminated string: <{}>'.format(pending))
        if depth > 0:
            self._report(DiagnosticKind.UNTERMINATED_LIST,
                         'list opened at {} not closed'.format(opened_at), end,
                         logging.DEBUG)
            if self.config.report_unterminated:
                self._error(slot, 'Unterminated list')
        return start


def parse(text: str, config: Optional[ReaderConfig] = None) -> Atom:
    """Read all top-level forms of `text` up to its end or a stray `)`."""
    return Reader(text, config).parse()
