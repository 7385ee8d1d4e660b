"""Interactive read-print loop and the `indra` command line.

There is no evaluator: every complete form typed at the prompt is read and
echoed back as its atom tree.
"""
import argparse
import logging
import os
import sys
from typing import Callable, List, Optional, TextIO
from indra.atom import Atom, Kind
from indra.config import ReaderConfig, ReplConfig
from indra.printer import Style, render
from indra.reader import Reader

__all__ = ['Repl', 'load', 'main']

logger = logging.getLogger(__name__)

QUIT = 'quit'


def is_quit(atom: Atom) -> bool:
    """Whether `atom` is the form `(quit)`."""
    body = list(atom.children())
    return (atom.kind is Kind.BRANCH and len(body) == 1
            and body[0].kind is Kind.SYMBOL and body[0].value == QUIT)


def load(path: str, config: Optional[ReaderConfig] = None) -> Atom:
    with open(path, encoding='utf-8') as f:
        source = f.read()
    reader = Reader(source, config)
    tree = reader.parse()
    if not reader.exhausted:
        logger.warning('%s: stopped reading at offset %d', path,
                       reader.position)
    return tree


class Repl:
    def __init__(self,
                 config: ReplConfig,
                 input_func: Callable[[str], str] = input,
                 out: Optional[TextIO] = None):
        self.config = config
        self.input = input_func
        self.out = out or sys.stdout

    def read_form(self) -> Optional[Atom]:
        """Collect lines until they hold complete forms and read them.

        Returns None at end of input, or when any of the forms read is
        `(quit)`; forms before it on the same input are dropped too.
        """
        lines = []  # type: List[str]
        while True:
            try:
                line = self.input(self.config.prompt)
            except EOFError:
                return None
            lines.append(line)
            reader = Reader('\n'.join(lines) + '\n', self.config.reader)
            tree = reader.parse()
            if not reader.truncated:
                return None if any(map(is_quit, tree.siblings())) else tree
            logger.debug('form incomplete after %d line(s)', len(lines))

    def show(self, tree: Atom):
        self.out.write(self.config.result_prompt +
                       render(tree, self.config.style) + '\n')

    def run(self):
        while True:
            tree = self.read_form()
            if tree is None:
                return
            self.show(tree)


def _arguments() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='indra', description='Read S-expressions and print their trees.')
    parser.add_argument('files', nargs='*', help='source files to read first')
    parser.add_argument(
        '--style',
        choices=[each.name.lower() for each in Style],
        help='rendering of trees (default depends on TERM)')
    parser.add_argument(
        '--max-depth', type=int, help='deepest list nesting kept in trees')
    parser.add_argument(
        '--strict',
        action='store_true',
        help='mark unterminated strings and lists with error atoms')
    parser.add_argument(
        '--batch',
        action='store_true',
        help='read the files and exit without prompting')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None,
         environ=None,
         input_func: Callable[[str], str] = input,
         out: Optional[TextIO] = None) -> int:
    parser = _arguments()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')
    out = out or sys.stdout

    try:
        config = ReplConfig.from_environ(
            os.environ if environ is None else environ)
        reader_config = ReaderConfig(
            max_depth=args.max_depth
            if args.max_depth is not None else config.reader.max_depth,
            report_unterminated=args.strict)
    except ValueError as e:
        parser.error(str(e))
    style = Style[args.style.upper()] if args.style else config.style
    config = ReplConfig(reader_config, style, config.prompt,
                        config.result_prompt)

    for path in args.files:
        out.write('----- {} -----\n'.format(path))
        try:
            tree = load(path, reader_config)
        except OSError as e:
            logger.error("can't open %s, ignoring: %s", path, e.strerror)
            continue
        out.write(render(tree, style) + '\n')

    if not args.batch:
        Repl(config, input_func, out).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
