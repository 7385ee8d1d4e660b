"""Settings for the reader and the interactive loop."""
import attr
from indra.printer import Style
from typing import Mapping, Optional

__all__ = ['ReaderConfig', 'ReplConfig']

MAX_DEPTH_VAR = 'INDRA_MAX_DEPTH'


def _positive(instance, attribute, value):
    if value is not None and value < 1:
        raise ValueError('{} must be positive, got {}'.format(
            attribute.name, value))


@attr.s(frozen=True)
class ReaderConfig:
    # lists nested deeper than this become error atoms; None means unbounded
    max_depth = attr.ib(
        default=None,
        validator=[
            attr.validators.optional(attr.validators.instance_of(int)),
            _positive
        ])  # type: Optional[int]
    # append an error atom when input ends inside a string or list
    report_unterminated = attr.ib(
        default=False, validator=attr.validators.instance_of(bool))


@attr.s(frozen=True)
class ReplConfig:
    reader = attr.ib(factory=ReaderConfig)  # type: ReaderConfig
    style = attr.ib(
        default=Style.UNICODE, validator=attr.validators.instance_of(Style))
    prompt = attr.ib(default='ℑ⧽ ')
    result_prompt = attr.ib(default='⟫  ')

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> 'ReplConfig':
        """Pick prompts and rendering for the terminal named by `TERM`.

        The linux console cannot show the decorated glyphs, so it gets ASCII
        prompts and `Style.ASCII`. `INDRA_MAX_DEPTH` bounds list nesting.
        """
        max_depth = environ.get(MAX_DEPTH_VAR)
        reader = ReaderConfig(
            max_depth=int(max_depth) if max_depth else None)
        if environ.get('TERM', 'Apple') == 'linux':
            return cls(reader, Style.ASCII, 'I> ', ' > ')
        return cls(reader)
