from dataclasses import dataclass
from typing import Any, Callable, Optional

from jsgen.errors import InvalidOptionError

QUOTE_STYLES = ('single', 'double', 'auto')


def default_options():
    return dict(
        file=None,
        sourceContent=None,
        indent=None,
        base=None,
        parse=None,
        comment=False,
        codegenFactory=None,
        format=dict(
            indent=dict(
                style='    ',
                base=0,
                adjustMultilineComment=False,
            ),
            newline='\n',
            space=' ',
            json=False,
            renumber=False,
            hexadecimal=False,
            quotes='single',
            escapeless=False,
            compact=False,
            parentheses=True,
            semicolons=True,
            safeConcatenation=False,
            preserveBlankLines=False
        ),
        moz=dict(
            comprehensionExpressionStartsWithAssignment=False,
            starlessGenerator=False
        ),
        sourceMap=None,
        sourceMapRoot=None,
        sourceMapWithCode=False,
        directive=False,
        raw=True,
        verbatim=None,
        sourceCode=None
    )


FORMAT_DEFAULTS = default_options()['format']

FORMAT_MINIFY = dict(
    indent=dict(
        style='',
        base=0,
    ),
    renumber=True,
    hexadecimal=True,
    quotes='auto',
    escapeless=True,
    compact=True,
    parentheses=False,
    semicolons=False,
)


def update_deeply(target, override):
    for key, val in override.items():
        if isinstance(val, dict):
            if isinstance(target.get(key), dict):
                update_deeply(target[key], val)
            else:
                target[key] = update_deeply({}, val)
        else:
            target[key] = val
    return target


@dataclass(frozen=True)
class Format:
    """Options resolved for a single ``generate`` call."""
    indent: str
    base: str
    newline: str
    space: str
    json: bool
    renumber: bool
    hexadecimal: bool
    quotes: str
    escapeless: bool
    compact: bool
    parentheses: bool
    semicolons: bool
    safe_concatenation: bool
    preserve_blank_lines: bool
    adjust_multiline_comment: bool
    comment: bool
    directive: bool
    raw: bool
    verbatim: Optional[str]
    parse: Optional[Callable[[str], Any]]
    source_code: Optional[str]
    source_map: Any
    source_map_root: Optional[str]
    source_map_with_code: bool
    source_content: Optional[str]
    file: Optional[str]
    comprehension_starts_with_assignment: bool
    starless_generator: bool

    def no_empty_space(self):
        return self.space or ' '


def merge_options(options=None):
    """Merge caller options over the defaults, honouring legacy shorthands."""
    merged = default_options()
    if options is None:
        return merged
    # Obsolete ``indent`` and ``base`` are folded into ``format.indent``.
    if isinstance(options.get('indent'), str):
        merged['format']['indent']['style'] = options['indent']
    if isinstance(options.get('base'), int) and not isinstance(options.get('base'), bool):
        merged['format']['indent']['base'] = options['base']
    return update_deeply(merged, options)


def resolve_options(options=None):
    return build_format(merge_options(options))


def build_format(merged):
    fmt = merged['format']

    indent = fmt['indent']['style']
    if isinstance(merged.get('base'), str):
        base = merged['base']
    else:
        base = indent * fmt['indent']['base']

    json_mode = fmt['json']
    quotes = 'double' if json_mode else fmt['quotes']
    if quotes not in QUOTE_STYLES:
        raise InvalidOptionError('Unknown quotes style: %r' % (quotes,))

    newline = fmt['newline']
    space = fmt['space']
    if fmt['compact']:
        newline = space = indent = base = ''

    source_code = merged['sourceCode']
    return Format(
        indent=indent,
        base=base,
        newline=newline,
        space=space,
        json=json_mode,
        renumber=fmt['renumber'],
        hexadecimal=False if json_mode else fmt['hexadecimal'],
        quotes=quotes,
        escapeless=fmt['escapeless'],
        compact=fmt['compact'],
        parentheses=fmt['parentheses'],
        semicolons=fmt['semicolons'],
        safe_concatenation=fmt['safeConcatenation'],
        preserve_blank_lines=bool(fmt['preserveBlankLines'] and source_code is not None),
        adjust_multiline_comment=fmt['indent'].get('adjustMultilineComment', False),
        comment=merged['comment'],
        directive=merged['directive'],
        raw=merged['raw'],
        verbatim=merged['verbatim'],
        parse=None if json_mode else merged['parse'],
        source_code=source_code,
        source_map=merged['sourceMap'],
        source_map_root=merged['sourceMapRoot'],
        source_map_with_code=merged['sourceMapWithCode'],
        source_content=merged['sourceContent'],
        file=merged['file'],
        comprehension_starts_with_assignment=merged['moz']['comprehensionExpressionStartsWithAssignment'],
        starless_generator=merged['moz']['starlessGenerator'],
    )
