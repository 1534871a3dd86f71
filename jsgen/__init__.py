"""JavaScript code generation from ESTree (Mozilla Parser API) syntax trees."""
import logging

from jsgen.codegen import CodeGenerator
from jsgen.comments import attach_comments
from jsgen.constant import E_TTT, S_TFFF, Precedence as _Precedence
from jsgen.errors import CodeGenerationError, InvalidNumericLiteralError, InvalidOptionError, UnknownNodeTypeError
from jsgen.fragment import flatten
from jsgen.options import FORMAT_DEFAULTS, FORMAT_MINIFY, build_format, merge_options
from jsgen.sourcemap import to_string_with_source_map

__version__ = '1.0.0'

logger = logging.getLogger(__name__)

Precedence = dict(_Precedence)


def generate(node, options=None):
    """Generate JavaScript source for ``node``.

    Returns the code as a string. With ``sourceMap`` set, returns the source
    map as a JSON string instead, or ``{'code': ..., 'map': ...}`` when
    ``sourceMapWithCode`` is also set.
    """
    merged = merge_options(options)
    fmt = build_format(merged)
    factory = merged['codegenFactory'] or CodeGenerator
    codegen = factory(fmt)

    if codegen.is_statement(node):
        result = codegen.generate_statement(node, S_TFFF)
    elif codegen.is_expression(node):
        result = codegen.generate_expression(node, _Precedence['Sequence'], E_TTT)
    else:
        raise UnknownNodeTypeError(node.get('type'))

    if not fmt.source_map:
        code = flatten(result)
        if fmt.source_map_with_code:
            return {'code': code, 'map': None}
        return code

    pair = to_string_with_source_map(result, file=fmt.file, source_root=fmt.source_map_root)
    if fmt.source_content and isinstance(fmt.source_map, str):
        pair['map'].set_source_content(fmt.source_map, fmt.source_content)

    if fmt.source_map_with_code:
        return pair
    return str(pair['map'])


__all__ = [
    'CodeGenerationError',
    'CodeGenerator',
    'FORMAT_DEFAULTS',
    'FORMAT_MINIFY',
    'InvalidNumericLiteralError',
    'InvalidOptionError',
    'Precedence',
    'UnknownNodeTypeError',
    'attach_comments',
    'generate',
]
