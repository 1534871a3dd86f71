import pytest

import jsgen
from jsgen import CodeGenerator, UnknownNodeTypeError, generate
from jsgen.constant import Precedence
from tests.nodes import binary, block, ident, lit, obj, program, prop, stmt


def test_unknown_root_node():
    with pytest.raises(UnknownNodeTypeError, match='Unknown node type: Foo'):
        generate({'type': 'Foo'})


def test_unknown_nested_node():
    with pytest.raises(UnknownNodeTypeError) as excinfo:
        generate(stmt({'type': 'Bar'}))
    assert excinfo.value.node_type == 'Bar'


def test_statement_kind_in_expression_position_is_rejected():
    with pytest.raises(UnknownNodeTypeError):
        generate(stmt({'type': 'EmptyStatement'}))


def test_exported_precedence_is_a_copy():
    jsgen.Precedence['Sequence'] = 99
    try:
        assert Precedence['Sequence'] == 0
    finally:
        jsgen.Precedence['Sequence'] = 0


def test_verbatim_string():
    node = program(stmt(lit(1, **{'x-verbatim': 'FOO\nBAR'})))
    assert generate(node, {'verbatim': 'x-verbatim'}) == 'FOO\nBAR;'
    assert generate(node) == '1;'


def test_verbatim_with_precedence():
    inner = lit(2, **{'x-verbatim': {'content': 'a, b', 'precedence': Precedence['Sequence']}})
    assert generate(binary('+', lit(1), inner), {'verbatim': 'x-verbatim'}) == '1 + (a, b)'
    inner = lit(2, **{'x-verbatim': {'content': 'a.b', 'precedence': Precedence['Primary']}})
    assert generate(binary('+', lit(1), inner), {'verbatim': 'x-verbatim'}) == '1 + a.b'


def test_verbatim_lines_follow_indentation():
    node = program(block(stmt(lit(1, **{'x-verbatim': 'a\nb'}))))
    assert generate(node, {'verbatim': 'x-verbatim'}) == '{\n    a\n    b;\n}'


class PlaceholderGenerator(CodeGenerator):
    Expression = CodeGenerator.Expression | frozenset(['Placeholder'])

    def Placeholder(self, expr, precedence, flags):
        return '__%s__' % expr['name']


def test_codegen_factory():
    node = stmt({'type': 'Placeholder', 'name': 'x'})
    assert generate(node, {'codegenFactory': PlaceholderGenerator}) == '__x__;'
    with pytest.raises(UnknownNodeTypeError):
        generate(node)


def test_calls_do_not_share_state():
    nested = program(block(block(stmt(ident('a')))))
    first = generate(nested)
    assert generate(nested, {'format': {'compact': True}}) == '{{a;}}'
    assert generate(nested) == first == '{\n    {\n        a;\n    }\n}'


def export_from(*specifiers):
    return {'type': 'ExportNamedDeclaration', 'declaration': None,
            'specifiers': list(specifiers), 'source': lit('m')}


def test_export_specifier_with_string_names():
    renamed = {'type': 'ExportSpecifier', 'local': lit('a'), 'exported': lit('b')}
    same = {'type': 'ExportSpecifier', 'local': lit('a'), 'exported': lit('a')}
    assert generate(export_from(renamed)) == "export {\n    'a' as 'b'\n} from 'm';"
    assert generate(export_from(same)) == "export {\n    'a'\n} from 'm';"


def test_export_specifier_with_identifiers():
    renamed = {'type': 'ExportSpecifier', 'local': ident('a'), 'exported': ident('b')}
    same = {'type': 'ExportSpecifier', 'local': ident('a'), 'exported': ident('a')}
    assert generate(export_from(renamed, same)) == 'export {\n    a as b,\n    a\n} from \'m\';'


def test_import_specifier_with_string_name_keeps_local_binding():
    node = {
        'type': 'ImportDeclaration',
        'source': lit('m'),
        'specifiers': [{'type': 'ImportSpecifier', 'imported': lit('a'), 'local': ident('a')}],
    }
    assert generate(node) == "import { 'a' as a } from 'm';"


class JsdocGenerator(CodeGenerator):
    def JsdocBlock(self, block):
        tags = ' '.join('@%s {%s}' % (tag['tag'], tag['type']) for tag in block['tags'])
        return '/** %s */' % tags


def jsdoc(*tags, **extra):
    block = {'tags': [{'tag': tag, 'type': kind} for tag, kind in tags]}
    block.update(extra)
    return block


def test_jsdoc_type_tag_casts_expression():
    node = stmt(dict(ident('x'), jsdoc=jsdoc(('type', 'number'), endLine=0)))
    assert generate(node, {'codegenFactory': JsdocGenerator}) == '/** @type {number} */(x);'
    assert generate(node) == 'x;'


def test_jsdoc_without_type_tag_is_prefixed():
    node = stmt(dict(ident('x'), jsdoc=jsdoc(('see', 'y'))))
    assert generate(node, {'codegenFactory': JsdocGenerator}) == '/** @see {y} */x;'


def test_multiline_jsdoc_does_not_cast():
    node = stmt(dict(ident('x'), jsdoc=jsdoc(('type', 'number'), endLine=2)))
    assert generate(node, {'codegenFactory': JsdocGenerator}) == '/** @type {number} */x;'


def test_jsdoc_on_property_does_not_cast():
    node = obj(prop(ident('a'), lit(1), jsdoc=jsdoc(('type', 'number'))))
    assert generate(node, {'codegenFactory': JsdocGenerator}) == '{ /** @type {number} */a: 1 }'


def test_jsdoc_on_statement():
    node = program(stmt(ident('a'), jsdoc=jsdoc(('param', 'string'))))
    assert generate(node, {'codegenFactory': JsdocGenerator}) == '/** @param {string} */a;'


def test_program_jsdoc_blocks_come_first():
    node = program(stmt(ident('a')), jsdocBlocks=[jsdoc(('file', 'x'))])
    assert generate(node, {'codegenFactory': JsdocGenerator}) == '/** @file {x} */\n\na;'
    assert generate(node) == 'a;'
