import dataclasses

import pytest

from jsgen import FORMAT_MINIFY, InvalidOptionError, generate
from jsgen.constant import E_TTT
from jsgen.options import FORMAT_DEFAULTS, resolve_options
from tests.nodes import binary, block, ident, lit, obj, program, prop, stmt, unary

COMPACT = {'format': {'compact': True}}


def test_compact_keeps_unary_operators_apart():
    assert generate(binary('+', ident('a'), unary('+', ident('b'))), COMPACT) == 'a+ +b'
    assert generate(binary('-', ident('a'), unary('-', ident('b'))), COMPACT) == 'a- -b'
    assert generate(binary('-', ident('a'), unary('-', ident('b')))) == 'a - -b'


def test_compact_keeps_word_operators_apart():
    assert generate(unary('typeof', ident('x')), COMPACT) == 'typeof x'
    assert generate(binary('in', ident('a'), ident('b')), COMPACT) == 'a in b'
    assert generate(binary('+', ident('a'), ident('b')), COMPACT) == 'a+b'


def test_minify_preset(regenerate):
    code = 'var answer = 42 ;  if (answer) { call(answer, "x"); }'
    assert regenerate(code, {'format': FORMAT_MINIFY}) == "var answer=42;if(answer){call(answer,'x')}"


def test_object_expression_statement_is_wrapped():
    assert generate(stmt(obj())) == '({});'


def test_function_expression_statement_is_wrapped():
    func = {'type': 'FunctionExpression', 'id': None, 'params': [], 'body': block(),
            'generator': False, 'async': False}
    assert generate(stmt(func)) == '(function () {\n});'


def test_class_expression_statement_is_wrapped():
    cls = {'type': 'ClassExpression', 'id': None, 'superClass': None, 'body': {'type': 'ClassBody', 'body': []}}
    assert generate(stmt(cls)) == '(class {\n});'


def test_identifier_starting_with_keyword_is_not_wrapped():
    assert generate(stmt(ident('classy'))) == 'classy;'
    assert generate(stmt(ident('functional'))) == 'functional;'


def test_last_semicolon_dropped_without_semicolons():
    tree = program(stmt(ident('a')), stmt(ident('b')))
    options = {'format': {'compact': True, 'semicolons': False}}
    assert generate(tree, options) == 'a;b'


def test_safe_concatenation():
    tree = program(stmt(ident('a')), stmt(ident('b')))
    options = {'format': {'compact': True, 'semicolons': False, 'safeConcatenation': True}}
    assert generate(tree, options) == '\na;b;'


def test_do_while_always_ends_with_semicolon():
    loop = {'type': 'DoWhileStatement', 'body': block(), 'test': ident('a')}
    options = {'format': {'compact': True, 'semicolons': False}}
    assert generate(program(loop), options) == 'do{}while(a);'
    assert generate(program(loop)) == 'do {\n} while (a);'


def test_if_else_layout():
    node = {
        'type': 'IfStatement',
        'test': ident('a'),
        'consequent': block(stmt(ident('b'))),
        'alternate': block(stmt(ident('c'))),
    }
    assert generate(node) == 'if (a) {\n    b;\n} else {\n    c;\n}'


def test_if_without_block_indents_body():
    node = {'type': 'IfStatement', 'test': ident('a'), 'consequent': stmt(ident('b')), 'alternate': None}
    assert generate(node) == 'if (a)\n    b;'


def test_variable_declaration():
    node = {
        'type': 'VariableDeclaration',
        'kind': 'var',
        'declarations': [
            {'type': 'VariableDeclarator', 'id': ident('a'), 'init': lit(1)},
            {'type': 'VariableDeclarator', 'id': ident('b'), 'init': None},
        ],
    }
    assert generate(node) == 'var a = 1, b;'


def test_arrow_with_object_body_is_wrapped():
    arrow = {'type': 'ArrowFunctionExpression', 'id': None, 'params': [ident('x')], 'body': obj(),
             'expression': True, 'generator': False, 'async': False}
    assert generate(arrow) == 'x => ({})'


def test_class_members():
    member = {'type': 'PropertyDefinition', 'key': {'type': 'PrivateIdentifier', 'name': 'x'},
              'value': lit(1), 'computed': False, 'static': True}
    node = {'type': 'ClassDeclaration', 'id': ident('A'), 'superClass': None,
            'body': {'type': 'ClassBody', 'body': [member]}}
    assert generate(node) == 'class A {\n    static #x = 1;\n}'


def test_export_all_as_namespace():
    node = {'type': 'ExportAllDeclaration', 'exported': ident('ns'), 'source': lit('m')}
    assert generate(node) == "export * as ns from 'm';"


def test_json_object():
    node = obj(prop(ident('a'), lit(1)))
    assert generate(node, {'format': {'json': True}}) == '{ "a": 1 }'


def test_indent_style_and_base():
    node = block(stmt(ident('a')))
    assert generate(node, {'format': {'indent': {'style': '\t'}}}) == '{\n\ta;\n}'
    assert generate(node, {'format': {'indent': {'style': '  ', 'base': 2}}}) == '{\n      a;\n    }'


def test_legacy_indent_options():
    node = block(stmt(ident('a')))
    assert generate(node, {'indent': '\t', 'base': 1}) == '{\n\t\ta;\n\t}'


def test_resolve_options_compact_blanks_whitespace():
    fmt = resolve_options(COMPACT)
    assert (fmt.newline, fmt.space, fmt.indent, fmt.base) == ('', '', '', '')
    assert fmt.no_empty_space() == ' '


def test_json_forces_double_quotes_and_drops_hexadecimal():
    fmt = resolve_options({'format': {'json': True, 'quotes': 'single', 'hexadecimal': True}})
    assert fmt.quotes == 'double'
    assert fmt.hexadecimal is False


def test_unknown_quote_style_is_rejected():
    with pytest.raises(InvalidOptionError):
        resolve_options({'format': {'quotes': 'backtick'}})


def test_defaults_are_not_mutated_by_a_call():
    generate(ident('a'), {'format': {'compact': True, 'indent': {'style': '\t'}}})
    assert FORMAT_DEFAULTS['compact'] is False
    assert FORMAT_DEFAULTS['indent']['style'] == '    '


def test_flags_are_frozen():
    narrowed = E_TTT.with_(allow_in=False)
    assert narrowed.allow_in is False
    assert E_TTT.allow_in is True
    with pytest.raises(dataclasses.FrozenInstanceError):
        E_TTT.allow_in = False
