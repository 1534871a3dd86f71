import pytest

from jsgen import CodeGenerationError, attach_comments, generate
from jsgen.comments import calculate_spaces
from tests.nodes import block, ident, program, stmt


def test_leading_line_comment():
    tree = program(stmt(ident('a'), leadingComments=[{'type': 'Line', 'value': ' hello'}]))
    assert generate(tree, {'comment': True}) == '// hello\na;'


def test_comments_are_ignored_unless_enabled():
    tree = program(stmt(ident('a'), leadingComments=[{'type': 'Line', 'value': ' hello'}]))
    assert generate(tree) == 'a;'


def test_trailing_block_comment_on_statement():
    tree = program(stmt(ident('a'), trailingComments=[{'type': 'Block', 'value': ' c '}]))
    assert generate(tree, {'comment': True}) == 'a;    /* c */'


def test_comment_only_program_with_safe_concatenation():
    tree = program(leadingComments=[{'type': 'Line', 'value': ' x'}])
    options = {'comment': True, 'format': {'safeConcatenation': True}}
    assert generate(tree, options) == '\n// x\n'


def test_calculate_spaces_measures_the_last_line():
    assert calculate_spaces('    a') == 5
    assert calculate_spaces('a\n  b') == 3
    assert calculate_spaces('') == 0


def test_attach_and_regenerate(regenerate_with_comments):
    code = '// lead\nvar a = 1; // trail\n'
    assert regenerate_with_comments(code) == '// lead\nvar a = 1;    // trail\n'


def test_attach_comments_inside_function(regenerate_with_comments):
    code = 'function f() {\n    /* inner */\n    return 1;\n}'
    assert regenerate_with_comments(code) == code


def test_attach_comments_leaves_input_comments_untouched(js_parse):
    tree = js_parse('a;\n/* b */ c;', range=True, tokens=True, comment=True)
    attach_comments(tree, tree['comments'], tree['tokens'])
    assert 'extendedRange' not in tree['comments'][0]
    statement = tree['body'][1]
    assert statement['leadingComments'][0]['extendedRange'] == [2, 11]


def test_attach_comments_requires_ranges():
    with pytest.raises(CodeGenerationError):
        attach_comments(program(stmt(ident('a'))), [{'type': 'Line', 'value': 'x'}], [])


def test_preserve_blank_lines_between_statements():
    source = 'a;\n\nb;'
    tree = program(
        stmt(ident('a'), range=[0, 2]),
        stmt(ident('b'), range=[4, 6]),
        range=[0, 6],
    )
    options = {'sourceCode': source, 'format': {'preserveBlankLines': True}}
    assert generate(tree, options) == source
    assert generate(tree) == 'a;\nb;'


def test_preserve_two_blank_lines():
    source = 'a;\n\n\nb;'
    tree = program(
        stmt(ident('a'), range=[0, 2]),
        stmt(ident('b'), range=[5, 7]),
        range=[0, 7],
    )
    options = {'sourceCode': source, 'format': {'preserveBlankLines': True}}
    assert generate(tree, options) == source


def test_preserve_blank_lines_inside_block():
    source = '{\n    a;\n\n    b;\n}'
    tree = program(
        block(
            stmt(ident('a'), range=[6, 8]),
            stmt(ident('b'), range=[14, 16]),
            range=[0, 18],
        ),
        range=[0, 18],
    )
    options = {'sourceCode': source, 'format': {'preserveBlankLines': True}}
    assert generate(tree, options) == source


def test_preserve_blank_lines_needs_source_code():
    tree = program(stmt(ident('a')), stmt(ident('b')))
    assert generate(tree, {'format': {'preserveBlankLines': True}}) == 'a;\nb;'
