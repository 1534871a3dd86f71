import re

import pytest

from jsgen import InvalidNumericLiteralError, generate
from jsgen.literals import number_to_string
from tests.nodes import lit, program, stmt


@pytest.mark.parametrize('value,expected', [
    (0, '0'),
    (5, '5'),
    (1.0, '1'),
    (123.456, '123.456'),
    (0.000001, '0.000001'),
    (1e-7, '1e-7'),
    (1e21, '1e+21'),
    (1.23e22, '1.23e+22'),
    (2 ** 70, '1.1805916207174113e+21'),
])
def test_number_to_string(value, expected):
    assert number_to_string(value) == expected


@pytest.mark.parametrize('value,expected', [
    (0.5, '.5'),
    (42, '42'),
    (1000000, '1e6'),
    (1e21, '1e21'),
    (0xFFFFFFFFFFFF, '0xffffffffffff'),
])
def test_renumber(value, expected):
    options = {'format': {'renumber': True, 'hexadecimal': True}}
    assert generate(lit(value), options) == expected


def test_plain_numbers_are_not_shortened():
    assert generate(lit(0.5)) == '0.5'
    assert generate(lit(1000000)) == '1000000'


def test_infinity():
    assert generate(lit(float('inf'))) == '1e+400'
    assert generate(lit(float('inf')), {'format': {'renumber': True}}) == '1e400'
    assert generate(lit(float('inf')), {'format': {'json': True}}) == 'null'


@pytest.mark.parametrize('value,message', [
    (float('nan'), 'Numeric literal whose value is NaN'),
    (-1, 'Numeric literal whose value is negative'),
    (-0.0, 'Numeric literal whose value is negative'),
])
def test_invalid_numbers(value, message):
    with pytest.raises(InvalidNumericLiteralError, match=message):
        generate(lit(value))


def test_quotes():
    assert generate(lit('a"b')) == '\'a"b\''
    assert generate(lit("it's")) == "'it\\'s'"
    assert generate(lit("it's"), {'format': {'quotes': 'auto'}}) == '"it\'s"'
    assert generate(lit('x'), {'format': {'quotes': 'double'}}) == '"x"'


def test_escapes():
    assert generate(lit('a\nb')) == "'a\\nb'"
    assert generate(lit('a\\b')) == "'a\\\\b'"
    assert generate(lit('\t')) == "'\\t'"
    assert generate(lit('\x00a')) == "'\\0a'"
    assert generate(lit('\x001')) == "'\\x001'"
    assert generate(lit('\x0b')) == "'\\x0B'"
    assert generate(lit('\N{LINE SEPARATOR}')) == "'\\u2028'"


def test_non_ascii_characters():
    assert generate(lit('caf\N{LATIN SMALL LETTER E WITH ACUTE}')) == "'caf\N{LATIN SMALL LETTER E WITH ACUTE}'"
    assert generate(lit('\N{COPYRIGHT SIGN}')) == "'\\xA9'"
    assert generate(lit('\N{GRINNING FACE}')) == "'\\uD83D\\uDE00'"
    assert generate(lit('\N{COPYRIGHT SIGN}'), {'format': {'escapeless': True}}) == "'\N{COPYRIGHT SIGN}'"


def test_astral_letters_are_escaped_as_surrogate_pairs():
    letter = '\N{MATHEMATICAL SCRIPT CAPITAL A}'
    assert generate(lit(letter)) == "'\\uD835\\uDC9C'"
    assert generate(lit(letter), {'format': {'escapeless': True}}) == "'%s'" % letter


def test_json_strings():
    options = {'format': {'json': True}}
    assert generate(lit('a/b'), options) == '"a\\/b"'
    assert generate(lit("it's"), options) == '"it\'s"'


def test_regexp_from_regex_field():
    node = lit(None, regex={'pattern': 'a/b', 'flags': 'g'})
    assert generate(node) == '/a/b/g'


def test_regexp_from_compiled_pattern():
    assert generate(lit(re.compile('a/b', re.I))) == '/a\\/b/i'
    assert generate(lit(re.compile('[/]'))) == '/[/]/'
    assert generate(lit(re.compile(''))) == '/(?:)/'


def test_bigint():
    assert generate(lit(None, bigint='10')) == '10n'


def test_null_and_booleans():
    assert generate(lit(None)) == 'null'
    assert generate(lit(True)) == 'true'
    assert generate(lit(False)) == 'false'


def test_raw_is_used_when_it_reparses_to_the_same_value(parse_raw):
    node = lit(255, raw='0xFF')
    assert generate(node, {'parse': parse_raw}) == '0xFF'
    assert generate(node) == '255'
    assert generate(node, {'parse': parse_raw, 'raw': False}) == '255'


def test_raw_is_ignored_when_it_disagrees(parse_raw):
    assert generate(lit(1, raw='2'), {'parse': parse_raw}) == '1'
    assert generate(lit(1, raw='true'), {'parse': parse_raw}) == '1'


def test_raw_is_ignored_when_parse_fails():
    def parse(code):
        raise ValueError('cannot parse %s' % code)

    assert generate(lit('a', raw='"a"'), {'parse': parse}) == "'a'"


def test_directive_without_raw():
    node = {'type': 'DirectiveStatement', 'directive': 'use strict'}
    assert generate(node) == "'use strict';"
    node = {'type': 'DirectiveStatement', 'directive': "it's"}
    assert generate(node) == '"it\'s";'


def test_directive_keeps_raw():
    node = {'type': 'DirectiveStatement', 'directive': 'use strict', 'raw': '"use strict"'}
    assert generate(node) == '"use strict";'


def test_directive_option_wraps_string_statements():
    tree = program(stmt(lit('use strict')))
    assert generate(tree) == "'use strict';"
    assert generate(tree, {'directive': True}) == "('use strict');"
