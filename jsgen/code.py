"""Character classification following the ECMAScript 5 lexical grammar.

Every predicate takes a single character; the empty string (an index past
the end of a string) is never a member of any class.
"""
import re
import unicodedata

LINE_SEPARATOR = '\N{LINE SEPARATOR}'
PARAGRAPH_SEPARATOR = '\N{PARAGRAPH SEPARATOR}'

_WHITE_SPACE = frozenset(chr(code) for code in (
    0x09, 0x0B, 0x0C, 0x20, 0xA0,
    0x1680, 0x2000, 0x2001, 0x2002, 0x2003, 0x2004, 0x2005, 0x2006,
    0x2007, 0x2008, 0x2009, 0x200A, 0x202F, 0x205F, 0x3000, 0xFEFF,
))

_IDENTIFIER_PART_CATEGORIES = frozenset([
    'Lu', 'Ll', 'Lt', 'Lm', 'Lo', 'Nl', 'Mn', 'Mc', 'Nd', 'Pc',
])

_LINE_TERMINATORS = frozenset(['\n', '\r', LINE_SEPARATOR, PARAGRAPH_SEPARATOR])

_NEWLINE = re.compile('[\r\n]')


def is_decimal_digit(ch):
    return len(ch) == 1 and '0' <= ch <= '9'


def is_line_terminator(ch):
    return ch in _LINE_TERMINATORS


def is_white_space(ch):
    return ch in _WHITE_SPACE


def is_identifier_part_es5(ch):
    if not ch:
        return False
    # classified per UTF-16 unit: surrogate halves are never identifier parts
    if ord(ch) > 0xFFFF:
        return False
    if ch < '\x80':
        return ch.isalnum() or ch in ('$', '_', '\\')
    if ch in ('\N{ZERO WIDTH NON-JOINER}', '\N{ZERO WIDTH JOINER}'):
        return True
    return unicodedata.category(ch) in _IDENTIFIER_PART_CATEGORIES


def has_line_terminator(text):
    return _NEWLINE.search(text) is not None


def ends_with_line_terminator(text):
    return bool(text) and is_line_terminator(text[-1])
