import math
import re
from decimal import Decimal

from jsgen.code import (
    LINE_SEPARATOR, PARAGRAPH_SEPARATOR, is_decimal_digit, is_identifier_part_es5, is_line_terminator,
)
from jsgen.errors import CodeGenerationError, InvalidNumericLiteralError

_DISALLOWED_ESCAPES = {
    '\\': '\\\\',
    '\n': '\\n',
    '\r': '\\r',
    LINE_SEPARATOR: '\\u2028',
    PARAGRAPH_SEPARATOR: '\\u2029',
}

_REGEXP_FLAGS = ((re.IGNORECASE, 'i'), (re.MULTILINE, 'm'), (re.DOTALL, 's'))


def number_to_string(value):
    """Render ``value`` the way ``Number.prototype.toString()`` does."""
    if isinstance(value, int) and abs(value) < 10 ** 21:
        return str(value)
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    _, digits, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = ''.join(str(d) for d in digits)
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        return sign + digits + '0' * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + '.' + digits[n:]
    if -6 < n <= 0:
        return sign + '0.' + '0' * -n + digits

    e = n - 1
    exponent_text = ('+' if e >= 0 else '-') + str(abs(e))
    if k == 1:
        return sign + digits + 'e' + exponent_text
    return sign + digits[0] + '.' + digits[1:] + 'e' + exponent_text


def _number_value(text):
    if text.startswith('0x'):
        return int(text[2:], 16)
    return float(text)


def generate_number(value, fmt):
    if isinstance(value, float) and math.isnan(value):
        raise InvalidNumericLiteralError('Numeric literal whose value is NaN')
    if value < 0 or (value == 0 and math.copysign(1.0, value) < 0):
        raise InvalidNumericLiteralError('Numeric literal whose value is negative')

    if value == math.inf:
        return 'null' if fmt.json else '1e400' if fmt.renumber else '1e+400'

    result = number_to_string(value)
    if not fmt.renumber or len(result) < 3:
        return result

    point = result.find('.')
    if not fmt.json and result[0] == '0' and point == 1:
        point = 0
        result = result[1:]
    temp = result
    result = result.replace('e+', 'e')
    exponent = 0
    pos = temp.find('e')
    if pos > 0:
        exponent = int(temp[pos + 1:])
        temp = temp[:pos]
    if point >= 0:
        exponent -= len(temp) - point - 1
        temp = str(int(temp[:point] + temp[point + 1:]))
    pos = 0
    while len(temp) + pos > 1 and temp[len(temp) + pos - 1] == '0':
        pos -= 1
    if pos != 0:
        exponent -= pos
        temp = temp[:pos]
    if exponent != 0:
        temp += 'e' + str(exponent)

    candidate = None
    if len(temp) < len(result):
        candidate = temp
    elif fmt.hexadecimal and value > 1e12 and math.floor(value) == value:
        hexadecimal = '0x' + format(int(value), 'x')
        if len(hexadecimal) < len(result):
            candidate = hexadecimal
    if candidate is not None and _number_value(candidate) == value:
        result = candidate
    return result


def _escape_regexp_character(ch, previous_is_backslash):
    if ch in (LINE_SEPARATOR, PARAGRAPH_SEPARATOR):
        return ('u' if previous_is_backslash else '\\u') + ('2028' if ch == LINE_SEPARATOR else '2029')
    if ch == '\n' or ch == '\r':
        return ('' if previous_is_backslash else '\\') + ('n' if ch == '\n' else 'r')
    return ch


def generate_regexp(pattern):
    """Rebuild a regular expression literal from a compiled ``re`` pattern."""
    source = pattern.pattern
    if isinstance(source, bytes):
        source = source.decode('latin-1')
    flags = ''.join(letter for flag, letter in _REGEXP_FLAGS if pattern.flags & flag)
    if not source:
        return '/(?:)/' + flags

    result = []
    character_in_brack = False
    previous_is_backslash = False
    for ch in source:
        if not previous_is_backslash:
            if character_in_brack:
                if ch == ']':
                    character_in_brack = False
            else:
                if ch == '/':
                    result.append('\\')
                elif ch == '[':
                    character_in_brack = True
            result.append(_escape_regexp_character(ch, previous_is_backslash))
            previous_is_backslash = ch == '\\'
        else:
            # a backslash escapes exactly one character, so /\\[/]/ stays intact
            result.append(_escape_regexp_character(ch, previous_is_backslash))
            previous_is_backslash = False
    return '/' + ''.join(result) + '/' + flags


def _utf16_units(code):
    if code > 0xFFFF:
        code -= 0x10000
        return 0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)
    return (code,)


def _escape_allowed_character(ch, next_ch, fmt):
    if ch == '\b':
        return '\\b'
    if ch == '\f':
        return '\\f'
    if ch == '\t':
        return '\\t'

    code = ord(ch)
    if fmt.json or code > 0xFF:
        return ''.join('\\u%04X' % unit for unit in _utf16_units(code))
    if code == 0 and not is_decimal_digit(next_ch):
        return '\\0'
    if code == 0x0B:
        return '\\x0B'
    return '\\x%02X' % code


def _escape_disallowed_character(ch):
    try:
        return _DISALLOWED_ESCAPES[ch]
    except KeyError:
        raise CodeGenerationError('Incorrectly classified character') from None


def escape_directive(value, fmt):
    quote = '"' if fmt.quotes == 'double' else '\''
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == '\'':
            quote = '"'
            break
        elif ch == '"':
            quote = '\''
            break
        elif ch == '\\':
            i += 1
        i += 1
    return quote + value + quote


def escape_string(value, fmt):
    result = []
    single_quotes = 0
    double_quotes = 0

    for i, ch in enumerate(value):
        if ch == '\'':
            single_quotes += 1
        elif ch == '"':
            double_quotes += 1
        elif ch == '/' and fmt.json:
            result.append('\\')
        elif is_line_terminator(ch) or ch == '\\':
            result.append(_escape_disallowed_character(ch))
            continue
        elif not is_identifier_part_es5(ch) and (
                fmt.json and ch < ' ' or
                not fmt.json and not fmt.escapeless and (ch < ' ' or ch > '~')):
            result.append(_escape_allowed_character(ch, value[i + 1:i + 2], fmt))
            continue
        result.append(ch)

    single = not (fmt.quotes == 'double' or (fmt.quotes == 'auto' and double_quotes < single_quotes))
    quote = '\'' if single else '"'

    if not (single_quotes if single else double_quotes):
        return quote + ''.join(result) + quote

    escaped = [quote]
    for piece in result:
        if piece == quote:
            escaped.append('\\')
        escaped.append(piece)
    escaped.append(quote)
    return ''.join(escaped)
