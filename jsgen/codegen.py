import json
import logging
import re
from contextlib import contextmanager, nullcontext

from jsgen import comments
from jsgen.code import (
    ends_with_line_terminator, has_line_terminator, is_decimal_digit, is_identifier_part_es5,
    is_line_terminator, is_white_space,
)
from jsgen.constant import (
    BinaryPrecedence, E_FFT, E_FTT, E_TFF, E_TFT, E_TTF, E_TTT, Precedence, S_FFFF, S_TFFF, S_TFFT,
    S_TFTF, S_TTFF,
)
from jsgen.errors import CodeGenerationError, UnknownNodeTypeError
from jsgen.fragment import Positioned, flatten, rstrip
from jsgen.literals import escape_directive, escape_string, generate_number, generate_regexp

logger = logging.getLogger(__name__)

_VERBATIM_LINES = re.compile(r'\r\n|\n')
_EXPONENT_OR_HEX = re.compile('[eExX]')


def parenthesize(text, current, should):
    if current < should:
        return ['(', text, ')']
    return text


def _is_class_prefixed(fragment):
    if not fragment.startswith('class'):
        return False
    ch = fragment[5:6]
    return ch == '{' or is_white_space(ch) or is_line_terminator(ch)


def _is_function_tail(ch):
    return ch == '(' or ch == '*' or is_white_space(ch) or is_line_terminator(ch)


def _is_function_prefixed(fragment):
    if not fragment.startswith('function'):
        return False
    return _is_function_tail(fragment[8:9])


def _is_async_prefixed(fragment):
    if not fragment.startswith('async') or not is_white_space(fragment[5:6]):
        return False
    i = 6
    while i < len(fragment) and is_white_space(fragment[i]):
        i += 1
    if i == len(fragment) or fragment[i:i + 8] != 'function':
        return False
    return _is_function_tail(fragment[i + 8:i + 9])


def _same_literal_value(left, right):
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right


def _json_string_body(text):
    return json.dumps(text, ensure_ascii=False)[1:-1]


class CodeGenerator(object):
    """Turns ESTree nodes into JavaScript source.

    One instance serves a single ``generate`` call: it holds the resolved
    :class:`~jsgen.options.Format` and the current indentation base.
    Node generators are looked up by the node ``type``; subclasses may add
    node kinds by defining a method and extending ``Statement`` or
    ``Expression``.
    """

    Statement = frozenset([
        'BlockStatement', 'BreakStatement', 'ContinueStatement', 'ClassBody', 'ClassDeclaration',
        'DirectiveStatement', 'DoWhileStatement', 'CatchClause', 'DebuggerStatement', 'EmptyStatement',
        'ExportDefaultDeclaration', 'ExportNamedDeclaration', 'ExportAllDeclaration', 'ExpressionStatement',
        'ImportDeclaration', 'VariableDeclarator', 'VariableDeclaration', 'ThrowStatement', 'TryStatement',
        'SwitchStatement', 'SwitchCase', 'IfStatement', 'ForStatement', 'ForInStatement', 'ForOfStatement',
        'LabeledStatement', 'Program', 'FunctionDeclaration', 'ReturnStatement', 'WhileStatement',
        'WithStatement',
    ])

    Expression = frozenset([
        'SequenceExpression', 'AssignmentExpression', 'ArrowFunctionExpression', 'ConditionalExpression',
        'LogicalExpression', 'BinaryExpression', 'CallExpression', 'ChainExpression', 'NewExpression',
        'MemberExpression', 'MetaProperty', 'UnaryExpression', 'YieldExpression', 'AwaitExpression',
        'UpdateExpression', 'FunctionExpression', 'ArrayPattern', 'ArrayExpression', 'RestElement',
        'ClassExpression', 'MethodDefinition', 'PropertyDefinition', 'StaticBlock', 'PrivateIdentifier',
        'Property', 'ObjectExpression', 'AssignmentPattern', 'ObjectPattern', 'ThisExpression', 'Super',
        'Identifier', 'ImportDefaultSpecifier', 'ImportNamespaceSpecifier', 'ImportSpecifier',
        'ExportSpecifier', 'Literal', 'GeneratorExpression', 'ComprehensionExpression', 'ComprehensionBlock',
        'SpreadElement', 'TaggedTemplateExpression', 'TemplateElement', 'TemplateLiteral', 'ModuleSpecifier',
        'ImportExpression',
    ])

    # Subclasses set this to a callable rendering a parsed JSDoc block
    # (a node's ``jsdoc`` or an entry of ``Program.jsdocBlocks``) to text.
    JsdocBlock = None

    def __init__(self, fmt):
        self.fmt = fmt
        self.base = fmt.base

    def is_statement(self, node):
        return node.get('type') in self.Statement

    def is_expression(self, node):
        return node.get('type') in self.Expression

    @contextmanager
    def indented(self):
        previous = self.base
        self.base += self.fmt.indent
        try:
            yield self.base
        finally:
            self.base = previous

    def add_indent(self, fragment):
        return [self.base, fragment]

    def no_empty_space(self):
        return self.fmt.no_empty_space()

    def to_fragment(self, generated, node=None):
        if not self.fmt.source_map:
            if isinstance(generated, (list, Positioned)):
                return flatten(generated)
            return generated

        if node is None:
            if isinstance(generated, Positioned):
                return generated
            return Positioned(generated)

        name = node.get('name') if isinstance(node.get('name'), str) else None
        loc = node.get('loc')
        if loc is None:
            return Positioned(generated, name=name)
        source = loc.get('source') if self.fmt.source_map is True else self.fmt.source_map
        start = loc['start']
        return Positioned(generated, start['line'], start['column'], source, name)

    def join(self, left, right):
        left_source = flatten(left)
        if not left_source:
            return [right]
        right_source = flatten(right)
        if not right_source:
            return [left]

        left_ch = left_source[-1]
        right_ch = right_source[0]
        if ((left_ch == '+' or left_ch == '-') and left_ch == right_ch or
                is_identifier_part_es5(left_ch) and is_identifier_part_es5(right_ch) or
                left_ch == '/' and right_ch == 'i'):
            return [left, self.no_empty_space(), right]
        if (is_white_space(left_ch) or is_line_terminator(left_ch) or
                is_white_space(right_ch) or is_line_terminator(right_ch)):
            return [left, right]
        return [left, self.fmt.space, right]

    def semicolon(self, flags):
        if not self.fmt.semicolons and flags.semicolon_optional:
            return ''
        return ';'

    def generate_identifier(self, node):
        name = node['name']
        if node.get('type') == 'PrivateIdentifier':
            name = '#' + name
        return self.to_fragment(name, node)

    def generate_async_prefix(self, node, space_required):
        if not node.get('async'):
            return ''
        return 'async' + (self.no_empty_space() if space_required else self.fmt.space)

    def generate_star_suffix(self, node):
        if node.get('generator') and not self.fmt.starless_generator:
            return '*' + self.fmt.space
        return ''

    def generate_method_prefix(self, prop):
        func = prop['value']
        prefix = ''
        if func.get('async'):
            prefix += self.generate_async_prefix(func, not prop.get('computed'))
        if func.get('generator'):
            prefix += '*' if self.generate_star_suffix(func) else ''
        return prefix

    def generate_verbatim_string(self, text):
        lines = _VERBATIM_LINES.split(text)
        return [lines[0]] + [self.fmt.newline + self.base + line for line in lines[1:]]

    def generate_verbatim(self, expr, precedence):
        verbatim = expr[self.fmt.verbatim]
        if isinstance(verbatim, str):
            result = parenthesize(self.generate_verbatim_string(verbatim), Precedence['Sequence'], precedence)
        else:
            result = self.generate_verbatim_string(verbatim['content'])
            current = verbatim.get('precedence')
            if current is None:
                current = Precedence['Sequence']
            result = parenthesize(result, current, precedence)
        return self.to_fragment(result, expr)

    def maybe_block(self, stmt, flags):
        no_leading_comment = not self.fmt.comment or not stmt.get('leadingComments')

        if stmt['type'] == 'BlockStatement' and no_leading_comment:
            return [self.fmt.space, self.generate_statement(stmt, flags)]

        if stmt['type'] == 'EmptyStatement' and no_leading_comment:
            return ';'

        with self.indented():
            return [self.fmt.newline, self.add_indent(self.generate_statement(stmt, flags))]

    def maybe_block_suffix(self, stmt, result):
        ends = ends_with_line_terminator(flatten(result))
        no_leading_comment = not self.fmt.comment or not stmt.get('leadingComments')
        if stmt['type'] == 'BlockStatement' and no_leading_comment and not ends:
            return [result, self.fmt.space]
        if ends:
            return [result, self.base]
        return [result, self.fmt.newline, self.base]

    def generate_pattern(self, node, precedence=Precedence['Sequence'], flags=S_FFFF):
        if node['type'] == 'Identifier':
            return self.generate_identifier(node)
        return self.generate_expression(node, precedence, flags)

    def generate_function_params(self, node):
        params = node['params']
        is_arrow = node['type'] == 'ArrowFunctionExpression'
        if (is_arrow and not node.get('rest') and not node.get('defaults') and
                len(params) == 1 and params[0]['type'] == 'Identifier'):
            return [self.generate_async_prefix(node, True), self.generate_identifier(params[0])]

        result = [self.generate_async_prefix(node, False)] if is_arrow else []
        result.append('(')
        defaults = node.get('defaults') or []
        for i, param in enumerate(params):
            if i < len(defaults) and defaults[i]:
                result.append(self.generate_assignment(param, defaults[i], '=', Precedence['Assignment'], E_TTT))
            else:
                result.append(self.generate_pattern(param, Precedence['Assignment'], E_TTT))
            if i + 1 < len(params):
                result.append(',' + self.fmt.space)

        if node.get('rest'):
            if params:
                result.append(',' + self.fmt.space)
            result.append('...')
            result.append(self.generate_identifier(node['rest']))

        result.append(')')
        return result

    def generate_function_body(self, node):
        result = self.generate_function_params(node)

        if node['type'] == 'ArrowFunctionExpression':
            result.append(self.fmt.space)
            result.append('=>')

        body = node['body']
        if node.get('expression') or body['type'] != 'BlockStatement':
            result.append(self.fmt.space)
            expr = self.generate_expression(body, Precedence['Assignment'], E_TTT)
            if flatten(expr).startswith('{'):
                expr = ['(', expr, ')']
            result.append(expr)
        else:
            result.append(self.maybe_block(body, S_TTFF))
        return result

    def generate_iteration_for_statement(self, operator, stmt, flags):
        head = 'for'
        if stmt.get('await'):
            head += self.no_empty_space() + 'await'
        result = [head + self.fmt.space + '(']
        with self.indented():
            left = stmt['left']
            if left['type'] == 'VariableDeclaration':
                with self.indented():
                    result.append(left['kind'] + self.no_empty_space())
                    result.append(self.generate_statement(left['declarations'][0], S_FFFF))
            else:
                result.append(self.generate_expression(left, Precedence['Call'], E_TTT))

            result = self.join(result, operator)
            result = [self.join(result, self.generate_expression(stmt['right'], Precedence['Assignment'], E_TTT)),
                      ')']
        result.append(self.maybe_block(stmt['body'], flags))
        return result

    def generate_property_key(self, expr, computed):
        result = []
        if computed:
            result.append('[')

        expression = self.generate_expression(expr, Precedence['Assignment'], E_TTT)
        if self.fmt.json and isinstance(expression, str) and expression[:1] != '"':
            result.extend(['"', expression, '"'])
        else:
            result.append(expression)

        if computed:
            result.append(']')
        return result

    def generate_assignment(self, left, right, operator, precedence, flags):
        if Precedence['Assignment'] < precedence:
            flags = flags.with_(allow_in=True)
        return parenthesize(
            [
                self.generate_expression(left, Precedence['Call'], flags),
                self.fmt.space + operator + self.fmt.space,
                self.generate_expression(right, Precedence['Assignment'], flags),
            ],
            Precedence['Assignment'],
            precedence,
        )

    def _generator(self, node_type, registry):
        if node_type not in registry:
            raise UnknownNodeTypeError(node_type)
        return getattr(self, node_type)

    def generate_expression(self, expr, precedence, flags):
        node_type = expr.get('type') or 'Property'

        verbatim = self.fmt.verbatim
        if verbatim and expr.get(verbatim):
            return self.generate_verbatim(expr, precedence)

        result = self._generator(node_type, self.Expression)(expr, precedence, flags)
        type_cast = False
        jsdoc = expr.get('jsdoc')
        if jsdoc and self.JsdocBlock is not None:
            # a single-line `@type` block casts the expression: /** @type {T} */(x)
            type_cast = (node_type != 'Property' and not jsdoc.get('endLine') and
                         any(tag.get('tag') == 'type' for tag in jsdoc.get('tags', ())))
            if type_cast:
                result = ['(', result]
            result = [self.JsdocBlock(jsdoc), result]
        if self.fmt.comment:
            result = comments.add_comments(self, expr, result)
        if type_cast:
            result = [result, ')']
        return self.to_fragment(result, expr)

    def generate_statement(self, stmt, flags):
        result = self._generator(stmt['type'], self.Statement)(stmt, flags)
        if stmt.get('jsdoc') and self.JsdocBlock is not None:
            result = [self.JsdocBlock(stmt['jsdoc']), result]
        if self.fmt.comment:
            result = comments.add_comments(self, stmt, result)

        if stmt['type'] == 'Program' and not self.fmt.safe_concatenation and self.fmt.newline == '':
            fragment = flatten(result)
            if fragment.endswith('\n'):
                result = rstrip(self.to_fragment(result)) if self.fmt.source_map else fragment.rstrip()

        return self.to_fragment(result, stmt)

    def generate_blank_lines(self, start, end, result):
        comments.generate_blank_lines(self, start, end, result)

    # Statements

    def _generate_body_item(self, item, body_flags):
        if item.get('leadingComments') and self.fmt.preserve_blank_lines:
            return self.generate_statement(item, body_flags)
        return self.add_indent(self.generate_statement(item, body_flags))

    def BlockStatement(self, stmt, flags):
        result = ['{', self.fmt.newline]
        body = stmt['body']
        preserve = self.fmt.preserve_blank_lines
        source = self.fmt.source_code

        with self.indented():
            if not body and preserve:
                start, end = stmt['range']
                if end - start > 2:
                    content = source[start + 1:end - 1]
                    if content[0] == '\n':
                        result = ['{']
                    result.append(content)

            body_flags = S_TFFF.with_(directive_context=True) if flags.function_body else S_TFFF
            last = len(body) - 1
            for i, item in enumerate(body):
                if preserve:
                    if i == 0:
                        if item.get('leadingComments'):
                            extended = item['leadingComments'][0]['extendedRange']
                            if source[extended[0]:extended[1]][:1] == '\n':
                                result = ['{']
                        else:
                            self.generate_blank_lines(stmt['range'][0], item['range'][0], result)
                    elif not body[i - 1].get('trailingComments') and not item.get('leadingComments'):
                        self.generate_blank_lines(body[i - 1]['range'][1], item['range'][0], result)

                if i == last:
                    body_flags = body_flags.with_(semicolon_optional=True)

                fragment = self._generate_body_item(item, body_flags)
                result.append(fragment)
                if not ends_with_line_terminator(flatten(fragment)):
                    if preserve and i < last:
                        if not body[i + 1].get('leadingComments'):
                            result.append(self.fmt.newline)
                    else:
                        result.append(self.fmt.newline)

                if preserve and i == last and not item.get('trailingComments'):
                    self.generate_blank_lines(item['range'][1], stmt['range'][1], result)

        result.append(self.add_indent('}'))
        return result

    def BreakStatement(self, stmt, flags):
        if stmt.get('label'):
            return 'break ' + stmt['label']['name'] + self.semicolon(flags)
        return 'break' + self.semicolon(flags)

    def ContinueStatement(self, stmt, flags):
        if stmt.get('label'):
            return 'continue ' + stmt['label']['name'] + self.semicolon(flags)
        return 'continue' + self.semicolon(flags)

    def ClassBody(self, stmt, flags):
        result = ['{', self.fmt.newline]
        members = stmt['body']
        with self.indented() as indent:
            for i, member in enumerate(members):
                result.append(indent)
                result.append(self.generate_expression(member, Precedence['Sequence'], E_TTT))
                if i + 1 < len(members):
                    result.append(self.fmt.newline)

        if not ends_with_line_terminator(flatten(result)):
            result.append(self.fmt.newline)
        result.append(self.base)
        result.append('}')
        return result

    def _generate_class(self, node):
        result = ['class']
        if node.get('id'):
            result = self.join(result, self.generate_expression(node['id'], Precedence['Sequence'], E_TTT))
        if node.get('superClass'):
            fragment = self.join('extends',
                                 self.generate_expression(node['superClass'], Precedence['Unary'], E_TTT))
            result = self.join(result, fragment)
        result.append(self.fmt.space)
        result.append(self.generate_statement(node['body'], S_TFFT))
        return result

    def ClassDeclaration(self, stmt, flags):
        return self._generate_class(stmt)

    def DirectiveStatement(self, stmt, flags):
        if self.fmt.raw and stmt.get('raw'):
            return stmt['raw'] + self.semicolon(flags)
        return escape_directive(stmt['directive'], self.fmt) + self.semicolon(flags)

    def DoWhileStatement(self, stmt, flags):
        result = self.join('do', self.maybe_block(stmt['body'], S_TFFF))
        result = self.maybe_block_suffix(stmt['body'], result)
        # the semicolon after do-while is never dropped
        return self.join(result, [
            'while' + self.fmt.space + '(',
            self.generate_expression(stmt['test'], Precedence['Sequence'], E_TTT),
            ');',
        ])

    def CatchClause(self, stmt, flags):
        with self.indented():
            if stmt.get('param'):
                result = [
                    'catch' + self.fmt.space + '(',
                    self.generate_expression(stmt['param'], Precedence['Sequence'], E_TTT),
                    ')',
                ]
                if stmt.get('guard'):
                    guard = self.generate_expression(stmt['guard'], Precedence['Sequence'], E_TTT)
                    result[2:2] = [' if ', guard]
            else:
                result = ['catch']
        result.append(self.maybe_block(stmt['body'], S_TFFF))
        return result

    def DebuggerStatement(self, stmt, flags):
        return 'debugger' + self.semicolon(flags)

    def EmptyStatement(self, stmt, flags):
        return ';'

    def ExportDefaultDeclaration(self, stmt, flags):
        body_flags = S_TFFT if flags.semicolon_optional else S_TFFF
        result = self.join(['export'], 'default')
        declaration = stmt['declaration']
        if self.is_statement(declaration):
            return self.join(result, self.generate_statement(declaration, body_flags))
        return self.join(result, [
            self.generate_expression(declaration, Precedence['Assignment'], E_TTT),
            self.semicolon(flags),
        ])

    def _generate_specifier_list(self, result, specifiers):
        with self.indented() as indent:
            result.append(self.fmt.newline)
            for i, specifier in enumerate(specifiers):
                result.append(indent)
                result.append(self.generate_expression(specifier, Precedence['Sequence'], E_TTT))
                if i + 1 < len(specifiers):
                    result.append(',' + self.fmt.newline)
        if not ends_with_line_terminator(flatten(result)):
            result.append(self.fmt.newline)
        return result

    def ExportNamedDeclaration(self, stmt, flags):
        body_flags = S_TFFT if flags.semicolon_optional else S_TFFF
        result = ['export']

        if stmt.get('declaration'):
            return self.join(result, self.generate_statement(stmt['declaration'], body_flags))

        specifiers = stmt.get('specifiers')
        if specifiers is None:
            return result

        if not specifiers:
            result = self.join(result, '{' + self.fmt.space + '}')
        else:
            result = self._generate_specifier_list(self.join(result, '{'), specifiers)
            result.append(self.base + '}')

        if stmt.get('source'):
            return self.join(result, [
                'from' + self.fmt.space,
                self.generate_expression(stmt['source'], Precedence['Sequence'], E_TTT),
                self.semicolon(flags),
            ])
        result.append(self.semicolon(flags))
        return result

    def ExportAllDeclaration(self, stmt, flags):
        space = self.fmt.space
        if stmt.get('exported'):
            exported = self.generate_expression(stmt['exported'], Precedence['Sequence'], E_TTT)
            result = self.join(['export' + space + '*'], self.join('as', exported))
            result.append(space)
        else:
            result = ['export' + space, '*' + space]
        result.append('from' + space)
        result.append(self.generate_expression(stmt['source'], Precedence['Sequence'], E_TTT))
        result.append(self.semicolon(flags))
        return result

    def ExpressionStatement(self, stmt, flags):
        expression = stmt['expression']
        result = [self.generate_expression(expression, Precedence['Sequence'], E_TTT)]

        # '{', 'function', 'class' cannot start an expression statement
        fragment = flatten(result)
        if (fragment[:1] == '{' or _is_class_prefixed(fragment) or _is_function_prefixed(fragment) or
                _is_async_prefixed(fragment) or
                self.fmt.directive and flags.directive_context and expression['type'] == 'Literal' and
                isinstance(expression.get('value'), str)):
            return ['(', result, ')' + self.semicolon(flags)]
        result.append(self.semicolon(flags))
        return result

    def ImportDeclaration(self, stmt, flags):
        specifiers = stmt['specifiers']
        source = self.generate_expression(stmt['source'], Precedence['Sequence'], E_TTT)
        if not specifiers:
            return ['import', self.fmt.space, source, self.semicolon(flags)]

        result = ['import']
        cursor = 0
        if specifiers[0]['type'] == 'ImportDefaultSpecifier':
            result = self.join(result, [self.generate_expression(specifiers[0], Precedence['Sequence'], E_TTT)])
            cursor = 1

        if cursor < len(specifiers):
            if cursor != 0:
                result.append(',')
            specifier = specifiers[cursor]
            if specifier['type'] == 'ImportNamespaceSpecifier':
                result = self.join(result, [
                    self.fmt.space,
                    self.generate_expression(specifier, Precedence['Sequence'], E_TTT),
                ])
            else:
                result.append(self.fmt.space + '{')
                if len(specifiers) - cursor == 1:
                    result.append(self.fmt.space)
                    result.append(self.generate_expression(specifier, Precedence['Sequence'], E_TTT))
                    result.append(self.fmt.space + '}' + self.fmt.space)
                else:
                    result = self._generate_specifier_list(result, specifiers[cursor:])
                    result.append(self.base + '}' + self.fmt.space)

        return self.join(result, ['from' + self.fmt.space, source, self.semicolon(flags)])

    def VariableDeclarator(self, stmt, flags):
        item_flags = E_TTT if flags.allow_in else E_FTT
        if stmt.get('init'):
            return [
                self.generate_expression(stmt['id'], Precedence['Assignment'], item_flags),
                self.fmt.space,
                '=',
                self.fmt.space,
                self.generate_expression(stmt['init'], Precedence['Assignment'], item_flags),
            ]
        return self.generate_pattern(stmt['id'], Precedence['Assignment'], item_flags)

    def VariableDeclaration(self, stmt, flags):
        result = [stmt['kind']]
        body_flags = S_TFFF if flags.allow_in else S_FFFF
        declarations = stmt['declarations']

        with self.indented() if len(declarations) > 1 else nullcontext():
            for i, node in enumerate(declarations):
                if self.fmt.comment and node.get('leadingComments'):
                    result.append('\n' if i == 0 else ',' + self.fmt.newline)
                    result.append(self.add_indent(self.generate_statement(node, body_flags)))
                else:
                    result.append(self.no_empty_space() if i == 0 else ',' + self.fmt.space)
                    result.append(self.generate_statement(node, body_flags))

        result.append(self.semicolon(flags))
        return result

    def ThrowStatement(self, stmt, flags):
        return [
            self.join('throw', self.generate_expression(stmt['argument'], Precedence['Sequence'], E_TTT)),
            self.semicolon(flags),
        ]

    def _generate_handlers(self, result, handlers, finalizer):
        for i, handler in enumerate(handlers):
            result = self.join(result, self.generate_statement(handler, S_TFFF))
            if finalizer or i + 1 != len(handlers):
                result = self.maybe_block_suffix(handler['body'], result)
        return result

    def TryStatement(self, stmt, flags):
        result = ['try', self.maybe_block(stmt['block'], S_TFFF)]
        result = self.maybe_block_suffix(stmt['block'], result)
        finalizer = stmt.get('finalizer')

        if stmt.get('handlers'):
            result = self._generate_handlers(result, stmt['handlers'], finalizer)
        else:
            result = self._generate_handlers(result, stmt.get('guardedHandlers') or [], finalizer)
            handler = stmt.get('handler')
            if isinstance(handler, list):
                result = self._generate_handlers(result, handler, finalizer)
            elif handler:
                result = self.join(result, self.generate_statement(handler, S_TFFF))
                if finalizer:
                    result = self.maybe_block_suffix(handler['body'], result)

        if finalizer:
            result = self.join(result, ['finally', self.maybe_block(finalizer, S_TFFF)])
        return result

    def SwitchStatement(self, stmt, flags):
        with self.indented():
            result = [
                'switch' + self.fmt.space + '(',
                self.generate_expression(stmt['discriminant'], Precedence['Sequence'], E_TTT),
                ')' + self.fmt.space + '{' + self.fmt.newline,
            ]
        cases = stmt.get('cases') or []
        body_flags = S_TFFF
        for i, case in enumerate(cases):
            if i == len(cases) - 1:
                body_flags = body_flags.with_(semicolon_optional=True)
            fragment = self.add_indent(self.generate_statement(case, body_flags))
            result.append(fragment)
            if not ends_with_line_terminator(flatten(fragment)):
                result.append(self.fmt.newline)
        result.append(self.add_indent('}'))
        return result

    def SwitchCase(self, stmt, flags):
        with self.indented():
            if stmt.get('test'):
                result = [
                    self.join('case', self.generate_expression(stmt['test'], Precedence['Sequence'], E_TTT)),
                    ':',
                ]
            else:
                result = ['default:']

            consequent = stmt['consequent']
            i = 0
            if consequent and consequent[0]['type'] == 'BlockStatement':
                result.append(self.maybe_block(consequent[0], S_TFFF))
                i = 1

            if i != len(consequent) and not ends_with_line_terminator(flatten(result)):
                result.append(self.fmt.newline)

            body_flags = S_TFFF
            while i < len(consequent):
                if i == len(consequent) - 1 and flags.semicolon_optional:
                    body_flags = body_flags.with_(semicolon_optional=True)
                fragment = self.add_indent(self.generate_statement(consequent[i], body_flags))
                result.append(fragment)
                if i + 1 != len(consequent) and not ends_with_line_terminator(flatten(fragment)):
                    result.append(self.fmt.newline)
                i += 1
        return result

    def IfStatement(self, stmt, flags):
        with self.indented():
            result = [
                'if' + self.fmt.space + '(',
                self.generate_expression(stmt['test'], Precedence['Sequence'], E_TTT),
                ')',
            ]
        body_flags = S_TFFT if flags.semicolon_optional else S_TFFF
        alternate = stmt.get('alternate')
        if not alternate:
            result.append(self.maybe_block(stmt['consequent'], body_flags))
            return result

        result.append(self.maybe_block(stmt['consequent'], S_TFFF))
        result = self.maybe_block_suffix(stmt['consequent'], result)
        if alternate['type'] == 'IfStatement':
            return self.join(result, ['else ', self.generate_statement(alternate, body_flags)])
        return self.join(result, self.join('else', self.maybe_block(alternate, body_flags)))

    def ForStatement(self, stmt, flags):
        space = self.fmt.space
        with self.indented():
            result = ['for' + space + '(']
            init = stmt.get('init')
            if init:
                if init['type'] == 'VariableDeclaration':
                    result.append(self.generate_statement(init, S_FFFF))
                else:
                    result.append(self.generate_expression(init, Precedence['Sequence'], E_FTT))
                    result.append(';')
            else:
                result.append(';')

            if stmt.get('test'):
                result.append(space)
                result.append(self.generate_expression(stmt['test'], Precedence['Sequence'], E_TTT))
            result.append(';')

            if stmt.get('update'):
                result.append(space)
                result.append(self.generate_expression(stmt['update'], Precedence['Sequence'], E_TTT))
            result.append(')')

        result.append(self.maybe_block(stmt['body'], S_TFFT if flags.semicolon_optional else S_TFFF))
        return result

    def ForInStatement(self, stmt, flags):
        return self.generate_iteration_for_statement('in', stmt, S_TFFT if flags.semicolon_optional else S_TFFF)

    def ForOfStatement(self, stmt, flags):
        return self.generate_iteration_for_statement('of', stmt, S_TFFT if flags.semicolon_optional else S_TFFF)

    def LabeledStatement(self, stmt, flags):
        return [
            stmt['label']['name'] + ':',
            self.maybe_block(stmt['body'], S_TFFT if flags.semicolon_optional else S_TFFF),
        ]

    def Program(self, stmt, flags):
        body = stmt['body']
        last = len(body) - 1
        safe_concatenation = self.fmt.safe_concatenation
        preserve = self.fmt.preserve_blank_lines
        result = ['\n' if safe_concatenation and body else '']

        if stmt.get('jsdocBlocks') and self.JsdocBlock is not None:
            result.extend(self.JsdocBlock(block) for block in stmt['jsdocBlocks'])
            result.append('\n\n')

        body_flags = S_TFTF
        for i, item in enumerate(body):
            if not safe_concatenation and i == last:
                body_flags = body_flags.with_(semicolon_optional=True)

            if preserve:
                if i == 0:
                    if not item.get('leadingComments'):
                        self.generate_blank_lines(stmt['range'][0], item['range'][0], result)
                elif not body[i - 1].get('trailingComments') and not item.get('leadingComments'):
                    self.generate_blank_lines(body[i - 1]['range'][1], item['range'][0], result)

            fragment = self.add_indent(self.generate_statement(item, body_flags))
            result.append(fragment)
            if i < last and not ends_with_line_terminator(flatten(fragment)):
                if not preserve or not body[i + 1].get('leadingComments'):
                    result.append(self.fmt.newline)

            if preserve and i == last and not item.get('trailingComments'):
                self.generate_blank_lines(item['range'][1], stmt['range'][1], result)
        return result

    def FunctionDeclaration(self, stmt, flags):
        return [
            self.generate_async_prefix(stmt, True),
            'function',
            self.generate_star_suffix(stmt) or self.no_empty_space(),
            self.generate_identifier(stmt['id']) if stmt.get('id') else '',
            self.generate_function_body(stmt),
        ]

    def ReturnStatement(self, stmt, flags):
        if stmt.get('argument'):
            return [
                self.join('return', self.generate_expression(stmt['argument'], Precedence['Sequence'], E_TTT)),
                self.semicolon(flags),
            ]
        return ['return' + self.semicolon(flags)]

    def WhileStatement(self, stmt, flags):
        with self.indented():
            result = [
                'while' + self.fmt.space + '(',
                self.generate_expression(stmt['test'], Precedence['Sequence'], E_TTT),
                ')',
            ]
        result.append(self.maybe_block(stmt['body'], S_TFFT if flags.semicolon_optional else S_TFFF))
        return result

    def WithStatement(self, stmt, flags):
        with self.indented():
            result = [
                'with' + self.fmt.space + '(',
                self.generate_expression(stmt['object'], Precedence['Sequence'], E_TTT),
                ')',
            ]
        result.append(self.maybe_block(stmt['body'], S_TFFT if flags.semicolon_optional else S_TFFF))
        return result

    # Expressions

    def SequenceExpression(self, expr, precedence, flags):
        if Precedence['Sequence'] < precedence:
            flags = flags.with_(allow_in=True)
        result = []
        expressions = expr['expressions']
        for i, item in enumerate(expressions):
            result.append(self.generate_expression(item, Precedence['Assignment'], flags))
            if i + 1 < len(expressions):
                result.append(',' + self.fmt.space)
        return parenthesize(result, Precedence['Sequence'], precedence)

    def AssignmentExpression(self, expr, precedence, flags):
        return self.generate_assignment(expr['left'], expr['right'], expr['operator'], precedence, flags)

    def ArrowFunctionExpression(self, expr, precedence, flags):
        return parenthesize(self.generate_function_body(expr), Precedence['ArrowFunction'], precedence)

    def ConditionalExpression(self, expr, precedence, flags):
        if Precedence['Conditional'] < precedence:
            flags = flags.with_(allow_in=True)
        space = self.fmt.space
        return parenthesize(
            [
                self.generate_expression(expr['test'], Precedence['Coalesce'], flags),
                space + '?' + space,
                self.generate_expression(expr['consequent'], Precedence['Assignment'], flags),
                space + ':' + space,
                self.generate_expression(expr['alternate'], Precedence['Assignment'], flags),
            ],
            Precedence['Conditional'],
            precedence,
        )

    def LogicalExpression(self, expr, precedence, flags):
        if expr['operator'] == '??':
            flags = flags.with_(found_coalesce=True)
        return self.BinaryExpression(expr, precedence, flags)

    def BinaryExpression(self, expr, precedence, flags):
        operator = expr['operator']
        current = BinaryPrecedence[operator]
        left_precedence = Precedence['Postfix'] if operator == '**' else current
        right_precedence = current if operator == '**' else current + 1

        if current < precedence:
            flags = flags.with_(allow_in=True)

        fragment = self.generate_expression(expr['left'], left_precedence, flags)
        if flatten(fragment).endswith('/') and is_identifier_part_es5(operator[0]):
            result = [fragment, self.no_empty_space(), operator]
        else:
            result = self.join(fragment, operator)

        fragment = self.generate_expression(expr['right'], right_precedence, flags)
        right_source = flatten(fragment)
        if (operator == '/' and right_source.startswith('/') or
                operator.endswith('<') and right_source.startswith('!--')):
            # avoid emitting a comment opener such as `//` or `<!--`
            result.append(self.no_empty_space())
            result.append(fragment)
        else:
            result = self.join(result, fragment)

        if operator == 'in' and not flags.allow_in:
            return ['(', result, ')']
        if (operator == '||' or operator == '&&') and flags.found_coalesce:
            return ['(', result, ')']
        return parenthesize(result, current, precedence)

    def CallExpression(self, expr, precedence, flags):
        result = [self.generate_expression(expr['callee'], Precedence['Call'], E_TTF)]
        if expr.get('optional'):
            result.append('?.')

        result.append('(')
        arguments = expr['arguments']
        for i, argument in enumerate(arguments):
            result.append(self.generate_expression(argument, Precedence['Assignment'], E_TTT))
            if i + 1 < len(arguments):
                result.append(',' + self.fmt.space)
        result.append(')')

        if not flags.allow_call:
            return ['(', result, ')']
        return parenthesize(result, Precedence['Call'], precedence)

    def ChainExpression(self, expr, precedence, flags):
        if Precedence['OptionalChaining'] < precedence:
            flags = flags.with_(allow_call=True)
        result = self.generate_expression(expr['expression'], Precedence['OptionalChaining'], flags)
        return parenthesize(result, Precedence['OptionalChaining'], precedence)

    def NewExpression(self, expr, precedence, flags):
        arguments = expr['arguments']
        bare = flags.allow_unparenthesized_new and not self.fmt.parentheses and not arguments
        item_flags = E_TFT if bare else E_TFF

        result = self.join('new', self.generate_expression(expr['callee'], Precedence['New'], item_flags))
        if not bare:
            result.append('(')
            for i, argument in enumerate(arguments):
                result.append(self.generate_expression(argument, Precedence['Assignment'], E_TTT))
                if i + 1 < len(arguments):
                    result.append(',' + self.fmt.space)
            result.append(')')
        return parenthesize(result, Precedence['New'], precedence)

    def MemberExpression(self, expr, precedence, flags):
        obj = expr['object']
        result = [self.generate_expression(obj, Precedence['Call'], E_TTF if flags.allow_call else E_TFF)]

        if expr.get('computed'):
            if expr.get('optional'):
                result.append('?.')
            result.append('[')
            result.append(self.generate_expression(expr['property'], Precedence['Sequence'],
                                                   E_TTT if flags.allow_call else E_TFT))
            result.append(']')
        else:
            value = obj.get('value')
            if (not expr.get('optional') and obj['type'] == 'Literal' and
                    isinstance(value, (int, float)) and not isinstance(value, bool)):
                fragment = flatten(result)
                # `1.toString()` would read the dot as a decimal point
                if ('.' not in fragment and not _EXPONENT_OR_HEX.search(fragment) and
                        is_decimal_digit(fragment[-1:]) and not (len(fragment) >= 2 and fragment[0] == '0')):
                    result.append(' ')
            result.append('?.' if expr.get('optional') else '.')
            result.append(self.generate_identifier(expr['property']))

        return parenthesize(result, Precedence['Member'], precedence)

    def MetaProperty(self, expr, precedence, flags):
        meta = expr['meta']
        prop = expr['property']
        result = [
            meta if isinstance(meta, str) else self.generate_identifier(meta),
            '.',
            prop if isinstance(prop, str) else self.generate_identifier(prop),
        ]
        return parenthesize(result, Precedence['Member'], precedence)

    def UnaryExpression(self, expr, precedence, flags):
        operator = expr['operator']
        fragment = self.generate_expression(expr['argument'], Precedence['Unary'], E_TTT)

        if self.fmt.space == '':
            result = self.join(operator, fragment)
        elif len(operator) > 2:
            result = self.join([operator], fragment)
        else:
            left_ch = operator[-1]
            right_ch = flatten(fragment)[:1]
            if ((left_ch == '+' or left_ch == '-') and left_ch == right_ch or
                    is_identifier_part_es5(left_ch) and is_identifier_part_es5(right_ch)):
                result = [operator, self.no_empty_space(), fragment]
            else:
                result = [operator, fragment]
        return parenthesize(result, Precedence['Unary'], precedence)

    def YieldExpression(self, expr, precedence, flags):
        result = 'yield*' if expr.get('delegate') else 'yield'
        if expr.get('argument'):
            result = self.join(result, self.generate_expression(expr['argument'], Precedence['Yield'], E_TTT))
        return parenthesize(result, Precedence['Yield'], precedence)

    def AwaitExpression(self, expr, precedence, flags):
        result = self.join(
            'await*' if expr.get('all') else 'await',
            self.generate_expression(expr['argument'], Precedence['Await'], E_TTT),
        )
        return parenthesize(result, Precedence['Await'], precedence)

    def UpdateExpression(self, expr, precedence, flags):
        if expr.get('prefix'):
            return parenthesize(
                [expr['operator'], self.generate_expression(expr['argument'], Precedence['Unary'], E_TTT)],
                Precedence['Unary'],
                precedence,
            )
        return parenthesize(
            [self.generate_expression(expr['argument'], Precedence['Postfix'], E_TTT), expr['operator']],
            Precedence['Postfix'],
            precedence,
        )

    def FunctionExpression(self, expr, precedence, flags):
        result = [self.generate_async_prefix(expr, True), 'function']
        if expr.get('id'):
            result.append(self.generate_star_suffix(expr) or self.no_empty_space())
            result.append(self.generate_identifier(expr['id']))
        else:
            result.append(self.generate_star_suffix(expr) or self.fmt.space)
        result.append(self.generate_function_body(expr))
        return result

    def ArrayPattern(self, expr, precedence, flags):
        return self.ArrayExpression(expr, precedence, flags, True)

    def ArrayExpression(self, expr, precedence, flags, is_pattern=False):
        elements = expr['elements']
        if not elements:
            return '[]'
        multiline = not is_pattern and len(elements) > 1
        newline = self.fmt.newline
        result = ['[', newline if multiline else '']
        with self.indented() as indent:
            for i, element in enumerate(elements):
                if not element:
                    if multiline:
                        result.append(indent)
                    if i + 1 == len(elements):
                        result.append(',')
                else:
                    result.append(indent if multiline else '')
                    result.append(self.generate_expression(element, Precedence['Assignment'], E_TTT))
                if i + 1 < len(elements):
                    result.append(',' + (newline if multiline else self.fmt.space))

        if multiline and not ends_with_line_terminator(flatten(result)):
            result.append(newline)
        result.append(self.base if multiline else '')
        result.append(']')
        return result

    def RestElement(self, expr, precedence, flags):
        return ['...', self.generate_pattern(expr['argument'])]

    def ClassExpression(self, expr, precedence, flags):
        return self._generate_class(expr)

    def MethodDefinition(self, expr, precedence, flags):
        result = ['static' + self.fmt.space] if expr.get('static') else []
        key = self.generate_property_key(expr['key'], expr.get('computed'))
        if expr['kind'] in ('get', 'set'):
            fragment = [self.join(expr['kind'], key), self.generate_function_body(expr['value'])]
        else:
            fragment = [self.generate_method_prefix(expr), key, self.generate_function_body(expr['value'])]
        return self.join(result, fragment)

    def PropertyDefinition(self, expr, precedence, flags):
        result = ['static'] if expr.get('static') else []
        fragment = [self.generate_property_key(expr['key'], expr.get('computed'))]
        if expr.get('value'):
            fragment.append(self.fmt.space + '=' + self.fmt.space)
            fragment.append(self.generate_expression(expr['value'], Precedence['Assignment'], E_TTT))
        fragment.append(';')
        return self.join(result, fragment)

    def StaticBlock(self, expr, precedence, flags):
        return ['static', self.fmt.space, self.BlockStatement(expr, S_TFFF)]

    def PrivateIdentifier(self, expr, precedence, flags):
        return self.generate_identifier(expr)

    def Property(self, expr, precedence, flags):
        key = expr['key']
        computed = expr.get('computed')
        value = expr['value']
        if expr.get('kind') in ('get', 'set'):
            return [
                expr['kind'], self.no_empty_space(),
                self.generate_property_key(key, computed),
                self.generate_function_body(value),
            ]

        if expr.get('shorthand'):
            if value['type'] == 'AssignmentPattern':
                return self.AssignmentPattern(value, Precedence['Sequence'], E_TTT)
            return self.generate_property_key(key, computed)

        if expr.get('method'):
            return [
                self.generate_method_prefix(expr),
                self.generate_property_key(key, computed),
                self.generate_function_body(value),
            ]

        return [
            self.generate_property_key(key, computed),
            ':' + self.fmt.space,
            self.generate_expression(value, Precedence['Assignment'], E_TTT),
        ]

    def ObjectExpression(self, expr, precedence, flags):
        properties = expr['properties']
        if not properties:
            return '{}'
        multiline = len(properties) > 1

        with self.indented():
            fragment = self.generate_expression(properties[0], Precedence['Sequence'], E_TTT)

        if not multiline and not has_line_terminator(flatten(fragment)):
            return ['{', self.fmt.space, fragment, self.fmt.space, '}']

        newline = self.fmt.newline
        with self.indented() as indent:
            result = ['{', newline, indent, fragment]
            if multiline:
                result.append(',' + newline)
                for i, prop in enumerate(properties[1:], 1):
                    result.append(indent)
                    result.append(self.generate_expression(prop, Precedence['Sequence'], E_TTT))
                    if i + 1 < len(properties):
                        result.append(',' + newline)

        if not ends_with_line_terminator(flatten(result)):
            result.append(newline)
        result.append(self.base)
        result.append('}')
        return result

    def AssignmentPattern(self, expr, precedence, flags):
        return self.generate_assignment(expr['left'], expr['right'], '=', precedence, flags)

    def ObjectPattern(self, expr, precedence, flags):
        properties = expr['properties']
        if not properties:
            return '{}'

        if len(properties) == 1:
            prop = properties[0]
            multiline = prop['type'] == 'Property' and prop['value']['type'] != 'Identifier'
        else:
            multiline = any(prop['type'] == 'Property' and not prop.get('shorthand') for prop in properties)

        newline = self.fmt.newline
        result = ['{', newline if multiline else '']
        with self.indented() as indent:
            for i, prop in enumerate(properties):
                result.append(indent if multiline else '')
                result.append(self.generate_expression(prop, Precedence['Sequence'], E_TTT))
                if i + 1 < len(properties):
                    result.append(',' + (newline if multiline else self.fmt.space))

        if multiline and not ends_with_line_terminator(flatten(result)):
            result.append(newline)
        result.append(self.base if multiline else '')
        result.append('}')
        return result

    def ThisExpression(self, expr, precedence, flags):
        return 'this'

    def Super(self, expr, precedence, flags):
        return 'super'

    def Identifier(self, expr, precedence, flags):
        return self.generate_identifier(expr)

    def ImportDefaultSpecifier(self, expr, precedence, flags):
        return self.generate_identifier(expr.get('id') or expr['local'])

    def ImportNamespaceSpecifier(self, expr, precedence, flags):
        result = ['*']
        local = expr.get('id') or expr.get('local')
        if local:
            result.append(self.fmt.space + 'as' + self.no_empty_space())
            result.append(self.generate_identifier(local))
        return result

    def _module_export_name(self, node):
        if node['type'] == 'Literal':
            return self.generate_expression(node, Precedence['Sequence'], E_TTT)
        return node['name']

    @staticmethod
    def _specifier_key(node):
        return node.get('name', node.get('value'))

    def ImportSpecifier(self, expr, precedence, flags):
        imported = expr['imported']
        result = [self._module_export_name(imported)]
        local = expr.get('local')
        # a string import name always needs a local binding
        renamed = imported['type'] == 'Literal' or self._specifier_key(local or {}) != self._specifier_key(imported)
        if local and renamed:
            result.append(self.no_empty_space() + 'as' + self.no_empty_space())
            result.append(self.generate_identifier(local))
        return result

    def ExportSpecifier(self, expr, precedence, flags):
        local = expr['local']
        result = [self._module_export_name(local)]
        exported = expr.get('exported')
        if exported and self._specifier_key(exported) != self._specifier_key(local):
            result.append(self.no_empty_space() + 'as' + self.no_empty_space())
            result.append(self._module_export_name(exported))
        return result

    def _raw_literal(self, expr):
        raw = expr.get('raw')
        if raw is None or not self.fmt.parse or not self.fmt.raw:
            return None
        try:
            reparsed = self.fmt.parse(raw)['body'][0]['expression']
        except Exception as e:
            logger.debug('Ignoring raw literal %r: %s', raw, e)
            return None
        if reparsed.get('type') == 'Literal' and _same_literal_value(reparsed.get('value'), expr.get('value')):
            return raw
        return None

    def Literal(self, expr, precedence, flags):
        raw = self._raw_literal(expr)
        if raw is not None:
            return raw

        regex = expr.get('regex')
        if regex:
            return '/%s/%s' % (regex['pattern'], regex['flags'])

        if expr.get('bigint'):
            return expr['bigint'] + 'n'

        value = expr.get('value')
        if value is None:
            return 'null'
        if isinstance(value, str):
            return escape_string(value, self.fmt)
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, (int, float)):
            return generate_number(value, self.fmt)
        if isinstance(value, re.Pattern):
            return generate_regexp(value)
        raise CodeGenerationError('Unsupported literal value: %r' % (value,))

    def GeneratorExpression(self, expr, precedence, flags):
        return self.ComprehensionExpression(expr, precedence, flags)

    def ComprehensionExpression(self, expr, precedence, flags):
        is_generator = expr['type'] == 'GeneratorExpression'
        starts_with_assignment = self.fmt.comprehension_starts_with_assignment
        result = ['(' if is_generator else '[']

        if starts_with_assignment:
            result.append(self.generate_expression(expr['body'], Precedence['Assignment'], E_TTT))

        if expr.get('blocks'):
            with self.indented():
                for i, block in enumerate(expr['blocks']):
                    fragment = self.generate_expression(block, Precedence['Sequence'], E_TTT)
                    if i > 0 or starts_with_assignment:
                        result = self.join(result, fragment)
                    else:
                        result.append(fragment)

        if expr.get('filter'):
            result = self.join(result, 'if' + self.fmt.space)
            fragment = self.generate_expression(expr['filter'], Precedence['Sequence'], E_TTT)
            result = self.join(result, ['(', fragment, ')'])

        if not starts_with_assignment:
            result = self.join(result, self.generate_expression(expr['body'], Precedence['Assignment'], E_TTT))

        result.append(')' if is_generator else ']')
        return result

    def ComprehensionBlock(self, expr, precedence, flags):
        left = expr['left']
        if left['type'] == 'VariableDeclaration':
            fragment = [left['kind'], self.no_empty_space(),
                        self.generate_statement(left['declarations'][0], S_FFFF)]
        else:
            fragment = self.generate_expression(left, Precedence['Call'], E_TTT)

        fragment = self.join(fragment, 'of' if expr.get('of') else 'in')
        fragment = self.join(fragment, self.generate_expression(expr['right'], Precedence['Sequence'], E_TTT))
        return ['for' + self.fmt.space + '(', fragment, ')']

    def SpreadElement(self, expr, precedence, flags):
        return ['...', self.generate_expression(expr['argument'], Precedence['Assignment'], E_TTT)]

    def TaggedTemplateExpression(self, expr, precedence, flags):
        item_flags = E_TTF if flags.allow_call else E_TFF
        result = [
            self.generate_expression(expr['tag'], Precedence['Call'], item_flags),
            self.generate_expression(expr['quasi'], Precedence['Primary'], E_FFT),
        ]
        return parenthesize(result, Precedence['TaggedTemplate'], precedence)

    def TemplateElement(self, expr, precedence, flags):
        raw = expr['value']['raw']
        if self.fmt.json:
            return _json_string_body(raw)
        return raw

    def TemplateLiteral(self, expr, precedence, flags):
        quasis = expr['quasis']
        as_json_string = self.fmt.json and len(quasis) == 1
        quote = '"' if as_json_string else '`'
        result = [quote]
        for i, quasi in enumerate(quasis):
            result.append(self.generate_expression(quasi, Precedence['Primary'], E_TTT))
            if i + 1 < len(quasis):
                result.append('${' + self.fmt.space)
                result.append(self.generate_expression(expr['expressions'][i], Precedence['Sequence'], E_TTT))
                result.append(self.fmt.space + '}')
        result.append(quote)
        return result

    def ModuleSpecifier(self, expr, precedence, flags):
        return self.Literal(expr, precedence, flags)

    def ImportExpression(self, expr, precedence, flags):
        return parenthesize([
            'import(',
            self.generate_expression(expr['source'], Precedence['Assignment'], E_TTT),
            ')',
        ], Precedence['Call'], precedence)
