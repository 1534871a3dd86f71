"""Comment emission and comment attachment."""
import copy
import logging
import re
from bisect import bisect_right

from jsgen.code import ends_with_line_terminator, has_line_terminator, is_line_terminator, is_white_space
from jsgen.errors import CodeGenerationError
from jsgen.fragment import flatten

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r'\r\n|[\r\n]')

# Keys of a node that never hold child nodes.
_NON_CHILD_KEYS = frozenset([
    'type', 'range', 'loc', 'leadingComments', 'trailingComments', 'innerComments',
    'comments', 'tokens', 'errors', 'extendedRange',
])

SKIP = 'skip'
BREAK = 'break'


def calculate_spaces(text):
    i = len(text) - 1
    while i >= 0:
        if is_line_terminator(text[i]):
            break
        i -= 1
    return len(text) - 1 - i


def adjust_multiline_comment(gen, value, special_base=None):
    lines = _LINE_SPLIT.split(value)
    spaces = min(_leading_white_space(line) for line in lines[1:])

    if special_base is not None:
        base = special_base + ' ' if lines[1][spaces:spaces + 1] == '*' else special_base
    else:
        if spaces & 1:
            spaces -= 1
        base = gen.base

    return '\n'.join([lines[0]] + [base + line[spaces:] for line in lines[1:]])


def _leading_white_space(line):
    j = 0
    while j < len(line) and is_white_space(line[j]):
        j += 1
    return j


def generate_comment(gen, comment, special_base=None):
    value = comment['value']
    if comment['type'] == 'Line':
        if ends_with_line_terminator(value):
            return '//' + value
        result = '//' + value
        if not gen.fmt.preserve_blank_lines:
            result += '\n'
        return result
    if gen.fmt.adjust_multiline_comment and has_line_terminator(value):
        return adjust_multiline_comment(gen, '/*' + value + '*/', special_base)
    return '/*' + value + '*/'


def generate_blank_lines(gen, start, end, result):
    count = gen.fmt.source_code.count('\n', start, end)
    for _ in range(1, count):
        result.append(gen.fmt.newline)


def _leading_preserved(gen, node):
    source = gen.fmt.source_code
    comments = node['leadingComments']
    first = comments[0]
    extended = first['extendedRange']
    span = first['range']

    result = []
    prefix = source[extended[0]:span[0]]
    count = prefix.count('\n')
    if count > 0:
        result.append('\n' * count)
        result.append(gen.add_indent(generate_comment(gen, first)))
    else:
        result.append(prefix)
        result.append(generate_comment(gen, first))

    previous = span
    for comment in comments[1:]:
        span = comment['range']
        result.append('\n' * source.count('\n', previous[1], span[0]))
        result.append(gen.add_indent(generate_comment(gen, comment)))
        previous = span

    result.append('\n' * source.count('\n', span[1], extended[1]))
    return result


def _leading(gen, node):
    comments = node['leadingComments']
    result = []
    if gen.fmt.safe_concatenation and node['type'] == 'Program' and not node['body']:
        result.append('\n')
    result.append(generate_comment(gen, comments[0]))
    if not ends_with_line_terminator(flatten(result)):
        result.append('\n')

    for comment in comments[1:]:
        fragment = [generate_comment(gen, comment)]
        if not ends_with_line_terminator(flatten(fragment)):
            fragment.append('\n')
        result.append(gen.add_indent(fragment))
    return result


def add_comments(gen, node, result):
    """Wrap ``result`` with the comments attached to ``node``."""
    preserve = gen.fmt.preserve_blank_lines
    if not isinstance(result, list):
        result = [result]

    if node.get('leadingComments'):
        save = result
        result = _leading_preserved(gen, node) if preserve else _leading(gen, node)
        result.append(gen.add_indent(save))

    trailing = node.get('trailingComments')
    if not trailing:
        return result

    if preserve:
        comment = trailing[0]
        extended = comment['extendedRange']
        span = comment['range']
        prefix = gen.fmt.source_code[extended[0]:span[0]]
        count = prefix.count('\n')
        if count > 0:
            result.append('\n' * count)
            result.append(gen.add_indent(generate_comment(gen, comment)))
        else:
            result.append(prefix)
            result.append(generate_comment(gen, comment))
        return result

    tailing_to_statement = not ends_with_line_terminator(flatten(result))
    special_base = ' ' * calculate_spaces(flatten([gen.base, result, gen.fmt.indent]))
    last = len(trailing) - 1
    for i, comment in enumerate(trailing):
        if tailing_to_statement:
            # var t = 20;  /**
            #               * This is comment of t
            #               */
            result = [result, gen.fmt.indent if i == 0 else special_base]
            result.append(generate_comment(gen, comment, special_base))
        else:
            result = [result, gen.add_indent(generate_comment(gen, comment))]
        if i != last and not ends_with_line_terminator(flatten(result)):
            result = [result, '\n']
    return result


def _children(node):
    children = []
    for key, value in node.items():
        if key in _NON_CHILD_KEYS:
            continue
        if isinstance(value, dict):
            if 'type' in value:
                children.append(value)
        elif isinstance(value, list):
            children.extend(item for item in value if isinstance(item, dict) and 'type' in item)
    if all('range' in child for child in children):
        children.sort(key=lambda child: child['range'][0])
    return children


def traverse(node, enter=None, leave=None):
    """Depth-first walk; ``enter``/``leave`` may return ``SKIP`` or ``BREAK``.

    Returns ``True`` when the walk was stopped with ``BREAK``.
    """
    action = enter(node) if enter is not None else None
    if action == BREAK:
        return True
    if action != SKIP:
        for child in _children(node):
            if traverse(child, enter, leave):
                return True
    if leave is not None and leave(node) == BREAK:
        return True
    return False


def _extend_comment_range(comment, tokens, starts):
    target = bisect_right(starts, comment['range'][0])
    comment['extendedRange'] = [comment['range'][0], comment['range'][1]]

    if target != len(tokens):
        comment['extendedRange'][1] = tokens[target]['range'][0]

    target -= 1
    if target >= 0:
        comment['extendedRange'][0] = tokens[target]['range'][1]
    return comment


def attach_comments(tree, provided_comments, tokens):
    """Attach ``leadingComments``/``trailingComments`` to the nodes of ``tree``.

    ``tree`` must carry ``range`` information; comments are copied before
    they are attached and the mutated tree is returned.
    """
    if 'range' not in tree:
        raise CodeGenerationError('attachComments needs range information')

    comments = []
    if not tokens:
        if provided_comments:
            for comment in provided_comments:
                comment = copy.deepcopy(comment)
                comment['extendedRange'] = [0, tree['range'][0]]
                comments.append(comment)
            tree['leadingComments'] = comments
        return tree

    starts = [token['range'][0] for token in tokens]
    for comment in provided_comments or ():
        comments.append(_extend_comment_range(copy.deepcopy(comment), tokens, starts))

    cursor = [0]

    def enter_leading(node):
        while cursor[0] < len(comments):
            comment = comments[cursor[0]]
            if comment['extendedRange'][1] > node['range'][0]:
                break
            if comment['extendedRange'][1] == node['range'][0]:
                node.setdefault('leadingComments', []).append(comment)
                comments.pop(cursor[0])
            else:
                cursor[0] += 1

        if cursor[0] == len(comments):
            return BREAK
        if comments[cursor[0]]['extendedRange'][0] > node['range'][1]:
            return SKIP
        return None

    traverse(tree, enter=enter_leading)

    cursor[0] = 0

    def leave_trailing(node):
        while cursor[0] < len(comments):
            comment = comments[cursor[0]]
            if node['range'][1] < comment['extendedRange'][0]:
                break
            if node['range'][1] == comment['extendedRange'][0]:
                node.setdefault('trailingComments', []).append(comment)
                comments.pop(cursor[0])
            else:
                cursor[0] += 1

        if cursor[0] == len(comments):
            return BREAK
        if comments[cursor[0]]['extendedRange'][0] > node['range'][1]:
            return SKIP
        return None

    traverse(tree, leave=leave_trailing)

    if comments:
        logger.debug('%d comments left unattached', len(comments))
    return tree
