"""Output fragments.

A fragment is a ``str``, a list of fragments, or a :class:`Positioned`
node which tags its children with the source location they were
generated from. Positions are only attached when a source map was
requested; otherwise generators work on plain strings and lists.
"""


class Positioned:
    __slots__ = ('children', 'line', 'column', 'source', 'name')

    def __init__(self, children, line=None, column=None, source=None, name=None):
        self.children = children
        self.line = line
        self.column = column
        self.source = source
        self.name = name

    def has_position(self):
        return self.source is not None and self.line is not None and self.column is not None

    def __str__(self):
        return flatten(self)

    def __repr__(self):
        return 'Positioned(%r, line=%r, column=%r)' % (self.children, self.line, self.column)


def _collect(fragment, parts):
    if isinstance(fragment, str):
        parts.append(fragment)
    elif isinstance(fragment, Positioned):
        _collect(fragment.children, parts)
    else:
        for child in fragment:
            _collect(child, parts)


def flatten(fragment):
    if isinstance(fragment, str):
        return fragment
    parts = []
    _collect(fragment, parts)
    return ''.join(parts)


def rstrip(fragment):
    """Strip trailing whitespace from the last chunk of ``fragment``."""
    if isinstance(fragment, str):
        return fragment.rstrip()
    if isinstance(fragment, Positioned):
        return Positioned(rstrip(fragment.children), fragment.line, fragment.column, fragment.source, fragment.name)
    if not fragment:
        return fragment
    return list(fragment[:-1]) + [rstrip(fragment[-1])]


def walk(fragment, owner=None):
    """Yield ``(chunk, owner)`` pairs in output order.

    ``owner`` is the innermost :class:`Positioned` enclosing the chunk, or
    ``None`` at the top level.
    """
    if isinstance(fragment, str):
        if fragment:
            yield fragment, owner
    elif isinstance(fragment, Positioned):
        yield from walk(fragment.children, fragment)
    else:
        for child in fragment:
            yield from walk(child, owner)
