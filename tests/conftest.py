"""Shared fixtures for the code generator and API tests."""

import esprima
import pytest

from jsgen import attach_comments, generate

IGNORED_KEYS = frozenset(['range', 'loc', 'raw'])


def parse(code, **options):
    return esprima.parseScript(code, options).toDict()


def strip_positions(node):
    """Remove position and raw-text data so trees can be compared structurally."""
    if isinstance(node, dict):
        return {key: strip_positions(value) for key, value in node.items() if key not in IGNORED_KEYS}
    if isinstance(node, list):
        return [strip_positions(item) for item in node]
    return node


@pytest.fixture
def js_parse():
    return parse


@pytest.fixture
def parse_raw():
    """A ``parse`` option that lets the generator verify ``raw`` literal text."""
    return lambda code: esprima.parseScript(code).toDict()


@pytest.fixture
def regenerate():
    def _regenerate(code, options=None):
        return generate(parse(code), options)
    return _regenerate


@pytest.fixture
def regenerate_with_comments():
    def _regenerate(code, options=None):
        tree = parse(code, range=True, tokens=True, comment=True)
        tree = attach_comments(tree, tree['comments'], tree['tokens'])
        merged = {'comment': True}
        merged.update(options or {})
        return generate(tree, merged)
    return _regenerate
