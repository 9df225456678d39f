"""Pytest configuration and fixtures for cmdtree tests."""

import logging

import pytest

from cmdtree.tree import CommandTree
from recorders import RecordingExecutor, RecordingSender


@pytest.fixture(autouse=True)
def _reset_logging():
    """Keep logging state set by one test from leaking into another."""
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def sender():
    """Create sender without permissions."""
    return RecordingSender()


@pytest.fixture
def foo_tree():
    """Create tree with 'foo' and 'foo bar' (alias 'b') executors."""
    tree = CommandTree()
    foo = RecordingExecutor()
    bar = RecordingExecutor()
    tree.register("foo", foo)
    tree.register("foo bar", bar).add_aliases("b")
    return tree, foo, bar
