"""Traversal core: uniform iteration and folding over Sequences and Mappings."""

from underbar.traversal.core import MISSING, each, every, identity, reduce, some

__all__ = [
    'MISSING',
    'each',
    'every',
    'identity',
    'reduce',
    'some',
]
