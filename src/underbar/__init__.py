"""underbar: functional collection utilities and stateful function decorators.

Traversal primitives (each, reduce, every, some), the collection operations
built on them, and decorators that change how a function is invoked
(once, memoize, delay, throttle).

Flat imports (preferred):
    import underbar as _
    _.reduce([1, 2, 3], lambda a, b: a + b, 0)
    fetch = _.throttle(fetch, 1000)

Submodule imports (for organization):
    from underbar.traversal import each, reduce
    from underbar.collection import pluck, sort_by
    from underbar.decorators import once, memoize
    from underbar.scheduling import VirtualScheduler
    from underbar.runtime import init
"""

# Collection operations
from underbar.collection import (
    contains,
    defaults,
    difference,
    extend,
    filter,  # noqa: A004
    first,
    flatten,
    index_of,
    intersection,
    invoke,
    last,
    map,  # noqa: A004
    pluck,
    reject,
    shuffle,
    sort_by,
    uniq,
    zip,  # noqa: A004
)

# Decorators
from underbar.decorators import (
    delay,
    memoize,
    memoize_async,
    once,
    once_async,
    throttle,
)

# Errors
from underbar.errors import (
    CollectionTypeError,
    EmptyReductionError,
    UnderbarError,
)

# Traversal
from underbar.traversal import MISSING, each, every, identity, reduce, some

__all__ = [
    'MISSING',
    # Errors
    'CollectionTypeError',
    'EmptyReductionError',
    'UnderbarError',
    # Collection operations
    'contains',
    'defaults',
    # Decorators
    'delay',
    'difference',
    # Traversal
    'each',
    'every',
    'extend',
    'filter',
    'first',
    'flatten',
    'identity',
    'index_of',
    'intersection',
    'invoke',
    'last',
    'map',
    'memoize',
    'memoize_async',
    'once',
    'once_async',
    'pluck',
    'reduce',
    'reject',
    'shuffle',
    'some',
    'sort_by',
    'throttle',
    'uniq',
    'zip',
]
