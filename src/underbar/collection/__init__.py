"""Collection operations built on the traversal core.

Example:
    ```python
    import underbar as _

    _.pluck([{'name': 'moe'}, {'name': 'curly'}], 'name')  # ['moe', 'curly']
    _.flatten([1, [2, [3, (4,)]]])                          # [1, 2, 3, 4]
    ```
"""

from underbar.collection.objects import defaults, extend
from underbar.collection.ops import (
    contains,
    difference,
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

__all__ = [
    'contains',
    'defaults',
    'difference',
    'extend',
    'filter',
    'first',
    'flatten',
    'index_of',
    'intersection',
    'invoke',
    'last',
    'map',
    'pluck',
    'reject',
    'shuffle',
    'sort_by',
    'uniq',
    'zip',
]
