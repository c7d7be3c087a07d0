"""
This package provides the item set record of a frequent-pattern mining pipeline.
    -> An item set is an ordered sequence of textual items:
    {
        itemA, itemB, ...
    }
    kept in frequency order. The first item is the head, the rest is the tail.

    -> Item sets are keys and values of Spark RDDs, so they
        -> compare by their space-joined rendering,
        -> hash identically on every worker,
        -> serialize to the writable array-of-text wire format.
"""

from .item_set import ItemSet
from .exceptions import ItemSetError, EmptyCollectionError, DecodeError, InvalidArgumentError

__all__ = [
    "ItemSet", "ItemSetError", "EmptyCollectionError", "DecodeError", "InvalidArgumentError"
]
