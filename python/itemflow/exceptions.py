"""
Errors raised by item sets and their wire codec.
    -> Each error also derives from the closest built-in exception,
       so callers may catch either one.
"""

__all__ = [
    "ItemSetError", "EmptyCollectionError", "DecodeError", "InvalidArgumentError"
]


class ItemSetError(Exception):
    pass


class EmptyCollectionError(ItemSetError, IndexError):
    """
    Raised when the head of an empty item set is requested.
    """
    pass


class DecodeError(ItemSetError, ValueError):
    """
    Raised when bytes do not hold a well-formed item set record:
    truncated input, negative count or length, trailing bytes or invalid UTF-8.
    """
    pass


class InvalidArgumentError(ItemSetError, TypeError):
    pass
