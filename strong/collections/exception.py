"""
Errors raised by the collections and the equality/ordering engine
"""
from abc import ABC


class CollectionException(Exception, ABC):
    """
    Abstract base for custom exception types within strong collections.
    """

    def __init__(self, *args, **kwargs):
        super(CollectionException, self).__init__(*args, **kwargs)


class KeyNotFoundError(CollectionException, KeyError):
    """
    Raised when a key lookup that is not a `try_` lookup cannot find the requested key.
    """

    def __init__(self, *args, **kwargs):
        super(KeyNotFoundError, self).__init__(*args, **kwargs)

    def __str__(self):
        # KeyError wraps its message in quotes; report it as written instead
        return str(self.args[0]) if self.args else ""


class IndexOutOfRangeError(CollectionException, IndexError):
    """
    Raised when an index falls outside of `[-count, count)`, or `[-count, count]` for insertion points.
    """

    def __init__(self, *args, **kwargs):
        super(IndexOutOfRangeError, self).__init__(*args, **kwargs)


class DuplicateKeyError(CollectionException, KeyError):
    """
    Raised when an insertion targets a key that already exists while the duplicate key policy says to throw.
    """

    def __init__(self, *args, **kwargs):
        super(DuplicateKeyError, self).__init__(*args, **kwargs)

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class TypeMismatchError(CollectionException, TypeError):
    """
    Raised when a value cannot be coerced, compared, or hashed under the active comparer.

    The value itself may be perfectly valid; it is the combination of value and comparer that cannot be reconciled,
    such as ordering a string against a date with the default comparer.
    """

    def __init__(self, *args, **kwargs):
        super(TypeMismatchError, self).__init__(*args, **kwargs)


class HashingUnsupportedError(TypeMismatchError):
    """
    Raised when a value of a type with no hashing rule is given to an equality comparer's `hash`.
    """

    def __init__(self, *args, **kwargs):
        super(HashingUnsupportedError, self).__init__(*args, **kwargs)


class InvalidArgumentError(CollectionException, ValueError):
    """
    Raised for structurally invalid arguments, such as negative lengths or chunk sizes of zero.
    """

    def __init__(self, *args, **kwargs):
        super(InvalidArgumentError, self).__init__(*args, **kwargs)
