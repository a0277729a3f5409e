"""
Process-wide defaults for the comparers that collections fall back to when they were not given their own
"""
from __future__ import annotations

import logging
import typing
from contextlib import contextmanager

from .comparers import DefaultComparer
from .comparers import DefaultEqualityComparer
from .exception import InvalidArgumentError
from .protocols import ComparerProtocol
from .protocols import EqualityComparerProtocol


logger = logging.getLogger(__name__)


class Registry:
    """
    Holds the default comparer and the default equality comparer

    Defaults are built lazily on first read, so a freshly reset registry costs nothing until it is used.
    Collections consult the registry every time they need a comparer and did not capture one, so swapping a default
    takes effect for every such collection immediately.
    """
    def __init__(self):
        self.__comparer: typing.Optional[ComparerProtocol] = None
        self.__equality_comparer: typing.Optional[EqualityComparerProtocol] = None

    def get_comparer(self) -> ComparerProtocol:
        """
        Returns:
            The comparer used when a collection was not given one
        """
        if self.__comparer is None:
            self.__comparer = DefaultComparer(self.get_equality_comparer())
        return self.__comparer

    def set_comparer(self, comparer: ComparerProtocol):
        """
        Replace the default comparer

        Args:
            comparer: The comparer to use from now on
        """
        if not isinstance(comparer, ComparerProtocol):
            raise InvalidArgumentError(f"{comparer!r} does not define a `compare` method")

        logger.debug("Replacing the default comparer %r with %r", self.__comparer, comparer)
        self.__comparer = comparer

    def get_equality_comparer(self) -> EqualityComparerProtocol:
        """
        Returns:
            The equality comparer used when a collection was not given one
        """
        if self.__equality_comparer is None:
            self.__equality_comparer = DefaultEqualityComparer()
        return self.__equality_comparer

    def set_equality_comparer(self, equality_comparer: EqualityComparerProtocol):
        """
        Replace the default equality comparer

        Args:
            equality_comparer: The equality comparer to use from now on
        """
        if not isinstance(equality_comparer, EqualityComparerProtocol):
            raise InvalidArgumentError(f"{equality_comparer!r} does not define both `equals` and `hash`")

        logger.debug(
            "Replacing the default equality comparer %r with %r", self.__equality_comparer, equality_comparer
        )
        self.__equality_comparer = equality_comparer

    @contextmanager
    def override(
        self,
        comparer: ComparerProtocol = None,
        equality_comparer: EqualityComparerProtocol = None
    ) -> typing.Iterator[Registry]:
        """
        Temporarily replace one or both defaults, restoring the previous ones on exit

        Example:
            >>> with default_registry().override(equality_comparer=my_comparer):
            ...     assert Sequence([a]).contains(b)

        Args:
            comparer: The comparer to use within the block
            equality_comparer: The equality comparer to use within the block
        """
        previous_comparer = self.__comparer
        previous_equality_comparer = self.__equality_comparer

        if comparer is not None:
            self.set_comparer(comparer)
        if equality_comparer is not None:
            self.set_equality_comparer(equality_comparer)

        try:
            yield self
        finally:
            self.__comparer = previous_comparer
            self.__equality_comparer = previous_equality_comparer
            logger.debug("Restored the default comparers")

    def reset(self):
        """
        Forget both defaults; they will be rebuilt from settings on next read
        """
        self.__comparer = None
        self.__equality_comparer = None
        logger.debug("Reset the default comparers")

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(comparer={self.__comparer!r}, "
            f"equality_comparer={self.__equality_comparer!r})"
        )


_DEFAULT_REGISTRY = Registry()


def default_registry() -> Registry:
    """
    The registry every collection falls back to
    """
    return _DEFAULT_REGISTRY
