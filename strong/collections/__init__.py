"""
Ordered sequences, insertion ordered maps, and sets whose equality and ordering are driven by pluggable comparers
"""
from ._version import __version__

from .constants import DuplicateKeyPolicy
from .constants import SENTINEL

from .exception import CollectionException
from .exception import KeyNotFoundError
from .exception import IndexOutOfRangeError
from .exception import DuplicateKeyError
from .exception import TypeMismatchError
from .exception import HashingUnsupportedError
from .exception import InvalidArgumentError

from .protocols import EqualityComparerProtocol
from .protocols import ComparerProtocol
from .protocols import EquatableProtocol
from .protocols import ComparableProtocol

from .comparers import ValueKind
from .comparers import DefaultEqualityComparer
from .comparers import DefaultComparer

from .registry import Registry
from .registry import default_registry

from .settings import CollectionSettings
from .settings import collection_settings

from .internal.key_table import KeyValuePair

from .sequences import AbstractSequence
from .sequences import ReadonlySequence
from .sequences import Sequence

from .maps import AbstractMap
from .maps import ReadonlyMap
from .maps import Map

from .sets import Set
