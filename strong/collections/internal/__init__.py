"""
Storage structures backing the public collections
"""
from .key_table import KeyItem
from .key_table import KeyTable
from .key_table import KeyValuePair

from .storage import Lazy
from .storage import Materialized
from .storage import Storage
from .storage import to_storage
