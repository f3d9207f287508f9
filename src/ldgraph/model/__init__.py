"""In-memory graph model: locating, reading, writing and restructuring nodes."""

from .accessors import get, get_value, set_value, short_id
from .collection_store import EnrichmentResult, Subset, extract_or_peek, find_by_id, store, wrap_and_store
from .containers import ContainerKind, GraphContainer
from .identity import IdentityGenerator
from .inline import inline
from .keys import KeyResolver
from .locator import is_local_id, locate

__all__ = [
    "ContainerKind",
    "GraphContainer",
    "KeyResolver",
    "IdentityGenerator",
    "locate",
    "is_local_id",
    "get",
    "get_value",
    "set_value",
    "short_id",
    "find_by_id",
    "extract_or_peek",
    "store",
    "wrap_and_store",
    "Subset",
    "EnrichmentResult",
    "inline",
]
