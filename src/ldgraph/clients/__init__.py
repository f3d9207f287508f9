"""HTTP collaborators: asset loading and graph persistence."""

from .assets import AssetClient
from .graph_store import GraphStoreClient

__all__ = ["AssetClient", "GraphStoreClient"]
