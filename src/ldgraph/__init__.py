"""Linked-data graph model.

This package provides:
- A uniform view over the container shapes a graph arrives in
- Predicate accessors keyed by short ontology names
- Blank node creation and local id generation
- Collection node storage/extraction and local reference inlining
- Thin HTTP clients for loading assets and saving graphs
"""

from .errors import ContainerShapeError, LinkedGraphError, LocalIdExhaustedError, TransportError
from .model.containers import GraphContainer
from .service import LinkedGraph

__version__ = "0.1.0"

__all__ = [
    "GraphContainer",
    "LinkedGraph",
    "LinkedGraphError",
    "ContainerShapeError",
    "LocalIdExhaustedError",
    "TransportError",
]
