from __future__ import annotations

import logging
import re
from typing import Any

from .containers import ID_FIELD, ContainerKind, GraphContainer

logger = logging.getLogger(__name__)


def local_id_pattern(prefix: str = "_:stored") -> re.Pattern[str]:
    """Server blank nodes (_:b12) and ids minted under `prefix` (_:stored1554)."""
    return re.compile(rf"^(?:_:b|{re.escape(prefix)})\d+$")


LOCAL_ID = local_id_pattern()


def persistent_id_pattern(resource_path: str = "/meta/") -> re.Pattern[str]:
    """Locators like http://host/api/v1/meta/<uuid>."""
    return re.compile(rf"^https?:.+{re.escape(resource_path)}[\da-f-]{{36}}$", re.IGNORECASE)


PERSISTENT_ID = persistent_id_pattern()


def is_local_id(value: Any, pattern: re.Pattern[str] = LOCAL_ID) -> bool:
    return isinstance(value, str) and bool(pattern.match(value))


def locate(
    container: Any,
    *,
    persistent: re.Pattern[str] = PERSISTENT_ID,
    local: re.Pattern[str] = LOCAL_ID,
) -> Any:
    """Return the canonical subject node of any container shape.

    When the first node carries a local id the persistent node is moved to
    the front of the container's node list, so the container is reordered
    in place. Calling it again on a corrected container is a no-op.
    An empty node list, or one whose first entry is not a mapping, makes the
    container itself the subject.
    """

    c = GraphContainer.of(container)
    if c.kind is ContainerKind.NODE:
        return c.raw
    nodes = c.nodes
    if not nodes or not isinstance(nodes[0], dict):
        return c.raw

    if is_local_id(nodes[0].get(ID_FIELD), local):
        for i, node in enumerate(nodes):
            node_id = node.get(ID_FIELD) if isinstance(node, dict) else None
            if isinstance(node_id, str) and persistent.match(node_id):
                nodes.insert(0, nodes.pop(i))
                logger.debug(f"Moved subject {node_id} from position {i} to front")
                break
    return nodes[0]
