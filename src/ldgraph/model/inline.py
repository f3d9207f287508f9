from __future__ import annotations

import logging
import re
from typing import Any

from .collection_store import find_by_id
from .containers import ID_FIELD
from .keys import KeyResolver
from .locator import LOCAL_ID, PERSISTENT_ID, is_local_id, locate

logger = logging.getLogger(__name__)


def inline(
    container: Any,
    source: Any = None,
    *,
    local: re.Pattern[str] = LOCAL_ID,
    persistent: re.Pattern[str] = PERSISTENT_ID,
) -> list[str]:
    """Replace local references on the subject with the nodes they point to.

    Only the first value of each full-key predicate is considered, and only
    one level deep: references inside an inlined node are left as they are.
    Nodes are looked up in `source` (defaults to `container`) and embedded
    as the same objects, so edits through either place reach both.
    Returns the predicate keys that were inlined.
    """

    if source is None:
        source = container
    subject = locate(container, persistent=persistent, local=local)
    if not isinstance(subject, dict):
        return []

    inlined = []
    for key, values in subject.items():
        if not KeyResolver.is_full(key) or not isinstance(values, list) or not values:
            continue
        first = values[0]
        ref_id = first.get(ID_FIELD) if isinstance(first, dict) else None
        if not is_local_id(ref_id, local):
            continue
        node = find_by_id(source, ref_id)
        if node is None:
            logger.warning(f"Local reference {ref_id} under {key} not found, left as is")
            continue
        values[0] = node
        inlined.append(key)
    return inlined
