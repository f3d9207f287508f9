from __future__ import annotations

from typing import Any

from .containers import ID_FIELD, GraphContainer, is_container
from .keys import KeyResolver
from .locator import locate


def short_id(container: Any, *, fallback: str | None = None) -> str:
    subject = locate(container)
    full_id = subject.get(ID_FIELD) if isinstance(subject, dict) else None
    short = (full_id or "").split("/")[-1]
    if short:
        return short
    if fallback:
        return fallback
    raw = GraphContainer.of(container).raw
    return (raw.get("uuid") if isinstance(raw, dict) else None) or ""


def get(container: Any, key: str, resolver: KeyResolver, *, fallback: str | None = None) -> Any | None:
    """Read a predicate from the canonical subject as stored.

    `key == "id"` returns the short id: the last path segment of the
    subject's `@id`, else `fallback`, else a `uuid` field on the raw
    container, else "". Any other key returns the stored list or None.
    """

    if key == "id":
        return short_id(container, fallback=fallback)
    subject = locate(container)
    if not isinstance(subject, dict):
        return None
    return subject.get(resolver.resolve(key))


def get_value(container: Any, key: str, resolver: KeyResolver, *, fallback: str | None = None) -> Any | None:
    """First element of `get`, or the value itself when it is not a list."""
    if container is None:
        return None
    value = get(container, key, resolver, fallback=fallback)
    if isinstance(value, list):
        return value[0] if value else None
    return value


def set_value(container: Any, key: str, value: Any, resolver: KeyResolver) -> None:
    """Write a predicate on the canonical subject.

    Containers are unwrapped to their node list, and lists replace the whole
    predicate. Any other value replaces only index 0, so trailing elements of
    an existing list survive.
    """

    full_key = resolver.resolve(key)
    subject = locate(container)
    if is_container(value):
        value = GraphContainer.of(value).nodes
    if isinstance(value, list):
        subject[full_key] = value
        return
    current = subject.get(full_key)
    if not isinstance(current, list):
        current = subject[full_key] = []
    if current:
        current[0] = value
    else:
        current.append(value)
