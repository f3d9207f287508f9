from __future__ import annotations

import re

_FULL_KEY = re.compile(r"^http")
_NAMESPACED = re.compile(r"[#:]")


class KeyResolver:
    """Expands short predicate/type names into full ontology keys.

    >>> r = KeyResolver("http://sample.domain/ontologies/")
    >>> r.resolve("image")
    'http://sample.domain/ontologies/core#image'
    >>> r.resolve("display#menuCatalogue")
    'http://sample.domain/ontologies/display#menuCatalogue'

    Malformed short keys are not rejected; they expand to malformed full keys.
    """

    def __init__(self, base: str, default_namespace: str = "core#"):
        self.base = base
        self.default_prefix = base + default_namespace

    @staticmethod
    def is_full(key: str) -> bool:
        return bool(_FULL_KEY.match(key))

    def resolve(self, key: str) -> str:
        if self.is_full(key):
            return key
        if _NAMESPACED.search(key):
            return self.base + key
        return self.default_prefix + key

    def prefix(self, namespace: str) -> str:
        """Full prefix of a namespace such as 'display#'."""
        return self.base + namespace
