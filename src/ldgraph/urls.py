from __future__ import annotations


def compile_url(tail: str, domain: str, api_root: str) -> str:
    """Absolute API URL for any piece of one.

    With domain 'http://sample.domain' and api_root '/api/v1', '/method',
    '/api/v1/method' and 'http://sample.domain/api/v1/method' all give
    'http://sample.domain/api/v1/method'.
    """

    if tail.startswith("http"):
        return tail
    if tail.startswith(api_root):
        return domain + tail
    return domain + api_root + tail


def compile_relative_url(tail: str, domain: str, api_root: str) -> str:
    """Domain-less API URL ('/api/v1/method') for any piece of one."""
    if tail.startswith("http"):
        return tail.replace(domain, "", 1)
    if tail.startswith(api_root):
        return tail
    return api_root + tail
