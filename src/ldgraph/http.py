from __future__ import annotations

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

JSONLD_ACCEPT = "application/ld+json, application/json"

TransientHttpError = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


def graph_headers(api_key: str | None = None) -> dict[str, str]:
    """Headers every graph endpoint expects: JSON-LD negotiation plus the optional API key."""
    headers = {"Accept": JSONLD_ACCEPT}
    if api_key:
        headers["X-API-Key"] = api_key
    return headers


def graph_client(*, api_key: str | None = None, read_timeout_s: float = 60.0) -> httpx.AsyncClient:
    """Shared client for asset loads and graph saves.

    Requests use absolute locators (subject ids), so there is no base URL.
    Keep one client per collaborator; do not create per-request.
    """

    return httpx.AsyncClient(
        headers=graph_headers(api_key),
        timeout=httpx.Timeout(connect=10.0, read=read_timeout_s, write=20.0, pool=10.0),
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
        follow_redirects=True,
    )


def retry_transient(attempts: int = 5):
    """Retry timeouts and dropped connections; error statuses are returned to the caller."""
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential_jitter(initial=0.5, max=10.0),
        retry=retry_if_exception_type(TransientHttpError),
    )
