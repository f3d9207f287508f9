from __future__ import annotations


class LinkedGraphError(Exception):
    """Base class for errors raised by ldgraph."""


class ContainerShapeError(LinkedGraphError):
    """The container has no node sequence that can be spliced or appended to."""


class LocalIdExhaustedError(LinkedGraphError):
    """No free local id was found within the configured number of attempts."""

    def __init__(self, attempts: int):
        super().__init__(f"no free local id after {attempts} attempts")
        self.attempts = attempts


class TransportError(LinkedGraphError):
    """An HTTP collaborator failed to load or save a resource."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
