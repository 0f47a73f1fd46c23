"""Domain errors raised by services and translated to HTTP errors by routers."""

from __future__ import annotations


class ValidationError(ValueError):
    """A record failed validation and must not be persisted.

    ``errors`` maps each offending field to its messages, e.g.
    ``{"quantity": ["must be greater than 0"]}``.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        detail = "; ".join(
            f"{field} {message}" for field, messages in errors.items() for message in messages
        )
        super().__init__(f"Validation failed: {detail}")


class NotFoundError(LookupError):
    """A referenced record does not exist."""

    def __init__(self, resource: str, resource_id: object):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")
