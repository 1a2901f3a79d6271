"""Errors raised across the publish/consume boundary."""
from typing import Optional


class PublishError(Exception):
    """The send primitive could not hand a record to the broker."""

    def __init__(self, binding: str, detail: str, destination: Optional[str] = None):
        self.binding = binding
        self.destination = destination
        self.detail = detail
        super().__init__(f"Failed to publish to '{binding}': {detail}")


class ConsumeError(Exception):
    """An inbound message could not be converted for its consumer function."""

    def __init__(self, binding: str, detail: str):
        self.binding = binding
        self.detail = detail
        super().__init__(f"Failed to consume from '{binding}': {detail}")


class BinderError(Exception):
    """Transport-level failure reported by a message binder."""
