"""Error taxonomy for routing and its collaborators. Handlers map these to HTTP statuses."""

from __future__ import annotations

from typing import Any


class RouterError(Exception):
    """Base class for all ipguard errors."""


class InvalidInputError(RouterError):
    """Raw observation is not a mapping (or the image payload is empty)."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value_type = type(value).__name__


class UnclassifiedError(RouterError):
    """No classifier rule matched: a decision-table coverage bug, never a normal outcome."""

    def __init__(self, observation: Any):
        super().__init__(f"No category rule matched observation {observation!r}")
        self.observation = observation


class VisionParseError(RouterError):
    """The vision model's reply held no recoverable JSON object."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class ImageTooLargeError(RouterError):
    def __init__(self, size: int, max_size: int):
        super().__init__(f"Image is {size} bytes; limit is {max_size}")
        self.size = size
        self.max_size = max_size
