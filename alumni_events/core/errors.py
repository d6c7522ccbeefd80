"""
Error taxonomy for the scheduling engine.

Routes map these onto HTTP status codes; the engine itself never retries
or swallows them.
"""


class SchedulingError(Exception):
    """Base class for errors raised by the scheduling engine."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SchedulingError):
    """A referenced event does not exist."""

    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class InvalidIntervalError(SchedulingError):
    """A duration is not positive or an interval ends at or before its start."""


class InvalidArgumentError(SchedulingError):
    """A limit such as `top` or `count` is out of range."""
