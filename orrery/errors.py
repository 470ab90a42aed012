#!/usr/bin/env python3
"""
Exceptions raised by the orrery core.

- LookupFailure: an unknown body key or name during focus/name resolution.
  Command paths recover from it by leaving the selection unchanged.
- MalformedBody: body parameters that violate the data model invariants.
  Raised once at registry construction time, never per frame.
"""


class LookupFailure(KeyError):
    """No registered body matches the requested key or name."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown body: {self.key!r}"


class MalformedBody(ValueError):
    """A body definition violates the data model invariants."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason
