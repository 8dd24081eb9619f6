"""Exceptions raised at the Configuration boundary."""

from __future__ import annotations

from typing import Any


class InvalidInput(ValueError):
    """A calculation input could not be accepted.

    Raised for non-numeric text in a numeric field, non-finite numbers,
    values outside their allowed range (e.g. fuel efficiency <= 0), and
    unknown fields.  ``errors`` lists one entry per offending field with
    ``field`` (dot-path) and ``message`` keys.
    """

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors) or "<unknown>"
        super().__init__(f"Invalid input for: {fields}")

    @classmethod
    def from_validation_error(cls, exc: Any) -> InvalidInput:
        """Flatten a ``pydantic.ValidationError`` into ``{field, message}`` entries."""
        return cls([
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ])
