# src/models/json_object.py

"""Minimal JSON-object abstraction used by the store models.

Models only ever check for a field, read a typed value, or add a field,
so they stay independent of how the JSON text is produced or parsed.
"""

import json
from typing import Any


class MissingFieldError(KeyError):
    """A required field is absent from a JSON object."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Missing required JSON field '{self.key}'"


class JSONObject:
    """A mutable JSON object (string keys, insertion ordered)."""

    def __init__(self, fields: dict[str, Any] | None = None) -> None:
        self._fields: dict[str, Any] = dict(fields) if fields else {}

    # ── Reading ──────────────────────────────────────────

    def has_field(self, key: str) -> bool:
        """Return ``True`` when *key* is present (even if null)."""
        return key in self._fields

    def get_str(self, key: str) -> str | None:
        """Read a required string field.

        Raises:
            MissingFieldError: If *key* is absent.
        """
        if key not in self._fields:
            raise MissingFieldError(key)
        value = self._fields[key]
        return None if value is None else str(value)

    def get_number(self, key: str) -> float:
        """Read a required numeric field.

        Raises:
            MissingFieldError: If *key* is absent.
            ValueError: If the value is not numeric.
        """
        if key not in self._fields:
            raise MissingFieldError(key)
        return float(self._fields[key])

    def opt_str(self, key: str) -> str | None:
        """Read an optional string field, ``None`` when absent or null."""
        value = self._fields.get(key)
        return None if value is None else str(value)

    def opt_number(self, key: str, default: float = 0.0) -> float:
        """Read an optional numeric field, *default* when absent or null."""
        value = self._fields.get(key)
        return default if value is None else float(value)

    def opt_int(self, key: str, default: int = 0) -> int:
        """Read an optional integer field, *default* when absent or null."""
        value = self._fields.get(key)
        return default if value is None else int(value)

    # ── Writing ──────────────────────────────────────────

    def add_field(self, key: str, value: Any) -> None:
        """Set *key* to *value*, replacing any previous value."""
        self._fields[key] = value

    # ── Conversion ───────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the fields as a plain dict."""
        return dict(self._fields)

    def dumps(self, indent: int | None = None) -> str:
        """Render the object as JSON text."""
        return json.dumps(self._fields, ensure_ascii=False, indent=indent)

    @classmethod
    def loads(cls, text: str) -> "JSONObject":
        """Parse JSON text that must contain an object.

        Raises:
            json.JSONDecodeError: If *text* is not valid JSON.
            TypeError: If the top-level value is not an object.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return cls(data)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSONObject):
            return self._fields == other._fields
        if isinstance(other, dict):
            return self._fields == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"JSONObject({self._fields!r})"
