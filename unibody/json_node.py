from __future__ import annotations

import json
from typing import Any


class JsonNode:
    """
    Parsed JSON document.

    An empty string yields an empty object. Only objects and arrays are
    accepted at the top level.
    """

    def __init__(self, json_string: str) -> None:
        if not json_string.strip():
            self._value: Any = {}
        else:
            try:
                self._value = json.loads(json_string)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON document: {exc}") from exc
            if not isinstance(self._value, (dict, list)):
                raise ValueError("JSON document must be an object or an array")

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_array(self) -> bool:
        return isinstance(self._value, list)

    @property
    def object(self) -> dict:
        if not isinstance(self._value, dict):
            raise TypeError("JSON document is not an object")
        return self._value

    @property
    def array(self) -> list:
        if isinstance(self._value, list):
            return self._value
        # A single object behaves like a one-element array.
        return [self._value]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonNode):
            return self._value == other._value
        return self._value == other

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return json.dumps(self._value, separators=(",", ":"))

    def __repr__(self) -> str:
        return f"<JsonNode {self}>"
