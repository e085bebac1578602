from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Protocol


class ObjectMapper(Protocol):
    """Turns a decoded body string into an instance of ``target``."""

    def read_value(self, value: str, target: Any) -> Any: ...


class JsonObjectMapper:
    """
    JSON object mapper.

    Objects are passed to ``target`` as keyword arguments, any other
    payload as a single positional argument. ``dict``, ``list`` and
    ``object`` targets get the parsed payload as is.
    """

    def __init__(self, loads: Callable[[str], Any] = json.loads) -> None:
        self.loads = loads

    def read_value(self, value: str, target: Any) -> Any:
        payload = self.loads(value)
        if target in (dict, list, object):
            return payload
        if isinstance(payload, dict):
            return target(**payload)
        return target(payload)
