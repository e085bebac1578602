"""Tests for unibody.mapper module."""

import json

import pytest
from unibody.mapper import JsonObjectMapper


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Tags:
    def __init__(self, items):
        self.items = items


class TestJsonObjectMapper:
    """Tests for JsonObjectMapper."""

    def test_object_to_keyword_arguments(self):
        """Test objects are passed as keyword arguments."""
        point = JsonObjectMapper().read_value('{"x": 1, "y": 2}', Point)
        assert (point.x, point.y) == (1, 2)

    def test_array_to_positional_argument(self):
        """Test non-object payloads are passed positionally."""
        tags = JsonObjectMapper().read_value('["a", "b"]', Tags)
        assert tags.items == ["a", "b"]

    @pytest.mark.parametrize("target", [dict, list, object])
    def test_container_targets_return_payload(self, target):
        """Test plain container targets get the parsed payload."""
        assert JsonObjectMapper().read_value('{"a": 1}', target) == {"a": 1}

    def test_custom_loads(self, mocker):
        """Test a custom loads function is used."""
        loads = mocker.Mock(return_value={"x": 3, "y": 4})
        point = JsonObjectMapper(loads=loads).read_value("ignored", Point)
        loads.assert_called_once_with("ignored")
        assert point.x == 3

    def test_invalid_json_raises(self):
        """Test invalid JSON raises JSONDecodeError."""
        with pytest.raises(json.JSONDecodeError):
            JsonObjectMapper().read_value("nope", dict)
