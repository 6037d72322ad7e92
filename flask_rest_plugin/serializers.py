"""
Serializers for the formats selectable through a URL suffix.
"""

import ast
import json
import pprint
from typing import Any, Dict, Tuple, Type

import yaml


class Serializer:
    """Base class for serializers."""

    # Exceptions deserialize() raises on malformed input.
    decode_errors: Tuple[Type[Exception], ...] = (ValueError,)

    def __init__(self, media_type: str):
        self.media_type = media_type

    def serialize(self, data: Any) -> str:
        """Serialize the data for this media type."""
        raise NotImplementedError

    def deserialize(self, text: str) -> Any:
        """Decode a request body written in this media type."""
        raise NotImplementedError

    def to_primitive(self, data: Any) -> Any:
        """Convert Pydantic models to plain, JSON-compatible data structures."""
        if hasattr(data, "model_dump"):
            # Single Pydantic model
            return data.model_dump(mode="json")
        elif isinstance(data, list):
            return [self.to_primitive(item) for item in data]
        elif isinstance(data, tuple):
            return [self.to_primitive(item) for item in data]
        elif isinstance(data, dict):
            return {key: self.to_primitive(value) for key, value in data.items()}
        else:
            return data


class JSONSerializer(Serializer):
    """JSON serializer."""

    def __init__(self):
        super().__init__("application/json")

    def serialize(self, data: Any) -> str:
        return json.dumps(self.to_primitive(data))

    def deserialize(self, text: str) -> Any:
        return json.loads(text)


class YAMLSerializer(Serializer):
    """YAML serializer backed by PyYAML's safe dumper and loader."""

    decode_errors = (yaml.YAMLError,)

    def __init__(self):
        super().__init__("text/x-yaml")

    def serialize(self, data: Any) -> str:
        return yaml.safe_dump(
            self.to_primitive(data),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def deserialize(self, text: str) -> Any:
        return yaml.safe_load(text)


class DumperSerializer(Serializer):
    """Dumps data as a Python literal.

    Reading only accepts literals, never arbitrary expressions.
    """

    decode_errors = (ValueError, SyntaxError, TypeError)

    def __init__(self):
        super().__init__("text/x-data-dumper")

    def serialize(self, data: Any) -> str:
        return pprint.pformat(self.to_primitive(data)) + "\n"

    def deserialize(self, text: str) -> Any:
        return ast.literal_eval(text.strip())


SERIALIZERS: Dict[str, Type[Serializer]] = {
    "JSON": JSONSerializer,
    "YAML": YAMLSerializer,
    "Dumper": DumperSerializer,
}


def get_serializer(serializer_id: str) -> Serializer:
    """Instantiate the serializer registered under ``serializer_id``."""
    try:
        serializer_class = SERIALIZERS[serializer_id]
    except KeyError:
        raise KeyError(f"Unknown serializer '{serializer_id}', expected one of {sorted(SERIALIZERS)}") from None
    return serializer_class()
