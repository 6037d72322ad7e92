"""
Format table: maps a URL format suffix to a content type and a serializer.
"""

import logging
from typing import Dict, Iterator, Mapping, Optional

from .config import RestSettings
from .exceptions import UnsupportedFormatError
from .models import FormatSpec
from .serializers import Serializer, get_serializer

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPES: Dict[str, str] = {
    "json": "application/json",
    "yml": "text/x-yaml",
    "yaml": "text/x-yaml",
    "dump": "text/x-data-dumper",
}

DEFAULT_SERIALIZERS: Dict[str, str] = {
    "json": "JSON",
    "yml": "YAML",
    "yaml": "YAML",
    "dump": "Dumper",
}

# Used for tokens that only appear in a content type override.
FALLBACK_SERIALIZER = "JSON"


class FormatTable(Mapping[str, FormatSpec]):
    """Read-only mapping from format token to :class:`FormatSpec`."""

    def __init__(
        self,
        content_types: Optional[Mapping[str, str]] = None,
        serializers: Optional[Mapping[str, str]] = None,
    ):
        content_types = dict(DEFAULT_CONTENT_TYPES if content_types is None else content_types)
        serializers = dict(DEFAULT_SERIALIZERS if serializers is None else serializers)

        self._specs: Dict[str, FormatSpec] = {}
        self._serializers: Dict[str, Serializer] = {}
        for token, content_type in content_types.items():
            serializer_id = serializers.get(token, FALLBACK_SERIALIZER)
            self._specs[token] = FormatSpec(token, content_type.lower(), serializer_id)
            self._serializers[token] = get_serializer(serializer_id)

    @classmethod
    def from_settings(cls, settings: RestSettings) -> "FormatTable":
        """Build the table from the defaults, with configured values taking precedence."""
        content_types = dict(DEFAULT_CONTENT_TYPES)
        for token, content_type in settings.content_types.items():
            logger.info(f'loading content type "{content_type}" for format "{token}" from config')
            content_types[token] = content_type

        serializers = dict(DEFAULT_SERIALIZERS)
        for token, serializer_id in settings.serializers.items():
            logger.info(f'loading serializer "{serializer_id}" for format "{token}" from config')
            serializers[token] = serializer_id
            # A serializer override alone still makes the token known.
            content_types.setdefault(token, get_serializer(serializer_id).media_type)

        return cls(content_types, serializers)

    def __getitem__(self, token: str) -> FormatSpec:
        return self._specs[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def resolve(self, token: Optional[str], status_code: int = 404) -> Optional[FormatSpec]:
        """Look up a format token.

        Returns None when no token was given; raises UnsupportedFormatError
        when the token is not in the table.
        """
        if not token:
            return None
        spec = self._specs.get(token)
        if spec is None:
            raise UnsupportedFormatError(token, status_code)
        return spec

    def serializer_for(self, token: str) -> Serializer:
        """Return the serializer bound to a known format token."""
        return self._serializers[token]

    def for_content_type(self, content_type: Optional[str]) -> Optional[FormatSpec]:
        """Find the first entry whose content type matches a Content-Type header value."""
        if not content_type:
            return None
        media_type = content_type.split(";")[0].strip().lower()
        for spec in self._specs.values():
            if spec.content_type == media_type:
                return spec
        return None
