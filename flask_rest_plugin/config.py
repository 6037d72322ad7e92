"""
Plugin settings read from the host application's configuration.
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError
from .serializers import SERIALIZERS

CONFIG_PREFIX = "REST_"


class RestSettings(BaseModel):
    """Validated REST plugin settings.

    Built from the ``REST_*`` keys of a Flask config mapping:

        REST_CONTENT_TYPES = {"xml": "text/xml"}
        REST_SERIALIZERS = {"xml": "JSON"}
        REST_UNSUPPORTED_FORMAT_STATUS = 406
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    content_types: Dict[str, str] = Field(
        default_factory=dict,
        description="Format token to content type overrides",
    )

    serializers: Dict[str, str] = Field(
        default_factory=dict,
        description="Format token to serializer id overrides",
    )

    unsupported_format_status: int = Field(
        404,
        ge=400,
        le=599,
        description="Status code returned when a request asks for an unknown format",
    )

    @field_validator("content_types")
    @classmethod
    def _check_content_types(cls, value: Dict[str, str]) -> Dict[str, str]:
        for token, content_type in value.items():
            if not token:
                raise ValueError("format tokens must not be empty")
            if "/" not in content_type:
                raise ValueError(f"'{content_type}' is not a content type")
        return {token: content_type.lower() for token, content_type in value.items()}

    @field_validator("serializers")
    @classmethod
    def _check_serializers(cls, value: Dict[str, str]) -> Dict[str, str]:
        for token, serializer_id in value.items():
            if serializer_id not in SERIALIZERS:
                raise ValueError(
                    f"unknown serializer '{serializer_id}' for format '{token}', "
                    f"expected one of {sorted(SERIALIZERS)}"
                )
        return value

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "RestSettings":
        """Build settings from a config mapping, keeping only ``REST_`` keys."""
        values = {
            key[len(CONFIG_PREFIX):].lower(): value
            for key, value in config.items()
            if key.startswith(CONFIG_PREFIX) and value is not None
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid REST plugin configuration: {e}") from e
