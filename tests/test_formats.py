"""Tests for the format table."""

import pytest

from flask_rest_plugin import (
    DEFAULT_CONTENT_TYPES,
    FormatSpec,
    FormatTable,
    RestSettings,
    UnsupportedFormatError,
)
from flask_rest_plugin.serializers import DumperSerializer, JSONSerializer, YAMLSerializer


class TestDefaultTable:
    """Test the built-in format table."""

    def test_known_tokens(self):
        table = FormatTable()
        assert set(table) == {"json", "yml", "yaml", "dump"}
        assert len(table) == 4

    def test_content_types(self):
        table = FormatTable()
        assert table["json"].content_type == "application/json"
        assert table["yml"].content_type == "text/x-yaml"
        assert table["yaml"].content_type == "text/x-yaml"
        assert table["dump"].content_type == "text/x-data-dumper"

    def test_serializers(self):
        table = FormatTable()
        assert isinstance(table.serializer_for("json"), JSONSerializer)
        assert isinstance(table.serializer_for("yml"), YAMLSerializer)
        assert isinstance(table.serializer_for("dump"), DumperSerializer)

    def test_entries_are_format_specs(self):
        assert FormatTable()["json"] == FormatSpec("json", "application/json", "JSON")

    def test_defaults_are_not_mutated_by_tables(self):
        FormatTable.from_settings(RestSettings(content_types={"xml": "text/xml"}))
        assert "xml" not in DEFAULT_CONTENT_TYPES


class TestResolve:
    """Test format token resolution."""

    def test_resolve_known_token(self):
        spec = FormatTable().resolve("yml")
        assert spec.token == "yml"
        assert spec.serializer_id == "YAML"

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_resolves_to_none(self, token):
        assert FormatTable().resolve(token) is None

    def test_unknown_token_raises(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            FormatTable().resolve("xml")
        assert exc_info.value.token == "xml"
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Unsupported format: xml"

    def test_unknown_token_carries_configured_status(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            FormatTable().resolve("xml", status_code=406)
        assert exc_info.value.status_code == 406

    def test_tokens_are_case_sensitive(self):
        with pytest.raises(UnsupportedFormatError):
            FormatTable().resolve("JSON")


class TestOverrides:
    """Test configuration overrides, which take precedence over the defaults."""

    def test_content_type_override(self):
        settings = RestSettings(content_types={"json": "application/vnd.api+json"})
        table = FormatTable.from_settings(settings)
        assert table["json"].content_type == "application/vnd.api+json"
        assert table["json"].serializer_id == "JSON"

    def test_new_token_defaults_to_json_serializer(self):
        settings = RestSettings(content_types={"xml": "text/xml"})
        table = FormatTable.from_settings(settings)
        assert table["xml"] == FormatSpec("xml", "text/xml", "JSON")
        assert "json" in table

    def test_serializer_override(self):
        settings = RestSettings(serializers={"json": "YAML"})
        table = FormatTable.from_settings(settings)
        assert table["json"].content_type == "application/json"
        assert isinstance(table.serializer_for("json"), YAMLSerializer)

    def test_serializer_override_for_new_token(self):
        settings = RestSettings(serializers={"txt": "Dumper"})
        table = FormatTable.from_settings(settings)
        assert table["txt"].content_type == "text/x-data-dumper"

    def test_content_types_are_lowercased(self):
        table = FormatTable({"csv": "Text/CSV"}, {})
        assert table["csv"].content_type == "text/csv"

    def test_overrides_are_logged(self, caplog):
        settings = RestSettings(content_types={"xml": "text/xml"})
        with caplog.at_level("INFO", logger="flask_rest_plugin.formats"):
            FormatTable.from_settings(settings)
        assert 'loading content type "text/xml" for format "xml" from config' in caplog.text


class TestContentTypeLookup:
    """Test reverse lookup from a Content-Type header."""

    def test_matches_media_type(self):
        assert FormatTable().for_content_type("application/json").token == "json"

    def test_ignores_parameters_and_case(self):
        assert FormatTable().for_content_type("Text/X-YAML; charset=utf-8").serializer_id == "YAML"

    @pytest.mark.parametrize("content_type", [None, "", "text/csv"])
    def test_no_match(self, content_type):
        assert FormatTable().for_content_type(content_type) is None
