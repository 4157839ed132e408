"""
Tests for the base models and utility classes.
"""

from pydantic import Field

from jira_sdk.models.base import ApiModel, TimestampMixin
from jira_sdk.models.constants import EMPTY_STRING


class SampleModel(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    display_name: str | None = None
    start_at: int | None = None
    key: str | None = None


class TestApiModel:
    """Tests for the ApiModel base class."""

    def test_from_api_response_reads_camel_case(self):
        model = SampleModel.from_api_response(
            {"self": "https://x/1", "displayName": "Mia", "startAt": 5}
        )

        assert model.self_url == "https://x/1"
        assert model.display_name == "Mia"
        assert model.start_at == 5

    def test_from_api_response_empty(self):
        """Test that empty or non-dictionary data gives a default instance."""
        assert SampleModel.from_api_response({}) == SampleModel()
        assert SampleModel.from_api_response(None) == SampleModel()
        assert SampleModel.from_api_response(["not", "a", "dict"]) == SampleModel()

    def test_unknown_fields_are_kept(self):
        model = SampleModel.from_api_response({"displayName": "Mia", "newField": 1})

        assert model.model_extra == {"newField": 1}

    def test_numbers_coerced_to_strings(self):
        model = SampleModel.from_api_response({"key": 10000})

        assert model.key == "10000"

    def test_populate_by_field_name(self):
        model = SampleModel(display_name="Mia", start_at=0)

        assert model.display_name == "Mia"
        assert model.start_at == 0

    def test_to_api_payload(self):
        """Test that payloads use the wire names and skip unset values."""
        model = SampleModel(self_url="https://x/1", display_name="Mia")

        assert model.to_api_payload() == {"self": "https://x/1", "displayName": "Mia"}

    def test_to_api_payload_keeps_falsy_values(self):
        model = SampleModel(start_at=0, key="")

        assert model.to_api_payload() == {"startAt": 0, "key": ""}

    def test_to_simplified_dict(self):
        """Test that to_simplified_dict returns a dictionary with non-None values."""
        model = SampleModel(display_name="Mia", start_at=3)

        result = model.to_simplified_dict()

        assert result == {"display_name": "Mia", "start_at": 3}


class TestTimestampMixin:
    """Tests for the TimestampMixin utility class."""

    def test_format_timestamp_valid(self):
        """Test formatting a valid ISO 8601 timestamp."""
        formatter = TimestampMixin()

        result = formatter.format_timestamp("2024-01-01T12:34:56.789+0000")

        assert result == "2024-01-01 12:34:56"

    def test_format_timestamp_with_z(self):
        """Test formatting a timestamp with Z (UTC) timezone."""
        result = TimestampMixin.format_timestamp("2024-01-01T12:34:56.789Z")

        assert result == "2024-01-01 12:34:56"

    def test_format_timestamp_negative_offset(self):
        result = TimestampMixin.format_timestamp("2024-01-01T12:34:56.789-0500")

        assert result == "2024-01-01 12:34:56"

    def test_format_timestamp_none(self):
        """Test formatting a None timestamp."""
        assert TimestampMixin.format_timestamp(None) == EMPTY_STRING

    def test_format_timestamp_invalid(self):
        """Test formatting an invalid timestamp string."""
        assert TimestampMixin.format_timestamp("not-a-timestamp") == "not-a-timestamp"

    def test_is_valid_timestamp(self):
        """Test validating timestamp strings."""
        assert TimestampMixin.is_valid_timestamp("2024-01-01T12:34:56.789+0000") is True
        assert TimestampMixin.is_valid_timestamp("2024-01-01T12:34:56.789Z") is True
        assert TimestampMixin.is_valid_timestamp(None) is False
        assert TimestampMixin.is_valid_timestamp("") is False
        assert TimestampMixin.is_valid_timestamp("not-a-timestamp") is False
