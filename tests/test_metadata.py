"""Tests for metadata field selection."""

from domain.rag.retrieval.metadata import parse_metadata_fields, project_metadata


class TestParseMetadataFields:
    def test_splits_and_trims(self):
        assert parse_metadata_fields("title, url ,text") == ["title", "url", "text"]

    def test_unset_means_no_allowlist(self):
        assert parse_metadata_fields(None) is None
        assert parse_metadata_fields("") is None

    def test_drops_empty_entries(self):
        assert parse_metadata_fields("a,,b, ") == ["a", "b"]
        assert parse_metadata_fields(" , ") is None


class TestProjectMetadata:
    def test_restricts_to_allowlisted_keys(self):
        assert project_metadata({"a": 1, "b": 2, "c": 3}, ["a", "b"]) == {"a": 1, "b": 2}

    def test_missing_key_maps_to_none(self):
        assert project_metadata({"a": 1, "c": 3}, ["a", "b"]) == {"a": 1, "b": None}

    def test_falsy_values_are_kept(self):
        assert project_metadata({"a": 0, "b": ""}, ["a", "b"]) == {"a": 0, "b": ""}

    def test_without_allowlist_passes_through(self):
        metadata = {"a": 1, "nested": {"x": [1, 2]}}

        assert project_metadata(metadata) == metadata
        assert project_metadata(metadata, None) is metadata
