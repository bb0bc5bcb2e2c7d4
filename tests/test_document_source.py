"""Tests for document sources."""

import json

import pytest

from models.config import DocumentQuery
from utils.document_source import InMemoryDocumentSource, JsonDocumentSource
from utils.exceptions import DocumentSourceError

DOCUMENTS = [
    {"_id": "a", "_type": "post", "title": "Typography News"},
    {"_id": "b", "_type": "page", "name": "About the news desk"},
    {"_id": "c", "_type": "post", "title": "Release notes"},
    {"_id": "d", "title": "No type"},
]


class TestInMemoryDocumentSource:
    """Test InMemoryDocumentSource class."""

    def test_documents_without_type_are_excluded(self):
        documents = InMemoryDocumentSource(DOCUMENTS).fetch(DocumentQuery())

        assert [doc["_id"] for doc in documents] == ["a", "b", "c"]

    def test_type_filter(self):
        documents = InMemoryDocumentSource(DOCUMENTS).fetch(DocumentQuery(document_type="post"))

        assert [doc["_id"] for doc in documents] == ["a", "c"]

    def test_search_matches_title_or_name(self):
        documents = InMemoryDocumentSource(DOCUMENTS).fetch(DocumentQuery(search="NEWS"))

        assert [doc["_id"] for doc in documents] == ["a", "b"]

    def test_limit(self):
        documents = InMemoryDocumentSource(DOCUMENTS).fetch(DocumentQuery(limit=2))

        assert len(documents) == 2

    def test_custom_query_is_rejected(self):
        with pytest.raises(DocumentSourceError):
            InMemoryDocumentSource(DOCUMENTS).fetch(DocumentQuery(custom_query="*[]"))


class TestJsonDocumentSource:
    """Test JsonDocumentSource class."""

    def test_json_array(self, tmp_path):
        path = tmp_path / "docs.json"
        path.write_text(json.dumps(DOCUMENTS), encoding="utf-8")

        documents = JsonDocumentSource(path).fetch(DocumentQuery())

        assert len(documents) == 3

    def test_wrapped_export(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"result": DOCUMENTS[:2]}), encoding="utf-8")

        documents = JsonDocumentSource(path).fetch(DocumentQuery())

        assert [doc["_id"] for doc in documents] == ["a", "b"]

    def test_newline_delimited(self, tmp_path):
        path = tmp_path / "export.ndjson"
        path.write_text("\n".join(json.dumps(doc) for doc in DOCUMENTS) + "\n", encoding="utf-8")

        documents = JsonDocumentSource(path).fetch(DocumentQuery(document_type="page"))

        assert [doc["_id"] for doc in documents] == ["b"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentSourceError):
            JsonDocumentSource(tmp_path / "missing.json").fetch(DocumentQuery())

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"_id": "a"}\n{broken\n', encoding="utf-8")

        with pytest.raises(DocumentSourceError, match="line 2"):
            JsonDocumentSource(path).fetch(DocumentQuery())

    def test_scalar_content(self, tmp_path):
        path = tmp_path / "scalar.json"
        path.write_text("42", encoding="utf-8")

        with pytest.raises(DocumentSourceError):
            JsonDocumentSource(path).fetch(DocumentQuery())

    def test_fetch_logs_the_rendered_query(self, tmp_path, caplog):
        path = tmp_path / "docs.json"
        path.write_text(json.dumps(DOCUMENTS), encoding="utf-8")

        with caplog.at_level("INFO", logger="utils.document_source"):
            JsonDocumentSource(path).fetch(DocumentQuery(document_type="page", limit=5))

        assert '*[_type == "page"][0...5]' in caplog.text
        assert "Fetched 1 of 4 documents" in caplog.text
