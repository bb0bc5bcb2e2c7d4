"""
Pytest configuration and fixtures for font data extractor tests.
"""

import os
import tempfile

# Keep module log files out of the working tree; must run before any project import
os.environ.setdefault("FONT_EXTRACTOR_LOG_DIR", tempfile.mkdtemp(prefix="font-extractor-logs-"))

import pytest

from models.config import RunConfig, parse_field_names
from models.fonts import FontData, UsageRecord


class ExplodingDocument(dict):
    """Document whose fields cannot be enumerated."""

    def items(self):
        raise RuntimeError("boom")


@pytest.fixture
def run_config():
    """Default run configuration."""
    return RunConfig()


@pytest.fixture
def scan_all_config():
    """Run configuration that scans every string field."""
    return RunConfig(target_field_names=parse_field_names(""))


@pytest.fixture
def make_font():
    """Factory for FontData with a given number of usages."""
    def _make_font(family, usages=1, document_id="doc-1", document_type="post", **properties):
        records = [
            UsageRecord(document_id=document_id, document_type=document_type,
                        field_path=f"title[{i}]", content=f"usage {i}")
            for i in range(usages)
        ]
        return FontData(font_family=family, usage=records, **properties)
    return _make_font


@pytest.fixture
def sample_documents():
    """Small batch mixing inline styles, classes and rich text."""
    return [
        {
            "_id": "post-1",
            "_type": "post",
            "title": '<span style="font-family: Arial; font-size: 12px">Welcome</span>',
            "body": [
                {
                    "_type": "block",
                    "_key": "a1",
                    "style": "h1",
                    "children": [{"_type": "span", "text": "Intro", "marks": []}],
                },
                {
                    "_type": "block",
                    "_key": "a2",
                    "style": "normal",
                    "children": [
                        {"_type": "span", "text": "Plain "},
                        {"_type": "span", "text": "bold", "marks": ["strong"]},
                    ],
                },
            ],
        },
        {
            "_id": "page-1",
            "_type": "page",
            "heading": '<h2 class="font-georgia text-2xl">About</h2>',
            "description": '<p style="font-family: Arial; font-size: 12px">Team</p>',
            "slug": {"_type": "slug", "current": "about"},
            "views": 42,
            "published": True,
            "subtitle": None,
        },
    ]


@pytest.fixture
def exploding_document():
    """Document that raises as soon as its fields are traversed."""
    return ExplodingDocument(_id="broken-1", _type="post", title="x")
