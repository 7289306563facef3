"""Test configuration and fixtures."""

import json

import httpx
import pytest

from beluga_reader.client.feed_client import FeedClient
from beluga_reader.models.document import Document
from beluga_reader.utils.http_client import create_http_client


@pytest.fixture
def sample_feed_dict():
    """Sample beluga.json content with every field populated."""
    return {
        "home_page_url": "https://example.test",
        "authors": [
            {"name": "Alice", "avatar": "https://example.test/alice.png"},
            {"name": "Bob", "avatar": "https://example.test/bob.png"},
        ],
        "posts": [
            {
                "id": "post-2",
                "url": "https://example.test/posts/2",
                "content_text": "Second post",
                "content_html": "<p>Second post</p>",
                "date_published": "2025-03-02T09:30:00+00:00",
                "date_modified": "2025-03-03T10:00:00+00:00",
                "attachments": [
                    {
                        "id": "att-b",
                        "hash_digest": "sha256:bbbb",
                        "link_title": "photo.jpg",
                        "link_url": "https://example.test/files/photo.jpg",
                        "index": 1,
                    },
                    {
                        "id": "att-a",
                        "hash_digest": "sha256:aaaa",
                        "link_title": "notes.txt",
                        "link_url": "https://example.test/files/notes.txt",
                        "index": 0,
                    },
                ],
            },
            {
                "id": "post-1",
                "url": "https://example.test/posts/1",
                "content_text": "First post",
                "content_html": "<p>First post</p>",
                "date_published": "2025-03-01T08:00:00+02:00",
                "date_modified": None,
                "attachments": [],
            },
        ],
    }


@pytest.fixture
def sample_feed_body(sample_feed_dict):
    """Sample beluga.json body as bytes."""
    return json.dumps(sample_feed_dict).encode()


@pytest.fixture
def sample_document(sample_feed_dict):
    """Sample feed decoded into a Document."""
    return Document.model_validate(sample_feed_dict)


@pytest.fixture
def make_feed_client():
    """Build a FeedClient whose requests are answered by a handler.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx error to simulate a transport failure).
    """

    def factory(handler):
        http_client = create_http_client(transport=httpx.MockTransport(handler))
        return FeedClient(http_client)

    return factory
