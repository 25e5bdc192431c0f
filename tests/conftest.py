"""Pytest fixtures for JustCMS client tests."""

import httpx
import pytest

from justcms.client import JustCMSClient
from justcms.core.config import ClientConfig


@pytest.fixture
def config():
    """Resolved config for a test project."""
    return ClientConfig(api_token="test-token", project_id="proj-123")


@pytest.fixture
def make_client(config):
    """Build a client whose requests are answered by `handler`.

    Every request sent is appended to the returned list for inspection.
    """

    def _make(handler):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return JustCMSClient(config, http_client=http_client), requests

    return _make


@pytest.fixture
def json_response():
    """Handler factory answering every request with the same JSON payload."""

    def _handler(payload, status_code=200):
        return lambda request: httpx.Response(status_code, json=payload)

    return _handler


@pytest.fixture
def image_payload():
    return {
        "alt": "Waterfall at dusk",
        "variants": [
            {
                "url": "https://cdn.justcms.co/img/falls-thumb.webp",
                "width": 320,
                "height": 180,
                "filename": "falls-thumb.webp",
            },
            {
                "url": "https://cdn.justcms.co/img/falls-large.webp",
                "width": 1920,
                "height": 1080,
                "filename": "falls-large.webp",
            },
        ],
    }


@pytest.fixture
def page_summary_payload(image_payload):
    return {
        "title": "Hello World",
        "subtitle": "Our first post",
        "coverImage": image_payload,
        "slug": "hello-world",
        "categories": [{"name": "Blog", "slug": "blog"}],
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T12:30:00.000Z",
    }


@pytest.fixture
def page_detail_payload(page_summary_payload, image_payload):
    return {
        **page_summary_payload,
        "meta": {"title": "Hello World | Blog", "description": "Our very first post"},
        "content": [
            {
                "type": "header",
                "styles": ["Hero"],
                "header": "Hello",
                "subheader": None,
                "size": "h1",
            },
            {"type": "text", "styles": [], "text": "<p>Welcome</p>"},
            {
                "type": "list",
                "styles": ["Checklist"],
                "options": [{"title": "First"}, {"title": "Second", "subtitle": "more"}],
            },
            {"type": "embed", "styles": [], "url": "https://www.youtube.com/watch?v=abc"},
            {"type": "image", "styles": ["Gallery"], "images": [image_payload]},
            {"type": "code", "styles": [], "code": "print('hi')"},
            {
                "type": "cta",
                "styles": ["Primary"],
                "text": "Sign up",
                "url": "/signup",
                "description": None,
            },
            {
                "type": "custom",
                "styles": [],
                "blockId": "pricing-table",
                "plans": ["free", "pro"],
                "highlighted": "pro",
            },
        ],
    }


@pytest.fixture
def menu_payload():
    return {
        "id": "main",
        "name": "Main menu",
        "items": [
            {
                "title": "Docs",
                "icon": "book",
                "url": "/docs",
                "styles": [],
                "children": [
                    {
                        "title": "Guides",
                        "subtitle": "Step by step",
                        "icon": "",
                        "url": "/docs/guides",
                        "styles": ["Bold"],
                        "children": [
                            {
                                "title": "Install",
                                "icon": "",
                                "url": "/docs/guides/install",
                                "styles": [],
                                "children": [],
                            }
                        ],
                    }
                ],
            },
            {"title": "Blog", "icon": "pen", "url": "/blog", "styles": [], "children": []},
        ],
    }


@pytest.fixture
def layout_payload():
    return {
        "id": "footer",
        "name": "Footer",
        "items": [
            {
                "label": "Copyright",
                "description": "Footer notice",
                "uid": "copyright",
                "type": "text",
                "value": "(c) 2024 Example",
            },
            {
                "label": "Show newsletter",
                "description": "",
                "uid": "show_newsletter",
                "type": "boolean",
                "value": True,
            },
        ],
    }
