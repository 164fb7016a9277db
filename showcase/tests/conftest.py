import json
import math
from urllib.parse import parse_qs

import httpx
import pytest
import pytest_asyncio

from showcase.client.http import HttpClient
from showcase.client.token_store import MemoryTokenStore
from showcase.models.models.cli import ClientConfig

API_BASE_URL = "http://api.test"

# Smallest valid PNG header plus padding; content is never decoded.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class FakeBackend:
    """
    In-memory stand-in for the portfolio REST API, served through httpx.MockTransport.

    ``fail_gets`` makes the next N GET requests fail at the transport level.
    With ``echo_updates`` off, PUT answers without the updated record.
    """

    def __init__(self, projects=None, gallery=None):
        self.collections = {
            "projects": [dict(item) for item in (projects or [])],
            "gallery": [dict(item) for item in (gallery or [])],
        }
        self.requests: list[httpx.Request] = []
        self.fail_gets = 0
        self.status_overrides: dict[tuple[str, str], int] = {}
        self.echo_updates = True
        self._next_id = 100

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        method = request.method
        path = request.url.path

        if (method, path) in self.status_overrides:
            status = self.status_overrides[(method, path)]
            return httpx.Response(status, json={"success": False, "message": f"status {status}"})

        if method == "GET" and self.fail_gets > 0:
            self.fail_gets -= 1
            raise httpx.ConnectError("backend unreachable", request=request)

        if path == "/api/health":
            return httpx.Response(200, json={"status": "ok"})
        if path == "/api/contact" and method == "POST":
            return httpx.Response(200, json={"success": True, "message": "Message sent"})

        parts = path.strip("/").split("/")
        if len(parts) < 2 or parts[0] != "api" or parts[1] not in self.collections:
            return httpx.Response(404, json={"message": "Route not found"})
        name = parts[1]
        items = self.collections[name]
        record_id = parts[2] if len(parts) > 2 else None

        if method == "GET" and record_id is None:
            return self._list(name, items, request)
        if method == "POST" and record_id is None:
            return self._create(name, items, request)
        if method == "DELETE" and record_id == "all":
            items.clear()
            return httpx.Response(200, json={"success": True, "message": "All deleted"})
        if method == "DELETE":
            for index, item in enumerate(items):
                if item["_id"] == record_id:
                    del items[index]
                    return httpx.Response(200, json={"success": True, "message": "Deleted"})
            return httpx.Response(404, json={"success": False, "message": "Item not found"})
        if method == "PUT":
            return self._update(items, record_id, request)
        return httpx.Response(405)

    def _list(self, name, items, request):
        if name == "projects":
            return httpx.Response(200, json=items)
        params = {key: values[0] for key, values in parse_qs(request.url.query.decode()).items()}
        selected = [
            item
            for item in items
            if all(
                str(item.get(key)) == params[key]
                for key in ("category", "section", "year")
                if key in params
            )
        ]
        page = int(params.get("page", 1))
        limit = int(params.get("limit", 20))
        start = (page - 1) * limit
        return httpx.Response(
            200,
            json={
                "success": True,
                "data": selected[start : start + limit],
                "page": page,
                "limit": limit,
                "total": len(selected),
                "pages": max(math.ceil(len(selected) / limit), 1),
            },
        )

    def _create(self, name, items, request):
        self._next_id += 1
        record = {
            "_id": f"new-{self._next_id}",
            "title": "Created",
            "category": "events" if name == "gallery" else "Feature Film",
            "section": "home" if name == "gallery" else "Banner",
            "year": "2025",
            "image": f"uploads/new-{self._next_id}.png",
        }
        items.insert(0, record)
        if name == "projects":
            return httpx.Response(201, json=record)
        return httpx.Response(201, json={"success": True, "data": record})

    def _update(self, items, record_id, request):
        for item in items:
            if item["_id"] == record_id:
                content_type = request.headers.get("content-type", "")
                if content_type.startswith("application/json"):
                    item.update(json.loads(request.content))
                elif content_type.startswith("multipart/form-data"):
                    item["image"] = f"uploads/{record_id}-replaced.png"
                if not self.echo_updates:
                    return httpx.Response(200, json={"success": True, "message": "Updated"})
                return httpx.Response(200, json={"success": True, "data": item})
        return httpx.Response(404, json={"success": False, "message": "Item not found"})

    def requests_for(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


@pytest.fixture
def client_config():
    return ClientConfig(api_base_url=API_BASE_URL)


@pytest.fixture
def sample_projects():
    return [
        {
            "_id": "p1",
            "title": "Timepass 2025",
            "description": "Upcoming project",
            "category": "Feature Film",
            "section": "Banner",
            "completed": False,
            "year": "2025",
            "image": "/uploads/timepass.webp",
        },
        {
            "_id": "p2",
            "title": "Project One",
            "category": "Short Film",
            "section": "Featured",
            "completed": True,
            "year": "2024",
            "image": "https://cdn.example.org/project1.webp",
        },
    ]


@pytest.fixture
def sample_gallery():
    return [
        {
            "_id": "g1",
            "title": "Premiere night",
            "category": "events",
            "section": "home",
            "year": "2024",
            "image": "uploads/premiere.jpg",
        },
        {
            "_id": "g2",
            "title": "Award",
            "category": "awards",
            "section": "gallery",
            "year": "2023",
            "image": "award.png",
        },
    ]


@pytest.fixture
def backend(sample_projects, sample_gallery):
    return FakeBackend(projects=sample_projects, gallery=sample_gallery)


@pytest.fixture
def token_store():
    return MemoryTokenStore("test-token")


@pytest_asyncio.fixture
async def http_client(client_config, backend, token_store):
    client = HttpClient(
        client_config, token_store=token_store, transport=httpx.MockTransport(backend)
    )
    yield client
    await client.aclose()


@pytest.fixture
def png_bytes():
    return PNG_BYTES
