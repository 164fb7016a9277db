"""
Tests for the gallery command group.
"""

import json

import pytest

from showcase.cli.showcase_cli import app


@pytest.fixture
def many_gallery_items(backend):
    backend.collections["gallery"] = [
        {
            "_id": f"x{n}",
            "title": f"Still {n}",
            "category": "events",
            "section": "gallery",
            "year": "2024",
            "image": f"x{n}.png",
        }
        for n in range(25)
    ]


class TestGalleryCommands:
    def test_list_with_filters(self, runner, cli_env, backend):
        result = runner.invoke(app, ["gallery", "list", "--category", "Awards"])

        assert result.exit_code == 0, result.output
        request = backend.requests_for("GET", "/api/gallery")[0]
        assert request.url.params["category"] == "awards"
        assert "Award" in result.output
        assert "Page 1/1 - 1 item(s) in total" in result.output

    def test_list_empty(self, runner, cli_env, backend):
        backend.collections["gallery"] = []

        result = runner.invoke(app, ["gallery", "list"])

        assert result.exit_code == 0, result.output
        assert "No gallery found" in result.output

    def test_add_with_invalid_category(self, runner, cli_env, backend, image_file):
        result = runner.invoke(
            app, ["gallery", "add", "--title", "x", "--image", image_file, "--category", "foo"]
        )

        assert result.exit_code == 1
        assert "Invalid category" in result.output
        assert backend.requests_for("POST", "/api/gallery") == []

    def test_add(self, runner, cli_env, backend, image_file):
        result = runner.invoke(
            app,
            ["gallery", "add", "--title", "Premiere", "--image", image_file, "--category", "Events"],
        )

        assert result.exit_code == 0, result.output
        post = backend.requests_for("POST", "/api/gallery")[0]
        assert b'name="category"\r\n\r\nevents\r\n' in post.content
        assert b'name="section"\r\n\r\ngallery\r\n' in post.content
        assert b'filename="still.png"' in post.content

    def test_update_merges_existing_fields(self, runner, cli_env, backend):
        result = runner.invoke(app, ["gallery", "update", "g2", "--section", "Home"])

        assert result.exit_code == 0, result.output
        body = json.loads(backend.requests_for("PUT", "/api/gallery/g2")[0].content)
        assert body["section"] == "home"
        assert body["category"] == "awards"
        assert body["title"] == "Award"
        assert "completed" not in body

    def test_update_finds_item_on_a_later_page(self, runner, cli_env, backend, many_gallery_items):
        result = runner.invoke(app, ["gallery", "update", "x24", "--title", "Last still"])

        assert result.exit_code == 0, result.output
        pages = [r.url.params["page"] for r in backend.requests_for("GET", "/api/gallery")]
        assert pages == ["1", "2"]
        body = json.loads(backend.requests_for("PUT", "/api/gallery/x24")[0].content)
        assert body["title"] == "Last still"
        assert body["category"] == "events"

    def test_update_unknown_item_checks_every_page(
        self, runner, cli_env, backend, many_gallery_items
    ):
        result = runner.invoke(app, ["gallery", "update", "nope", "--title", "x"])

        assert result.exit_code == 1
        pages = [r.url.params["page"] for r in backend.requests_for("GET", "/api/gallery")]
        assert pages == ["1", "2"]
        assert backend.requests_for("PUT", "/api/gallery/nope") == []

    def test_delete_missing_item(self, runner, cli_env):
        result = runner.invoke(app, ["gallery", "delete", "nope"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete_all(self, runner, cli_env, backend):
        result = runner.invoke(app, ["gallery", "delete-all", "-y"])

        assert result.exit_code == 0, result.output
        assert backend.collections["gallery"] == []
