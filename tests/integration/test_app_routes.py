"""
Integration tests for the assembled showcase application.

Exercises every route through create_app() including:
- Blueprint registration and route groups
- Middleware (request logging, group tagging)
- Error handlers
- Static files and templates
- Application lifecycle hooks
"""

import logging

import pytest

from common.middleware.group_middleware import ROUTE_GROUP_HEADER
from common.middleware.request_logging import RESPONSE_TIME_HEADER
from showcase.app import create_app
from tests.fixtures.upload_fixtures import SAMPLE_TEXT, create_upload


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "target"


@pytest.fixture
def app(upload_dir):
    """Create test application."""
    return create_app({"TESTING": True, "UPLOAD_DIR": upload_dir})


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


class TestConfiguration:
    """Tests for values copied into the Quart config."""

    def test_write_and_read_timeouts(self, app):
        assert app.config["RESPONSE_TIMEOUT"] == 5
        assert app.config["BODY_TIMEOUT"] == 5

    def test_overrides_applied(self, app, upload_dir):
        assert app.config["TESTING"] is True
        assert app.config["UPLOAD_DIR"] == upload_dir


class TestRoutes:
    """One request per demonstrated feature."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/", "Hello World"),
            ("/hello?name=Dion", "Hello Dion"),
            ("/hello", "Hello Guest"),
            ("/users/eko/orders/2", "Order 2 from eko"),
            ("/api/hello", "Hello World"),
            ("/web/hello", "Hello World"),
            ("/public/sample.txt", SAMPLE_TEXT),
        ],
    )
    async def test_get_routes(self, client, path, expected):
        response = await client.get(path)

        assert response.status_code == 200
        assert await response.get_data(as_text=True) == expected

    @pytest.mark.asyncio
    async def test_header_and_cookie(self, client):
        response = await client.get(
            "/req", headers={"firstname": "Eko", "Cookie": "lastname=Soegianto"}
        )

        assert await response.get_data(as_text=True) == "Hello Eko Soegianto"

    @pytest.mark.asyncio
    async def test_form(self, client):
        response = await client.post("/hi", form={"name": "Eko"})

        assert await response.get_data(as_text=True) == "Hi Eko"

    @pytest.mark.asyncio
    async def test_upload(self, client, upload_dir):
        response = await client.post("/upload", files={"file": create_upload()})

        assert response.status_code == 200
        assert await response.get_data(as_text=True) == "Upload Success"
        assert (upload_dir / "sample.txt").read_text() == SAMPLE_TEXT

    @pytest.mark.asyncio
    async def test_login(self, client):
        response = await client.post(
            "/login",
            data='{"username":"Eric","password":"rahasia"}',
            headers={"Content-Type": "application/json"},
        )

        assert await response.get_data(as_text=True) == "Hi Eric"

    @pytest.mark.asyncio
    async def test_register_json_and_form(self, client):
        json_response = await client.post(
            "/register",
            json={"username": "Eric", "password": "rahasia", "name": "Eric Kunthady"},
        )
        form_response = await client.post(
            "/register",
            form={"username": "Eric", "password": "rahasia", "name": "Eric Kunthady"},
        )

        assert await json_response.get_data(as_text=True) == "Register Success Eric"
        assert await form_response.get_data(as_text=True) == "Register Success Eric"

    @pytest.mark.asyncio
    async def test_user_json(self, client):
        response = await client.get("/user", headers={"Accept": "application/json"})

        body = await response.get_data(as_text=True)
        assert body == '{"name":"Eko Khan","username":"khan"}'

    @pytest.mark.asyncio
    async def test_download(self, client):
        response = await client.get("/download")

        assert response.status_code == 200
        assert response.headers["Content-Disposition"] == 'attachment; filename="sample.txt"'
        assert await response.get_data(as_text=True) == SAMPLE_TEXT

    @pytest.mark.asyncio
    async def test_error(self, client):
        response = await client.get("/err")

        assert response.status_code == 500
        assert await response.get_data(as_text=True) == "Error : duar"

    @pytest.mark.asyncio
    async def test_view(self, client):
        response = await client.get("/view")

        body = await response.get_data(as_text=True)
        assert response.status_code == 200
        assert "Hello Title" in body
        assert "Hello Header" in body
        assert "Hello Content" in body


class TestMiddleware:
    """Tests for app-wide and group middleware."""

    @pytest.mark.asyncio
    async def test_response_time_header(self, client):
        response = await client.get("/")

        assert response.headers[RESPONSE_TIME_HEADER].endswith("ms")

    @pytest.mark.asyncio
    async def test_response_time_header_on_errors(self, client):
        response = await client.get("/err")

        assert RESPONSE_TIME_HEADER in response.headers

    @pytest.mark.asyncio
    async def test_request_is_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="common.middleware.request_logging")

        await client.get("/hello?name=Dion")

        assert "GET /hello -> 200" in caplog.text

    @pytest.mark.asyncio
    async def test_group_header_only_on_groups(self, client):
        grouped = await client.get("/api/world")
        ungrouped = await client.get("/hello")

        assert grouped.headers[ROUTE_GROUP_HEADER] == "api"
        assert ROUTE_GROUP_HEADER not in ungrouped.headers


class TestLifecycle:
    """Tests for startup hooks."""

    @pytest.mark.asyncio
    async def test_startup_announces_process_role(self, app, caplog):
        caplog.set_level(logging.INFO, logger="showcase.app")

        async with app.test_app():
            pass

        assert "This is parent process" in caplog.text
