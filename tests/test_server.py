"""Tests for run_server / close_server against a real socket."""
import socket

import httpx
import pytest

from blog_api.server import run_server, close_server


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def live_server(patched_config):
    port = _free_port()
    run_server(str(patched_config["db_path"]), host="127.0.0.1", port=port)
    yield f"http://127.0.0.1:{port}"
    close_server()


def test_server_serves_crud(live_server):
    created = httpx.post(
        f"{live_server}/posts",
        json={"author": {"firstName": "A", "lastName": "B"}, "title": "T", "content": "C"}
    )
    assert created.status_code == 201
    post_id = created.json()["id"]

    listed = httpx.get(f"{live_server}/posts")
    assert listed.status_code == 200
    assert [p["id"] for p in listed.json()["posts"]] == [post_id]

    assert httpx.delete(f"{live_server}/posts/{post_id}").status_code == 204


def test_second_run_server_fails(live_server):
    with pytest.raises(RuntimeError):
        run_server(port=_free_port())


def test_close_server_without_server_is_noop():
    close_server()
