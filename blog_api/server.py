"""Start and stop the API server from Python.

Integration suites that need a real socket call ``run_server()`` before
the tests and ``close_server()`` after them.
"""
import threading
import time

import structlog
import uvicorn

from . import database
from .config import HOST, PORT

log = structlog.get_logger()

_server: uvicorn.Server | None = None
_thread: threading.Thread | None = None


def run_server(
    database_url: str | None = None,
    host: str = HOST,
    port: int = PORT,
    timeout: float = 10.0,
) -> uvicorn.Server:
    """Serve the app on a background thread.

    Args:
        database_url: Database to use instead of DATABASE_URL
        host: Bind host
        port: Bind port
        timeout: Seconds to wait for the server to accept requests

    Returns:
        The running uvicorn server

    Raises:
        RuntimeError: A server is already running or startup failed
        TimeoutError: The server did not start in time
    """
    global _server, _thread
    if _server is not None:
        raise RuntimeError("Server is already running")

    if database_url:
        database.use_database(database_url)

    from .main import app

    config = uvicorn.Config(app, host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, name="blog-api-server", daemon=True)
    thread.start()

    deadline = time.monotonic() + timeout
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError(f"Server failed to start on {host}:{port}")
        if time.monotonic() > deadline:
            server.should_exit = True
            thread.join()
            raise TimeoutError(f"Server did not start within {timeout}s")
        time.sleep(0.05)

    _server, _thread = server, thread
    log.info("server_started", host=host, port=port, database=str(database.DATABASE_PATH))
    return server


def close_server(timeout: float = 10.0) -> None:
    """Stop the server started by run_server. No-op when none is running."""
    global _server, _thread
    if _server is None:
        return

    log.info("server_closing")
    _server.should_exit = True
    _thread.join(timeout)
    _server, _thread = None, None
