"""A one-shot local web server that captures the OAuth redirect URL."""

from __future__ import annotations

import socket
from typing import Callable

READ_SIZE = 1000

SUCCESS_PAGE = (
    "<!DOCTYPE html>\n"
    "<html><head><meta charset=\"utf-8\"><title>Signed in</title></head>\n"
    "<body><p>Authentication complete. You can close this window.</p></body>\n"
    "</html>\n"
)


class RedirectError(Exception):
    """Raised when the redirect request cannot be read or the server cannot start."""


def parse_request(data: bytes) -> str:
    """Return the request target (the second word) of a raw HTTP request."""
    try:
        request = data[:READ_SIZE].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RedirectError(f"Invalid UTF-8 sequence: {exc}") from exc
    words = request.split()
    if len(words) < 2:
        raise RedirectError("Malformed request")
    return words[1]


def _respond_with_success(conn: socket.socket) -> None:
    conn.sendall(f"HTTP/1.1 200 OK\r\n\r\n{SUCCESS_PAGE}".encode("utf-8"))


def _respond_with_error(error_message: str, conn: socket.socket) -> None:
    print(f"Error: {error_message}")
    response = f"HTTP/1.1 400 Bad Request\r\n\r\n400 - Bad Request - {error_message}"
    conn.sendall(response.encode("utf-8"))


def handle_connection(conn: socket.socket) -> str | None:
    """Read one request from ``conn``, answer it, and return its URL if well formed."""
    data = conn.recv(READ_SIZE)
    try:
        url = parse_request(data)
    except RedirectError as exc:
        _respond_with_error(str(exc), conn)
        return None
    _respond_with_success(conn)
    return url


def redirect_uri_web_server(
    port: int, on_listen: Callable[[int], object] | None = None
) -> str:
    """Listen on 127.0.0.1 until a well-formed request arrives and return its URL.

    ``on_listen`` is called with the bound port once the server is listening,
    which is the moment to send the user to the authorisation page.
    """
    try:
        server = socket.create_server(("127.0.0.1", port))
    except OSError as exc:
        print(f"Error: {exc}")
        raise RedirectError(str(exc)) from exc

    with server:
        if on_listen is not None:
            on_listen(server.getsockname()[1])
        while True:
            try:
                conn, _ = server.accept()
            except OSError as exc:
                print(f"Error: {exc}")
                continue
            with conn:
                url = handle_connection(conn)
            if url is not None:
                return url