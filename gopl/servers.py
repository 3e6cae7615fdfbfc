"""Small echo, counter and request-describing HTTP servers."""

from __future__ import annotations

import argparse
import io
import re
import sys
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qsl, unquote, urlsplit

from .lissajous import CYCLES, NFRAMES, lissajous

KINDS = ("server1", "server2", "server3")

_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r",
    "\t": "\\t", "\v": "\\v", "\\": "\\\\", '"': '\\"',
}
_TEXT = "text/plain; charset=utf-8"


class Counter:
    """A count that is safe to increment from many threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self) -> int:
        """Add one and return the new count."""
        with self._lock:
            self._count += 1
            return self._count

    @property
    def count(self) -> int:
        with self._lock:
            return self._count


def _quote(s: str) -> str:
    parts = []
    for ch in s:
        cp = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif cp < 0x20 or cp == 0x7F:
            parts.append(f"\\x{cp:02x}")
        elif cp < 0x10000:
            parts.append(f"\\u{cp:04x}")
        else:
            parts.append(f"\\U{cp:08x}")
    return '"' + "".join(parts) + '"'


def _quote_list(values: Sequence[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def echo_path(path: str) -> str:
    """Return the echo line for a request path."""
    return f"URL.Path = {_quote(path)}\n"


def describe_request(
    method: str,
    url: str,
    proto: str,
    headers: Mapping[str, Sequence[str]],
    host: str,
    remote_addr: str,
    form: Mapping[str, Sequence[str]],
) -> str:
    """Describe a request: its line, headers, host, peer and form values."""
    lines = [f"{method} {url} {proto}\n"]
    lines += [f"Header[{_quote(k)}] = {_quote_list(v)}\n" for k, v in headers.items()]
    lines.append(f"Host = {_quote(host)}\n")
    lines.append(f"RemoteAddr = {_quote(remote_addr)}\n")
    lines += [f"Form[{_quote(k)}] = {_quote_list(v)}\n" for k, v in form.items()]
    return "".join(lines)


@dataclass
class _Request:
    method: str
    target: str
    path: str
    proto: str
    host: str
    remote_addr: str
    headers: dict[str, list[str]] = field(default_factory=dict)
    form: dict[str, list[str]] = field(default_factory=dict)

    def form_value(self, name: str) -> str:
        values = self.form.get(name)
        return values[0] if values else ""


Route = Callable[[_Request], "tuple[bytes, str]"]


def _canonical(name: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def _atoi(text: str) -> int:
    return int(text) if re.fullmatch(r"[+-]?[0-9]+", text) else 0


class _Handler(BaseHTTPRequestHandler):
    routes: dict[str, Route] = {}

    def _header_lists(self) -> dict[str, list[str]]:
        headers: dict[str, list[str]] = {}
        for name, value in self.headers.items():
            key = _canonical(name)
            if key != "Host":
                headers.setdefault(key, []).append(value)
        return headers

    def _form(self, query: str) -> dict[str, list[str]]:
        form: dict[str, list[str]] = {}
        ctype = self.headers.get("Content-Type", "")
        if self.command in ("POST", "PUT", "PATCH") and ctype.startswith(
            "application/x-www-form-urlencoded"
        ):
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length).decode("utf-8", "replace")
            for key, value in parse_qsl(body, keep_blank_values=True):
                form.setdefault(key, []).append(value)
        for key, value in parse_qsl(query, keep_blank_values=True):
            form.setdefault(key, []).append(value)
        return form

    def _remote_addr(self) -> str:
        host, port = self.client_address[:2]
        return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"

    def _dispatch(self) -> None:
        url = urlsplit(self.path)
        request = _Request(
            method=self.command,
            target=self.path,
            path=unquote(url.path),
            proto=self.request_version,
            host=self.headers.get("Host", ""),
            remote_addr=self._remote_addr(),
            headers=self._header_lists(),
            form=self._form(url.query),
        )
        route = self.routes.get(request.path, self.routes["/"])
        body, ctype = route(request)
        self.send_response(200)
        self.send_header("Content-Type", ctype)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = _dispatch

    def log_message(self, format: str, *args) -> None:
        pass


def _text(s: str) -> tuple[bytes, str]:
    return s.encode(), _TEXT


def _routes(kind: str) -> dict[str, Route]:
    if kind == "server1":
        return {"/": lambda r: _text(echo_path(r.path))}
    if kind == "server2":
        counter = Counter()

        def handler(r: _Request) -> tuple[bytes, str]:
            counter.increment()
            return _text(echo_path(r.path))

        return {"/": handler, "/count": lambda r: _text(f"Count {counter.count}\n")}
    if kind == "server3":

        def describe(r: _Request) -> tuple[bytes, str]:
            return _text(describe_request(
                r.method, r.target, r.proto, r.headers, r.host, r.remote_addr, r.form
            ))

        def animation(r: _Request) -> tuple[bytes, str]:
            cycles, nframes = CYCLES, NFRAMES
            if r.form_value("cycles"):
                cycles = _atoi(r.form_value("cycles"))
            if r.form_value("nframes"):
                nframes = _atoi(r.form_value("nframes"))
            buffer = io.BytesIO()
            lissajous(buffer, cycles, nframes)
            return buffer.getvalue(), "image/gif"

        return {"/": describe, "/lissajous": animation}
    raise ValueError(f"unknown server kind: {kind!r}")


def make_server(kind: str, host: str = "localhost", port: int = 8000) -> ThreadingHTTPServer:
    """Build (but do not start) the named server: server1, server2 or server3."""
    routes = _routes(kind)

    class Handler(_Handler):
        pass

    Handler.routes = routes
    return ThreadingHTTPServer((host, port), Handler)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="servers")
    parser.add_argument("kind", nargs="?", choices=KINDS, default="server1")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    options = parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        with make_server(options.kind, options.host, options.port) as server:
            server.serve_forever()
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0